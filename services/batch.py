"""
Batch fan-out: run N independent upstream calls in parallel and
collect them back in submission order.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, TypeVar

from config.settings import BATCH_MAX_WORKERS
from core.helpers import money, to_float
from models import BatchSendItem, BatchRedeemItem, BatchSummary

T = TypeVar("T")
R = TypeVar("R")


def fan_out(
    func: Callable[[int, T], R],
    items: Iterable[T],
    max_workers: int = BATCH_MAX_WORKERS,
) -> List[R]:
    """Call ``func(index, item)`` for every item concurrently.

    Results come back sorted by ``index``. An exception in any call
    propagates once all calls have finished.
    """
    items = list(items)
    if not items:
        return []

    workers = max(1, min(max_workers, len(items)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="fan_out") as executor:
        futures = [executor.submit(func, i, item) for i, item in enumerate(items)]
        results = [f.result() for f in futures]

    # Items without an index stay in submission order
    if all(hasattr(r, "index") for r in results):
        results.sort(key=lambda r: r.index)
    return results


def summarize_send(items: List[BatchSendItem]) -> BatchSummary:
    """Success count and total for a batch send. Any stop flag marks the batch stopped."""
    summary = BatchSummary(attempted=len(items))
    total = 0.0
    for item in sorted(items, key=lambda i: i.index):
        if item.success:
            summary.success_count += 1
            total += to_float(item.amount)
        elif item.error:
            summary.errors.append(item.error)
        if item.stop:
            summary.stopped = True
    summary.total_amount = money(total)
    return summary


def summarize_redeem(items: List[BatchRedeemItem]) -> BatchSummary:
    """Success count and total for a batch redeem; final_balance is the last successful balance."""
    summary = BatchSummary(attempted=len(items))
    total = 0.0
    for item in sorted(items, key=lambda i: i.index):
        if item.success:
            summary.success_count += 1
            total += to_float(item.amount)
            summary.final_balance = item.new_promotional_balance
        elif item.error:
            summary.errors.append(item.error)
    summary.total_amount = money(total)
    return summary
