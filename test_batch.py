"""
Tests for the fan-out orchestrator and batch summaries.
"""
import threading
import time

import pytest

from models import BatchSendItem, BatchRedeemItem
from services.batch import fan_out, summarize_send, summarize_redeem


def _send_item(index, success=False, amount="300.00", stop=False, error=None):
    return BatchSendItem(
        index=index, amount=amount, sender_name="A", recipient_name="B",
        recipient_phone="639308201445", success=success, stop=stop,
        insufficient=stop, error=error,
    )


class TestFanOut:

    def test_results_sorted_by_index(self):
        # Earlier items sleep longer so they finish last
        def work(index, item):
            time.sleep(0.01 * (5 - index))
            return _send_item(index, amount=item)

        results = fan_out(work, ["a", "b", "c", "d", "e"], max_workers=5)
        assert [r.index for r in results] == [0, 1, 2, 3, 4]
        assert [r.amount for r in results] == ["a", "b", "c", "d", "e"]

    def test_runs_concurrently(self):
        barrier = threading.Barrier(4, timeout=2)

        def work(index, item):
            barrier.wait()
            return index

        assert fan_out(work, range(4), max_workers=4) == [0, 1, 2, 3]

    def test_plain_results_keep_submission_order(self):
        assert fan_out(lambda i, x: x * 2, [3, 1, 2]) == [6, 2, 4]

    def test_empty_input(self):
        assert fan_out(lambda i, x: x, []) == []

    def test_exception_propagates(self):
        def work(index, item):
            if item == "bad":
                raise RuntimeError("boom")
            return item

        with pytest.raises(RuntimeError):
            fan_out(work, ["ok", "bad"])


class TestSummaries:

    def test_send_summary_counts_and_totals(self):
        items = [
            _send_item(0, success=True, amount="300.00"),
            _send_item(1, success=True, amount="299.00"),
            _send_item(2, error="HTTP 500"),
        ]
        summary = summarize_send(items)
        assert summary.attempted == 3
        assert summary.success_count == 2
        assert summary.total_amount == "599.00"
        assert summary.stopped is False
        assert summary.errors == ["HTTP 500"]

    def test_send_summary_stop_flag(self):
        items = [_send_item(1, success=True), _send_item(0, stop=True)]
        summary = summarize_send(items)
        assert summary.stopped is True
        assert summary.success_count == 1

    def test_redeem_summary_final_balance_follows_index(self):
        items = [
            BatchRedeemItem(index=2, code="C", success=True, amount="5.00", new_promotional_balance="30"),
            BatchRedeemItem(index=0, code="A", success=True, amount="10.00", new_promotional_balance="10"),
            BatchRedeemItem(index=1, code="B", error="Invalid code"),
        ]
        summary = summarize_redeem(items)
        assert summary.success_count == 2
        assert summary.total_amount == "15.00"
        assert summary.final_balance == "30"
        assert summary.errors == ["Invalid code"]

    def test_redeem_summary_no_success(self):
        summary = summarize_redeem([BatchRedeemItem(index=0, code="A", error="x")])
        assert summary.final_balance is None
        assert summary.total_amount == "0.00"
