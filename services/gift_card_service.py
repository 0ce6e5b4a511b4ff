"""
Gift card issuance, redemption and listing.

Batch operations fan out one upstream call per item through
services.batch and report per-item results plus a summary.
"""

from typing import List, Optional

from app_logger import get_logger, mask_phone
from config.settings import (
    PATH_CREATE_GIFT_CARD, PATH_REDEEM, PATH_INCOMING_GIFT_CARDS,
    PATH_REDEEMED_GIFT_CARDS, REDEEMED_MAX_PAGES,
    DEFAULT_TEMPLATE_ID, DEFAULT_PAYMENT_METHOD, DEFAULT_SENDER_NAME,
    DEFAULT_RECIPIENT_NAME, DEFAULT_GIFT_MESSAGE,
)
from core.errors import ValidationError
from core.helpers import (
    require_fields, parse_code_list, clamp_count, batch_amounts, money, to_float, to_int,
    is_insufficient_balance, upstream_message,
)
from core.session import get_session
from models import BatchSendItem, BatchRedeemItem, UpstreamResult
from services.batch import fan_out, summarize_send, summarize_redeem
from services.zus_client import zus_client

logger = get_logger("zus_relay")


def _require_bearer(bearer) -> None:
    if not bearer:
        raise ValidationError("Bearer token is required")


def _device_id() -> str:
    return get_session().device_id


# ─────────────────────────────────────────────
# Sending
# ─────────────────────────────────────────────

def send_custom_gift_card(bearer: str, payload: dict) -> dict:
    """Send a single gift card with caller-chosen amount and names."""
    _require_bearer(bearer)
    require_fields(
        payload, "recipient_phone_number", "amount", "sender_name", "recipient_name",
        message="Recipient phone, amount, sender name, and recipient name are required",
    )

    result = zus_client.post(
        PATH_CREATE_GIFT_CARD,
        data={
            "template_id": payload.get("template_id") or DEFAULT_TEMPLATE_ID,
            "amount": payload["amount"],
            "payment_method": payload.get("payment_method") or DEFAULT_PAYMENT_METHOD,
            "sender_name": payload["sender_name"],
            "recipient_name": payload["recipient_name"],
            "message": payload.get("message") or DEFAULT_GIFT_MESSAGE,
            "recipient_phone_number": payload["recipient_phone_number"],
        },
        bearer=bearer,
        device_id=_device_id(),
    )

    if result.error:
        return {"success": False, "error": result.error}

    data = result.data
    if result.status == 200 and data:
        return {
            "success": True,
            "data": data,
            "ref_id": data.get("ref_id"),
            "amount": data.get("amount"),
            "message": "Gift card sent successfully!",
        }

    return {"success": False, "error": upstream_message(result, "Failed to send gift card")}


def _send_item_from_result(item: BatchSendItem, result: UpstreamResult) -> BatchSendItem:
    """Classify one batch-send response."""
    item.status = result.status
    if result.status == 200 and result.body:
        data = result.data or {}
        if is_insufficient_balance(result.message):
            item.insufficient = True
            item.stop = True
        elif data.get("ref_id"):
            item.success = True
            item.ref_id = data["ref_id"]
        else:
            item.error = result.message or "Unknown API response"
    else:
        item.error = f"HTTP {result.status}"
    return item


def batch_send(
    bearer: Optional[str],
    recipient_phone: str,
    sender_name: Optional[str] = None,
    recipient_name: Optional[str] = None,
    message: Optional[str] = None,
    count=None,
) -> dict:
    """Fire up to 100 identical gift card sends concurrently.

    Amounts cycle down the 300.00 → 250.00 ladder by index. An
    insufficient-balance answer marks that item ``stop`` and the summary
    ``stopped``.
    """
    if not recipient_phone:
        raise ValidationError("Recipient phone number is required")

    num = clamp_count(count)
    amounts = batch_amounts()
    sender = sender_name or DEFAULT_SENDER_NAME
    recipient = recipient_name or DEFAULT_RECIPIENT_NAME
    text = message or DEFAULT_GIFT_MESSAGE
    device_id = _device_id()

    logger.info(f"Batch send start | count={num} | recipient={mask_phone(recipient_phone)}")

    def send_one(index: int, amount: str) -> BatchSendItem:
        item = BatchSendItem(
            index=index,
            amount=amount,
            sender_name=sender,
            recipient_name=recipient,
            recipient_phone=recipient_phone,
        )
        result = zus_client.post(
            PATH_CREATE_GIFT_CARD,
            data={
                "template_id": DEFAULT_TEMPLATE_ID,
                "amount": amount,
                "payment_method": DEFAULT_PAYMENT_METHOD,
                "sender_name": sender,
                "recipient_name": recipient,
                "message": text,
                "recipient_phone_number": recipient_phone,
            },
            bearer=bearer,
            bearer_fallback=False,
            device_id=device_id,
        )
        return _send_item_from_result(item, result)

    items = fan_out(send_one, [amounts[i % len(amounts)] for i in range(num)])
    summary = summarize_send(items)

    logger.info(
        f"Batch send done | success={summary.success_count}/{summary.attempted} | "
        f"total={summary.total_amount} | stopped={summary.stopped}"
    )
    return {
        "success": True,
        "results": [item.to_dict() for item in items],
        "summary": summary.to_dict(),
    }


# ─────────────────────────────────────────────
# Redeeming
# ─────────────────────────────────────────────

def _redeem_fields(data: dict) -> dict:
    return {
        "amount": data.get("amount") or "0.00",
        "new_promotional_balance": data.get("new_promotional_balance") or "0",
        "description": data.get("description") or "",
        "balance_log_ref_no": data.get("balance_log_ref_no") or "",
    }


def redeem_gift_card(bearer: str, code: str) -> dict:
    """Redeem one gift card code into the bearer's wallet."""
    if not bearer or not code:
        raise ValidationError("Bearer token and code are required")

    result = zus_client.post(PATH_REDEEM, data={"code": code}, bearer=bearer, device_id=_device_id())

    if result.error:
        return {"success": False, "error": result.error}

    if result.status == 200 and result.data:
        return {"success": True, **_redeem_fields(result.data)}

    return {"success": False, "error": upstream_message(result, "Failed to redeem gift card")}


def _redeem_codes(bearer: str, codes: List[str]) -> dict:
    device_id = _device_id()

    def redeem_one(index: int, code: str) -> BatchRedeemItem:
        item = BatchRedeemItem(index=index, code=code)
        result = zus_client.post(PATH_REDEEM, data={"code": code}, bearer=bearer, device_id=device_id)
        if result.status == 200 and result.data:
            item.success = True
            for key, value in _redeem_fields(result.data).items():
                setattr(item, key, value)
        else:
            item.error = result.message or result.error or f"HTTP {result.status}"
        return item

    items = fan_out(redeem_one, codes)
    summary = summarize_redeem(items)
    logger.info(
        f"Batch redeem done | success={summary.success_count}/{summary.attempted} | "
        f"total={summary.total_amount}"
    )
    return {
        "success": True,
        "results": [item.to_dict() for item in items],
        "summary": summary.to_dict(),
    }


def batch_redeem(bearer: str, codes) -> dict:
    """Redeem every code in a comma / newline separated list concurrently."""
    if not bearer or not codes:
        raise ValidationError("Bearer token and codes are required")

    code_list = parse_code_list(codes)
    if not code_list:
        raise ValidationError("No valid gift card codes found")

    return _redeem_codes(bearer, code_list)


# ─────────────────────────────────────────────
# Listing
# ─────────────────────────────────────────────

def get_incoming_gift_cards(bearer: str, page=1) -> dict:
    """One page of gift cards received by the bearer."""
    _require_bearer(bearer)

    result = zus_client.get(
        PATH_INCOMING_GIFT_CARDS,
        params={"page": page or 1},
        bearer=bearer,
        device_id=_device_id(),
    )

    if result.error:
        return {"success": False, "error": result.error}

    data = result.data
    if result.status == 200 and data:
        return {
            "success": True,
            "data": data,
            "gift_cards": data.get("data") or [],
            "current_page": data.get("current_page") or 1,
            "last_page": data.get("last_page") or 1,
            "total": data.get("total") or 0,
        }

    return {"success": False, "error": upstream_message(result, f"HTTP {result.status} error occurred.")}


def redeem_incoming_page(bearer: str, page=1) -> dict:
    """Redeem every code listed on one page of incoming gift cards."""
    listing = get_incoming_gift_cards(bearer, page)
    if not listing["success"]:
        return listing

    codes = [card.get("code") for card in listing["gift_cards"] if isinstance(card, dict) and card.get("code")]
    if not codes:
        return {
            "success": False,
            "error": "No gift card codes found on this page",
            "current_page": listing["current_page"],
            "last_page": listing["last_page"],
        }

    redeemed = _redeem_codes(bearer, codes)
    redeemed["current_page"] = listing["current_page"]
    redeemed["last_page"] = listing["last_page"]
    return redeemed


def _sum_amounts(cards) -> float:
    if not isinstance(cards, list):
        return 0.0
    return sum(to_float(card.get("amount")) for card in cards if isinstance(card, dict))


def get_redeemed_total(bearer: str) -> dict:
    """Count and sum every gift card the bearer has redeemed.

    Page 1 gives the count and page total; remaining pages are fetched in
    parallel and pages that fail are skipped.
    """
    _require_bearer(bearer)
    device_id = _device_id()

    def fetch_page(_index: int, page: int) -> UpstreamResult:
        return zus_client.get(
            PATH_REDEEMED_GIFT_CARDS,
            params={"page": page},
            bearer=bearer,
            device_id=device_id,
        )

    first = fetch_page(0, 1)
    if first.error:
        return {"success": False, "error": first.error}

    first_data = first.data
    if first.status != 200 or not first_data:
        return {"success": False, "error": upstream_message(first, "Unable to fetch redeemed gift cards")}

    total_count = first_data.get("total") or 0
    last_page = max(to_int(first_data.get("last_page"), 1), 1)
    if last_page > REDEEMED_MAX_PAGES:
        logger.warning(f"Redeemed list capped | last_page={last_page} | max={REDEEMED_MAX_PAGES}")
        last_page = REDEEMED_MAX_PAGES
    total_amount = _sum_amounts(first_data.get("data"))

    if last_page > 1:
        for page_result in fan_out(fetch_page, range(2, last_page + 1)):
            page_data = page_result.data
            if page_result.status == 200 and isinstance(page_data, dict):
                total_amount += _sum_amounts(page_data.get("data"))
            else:
                logger.warning(f"Redeemed list page skipped | status={page_result.status}")

    return {"success": True, "total": total_count, "totalAmount": money(total_amount)}
