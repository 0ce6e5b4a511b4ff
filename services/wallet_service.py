"""
Wallet balance and account lifecycle calls.
"""

from config.settings import (
    PATH_ACTIVATE_BALANCE, PATH_USER, PATH_DEACTIVATE, DEFAULT_CURRENCY,
)
from core.errors import ValidationError
from core.helpers import money, upstream_message
from core.session import get_session
from services.zus_client import zus_client


def _require_bearer(bearer) -> None:
    if not bearer:
        raise ValidationError("Bearer token is required")


def activate_balance(bearer: str) -> dict:
    _require_bearer(bearer)

    result = zus_client.post(PATH_ACTIVATE_BALANCE, data={}, bearer=bearer, device_id=get_session().device_id)

    if result.error:
        return {"success": False, "error": result.error}
    if result.status == 200:
        return {"success": True, "message": "Balance activated successfully!"}
    return {"success": False, "error": upstream_message(result, f"HTTP {result.status} error occurred.")}


def get_balance(bearer: str) -> dict:
    """Real, promotional and total balance from the user profile."""
    _require_bearer(bearer)

    result = zus_client.get(PATH_USER, bearer=bearer, device_id=get_session().device_id)

    if result.error:
        return {"success": False, "error": result.error}

    balance = (result.data or {}).get("balance")
    if result.status == 200 and isinstance(balance, dict) and balance:
        return {
            "success": True,
            "balance": money(balance.get("real_balance")),
            "promotional_balance": money(balance.get("promotion_balance")),
            "total_balance": money(balance.get("balance")),
            "currency": balance.get("currency") or DEFAULT_CURRENCY,
            "promotion_balance_expiry_date": balance.get("promotion_balance_expiry_date"),
        }

    return {"success": False, "error": upstream_message(result, "Unable to fetch balance")}


def delete_account(bearer: str, reason: str = "") -> dict:
    """Deactivate the bearer's account. 200 and 204 both count as success."""
    _require_bearer(bearer)

    result = zus_client.delete(
        PATH_DEACTIVATE,
        data={"reason": reason or ""},
        bearer=bearer,
        device_id=get_session().device_id,
    )

    if result.error:
        return {"success": False, "error": result.error}
    if result.status in (200, 204):
        return {"success": True, "message": "Account deactivated successfully!"}
    return {"success": False, "error": upstream_message(result, f"HTTP {result.status} error occurred.")}
