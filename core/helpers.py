"""
Core Helpers

Utility functions that reshape browser input into upstream form fields
and upstream JSON back into relay responses.
"""

import re
from typing import List, Optional

from config.settings import (
    PHONE_PREFIX, PHONE_LOCAL_DIGITS,
    BATCH_MAX_COUNT, BATCH_AMOUNT_HIGH, BATCH_AMOUNT_LOW,
    INSUFFICIENT_BALANCE_MARKERS, ACCOUNT_MISSING_MARKERS,
)
from core.errors import ValidationError
from models import UpstreamResult

_NON_DIGIT_RE = re.compile(r"\D")
_CODE_SPLIT_RE = re.compile(r"[,\n\r]+")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")

PHONE_FULL_DIGITS = len(PHONE_PREFIX) + PHONE_LOCAL_DIGITS

INVALID_PHONE_MESSAGE = (
    "Phone number must be 10 digits (e.g., 9308201445). "
    "Country code 63 will be added automatically."
)


# ─────────────────────────────────────────────
# Phone numbers
# ─────────────────────────────────────────────

def digits_only(value) -> str:
    return _NON_DIGIT_RE.sub("", str(value or ""))


def normalize_phone(raw) -> str:
    """Strip non-digits and prefix the country code when it is missing."""
    digits = digits_only(raw)
    if not digits.startswith(PHONE_PREFIX):
        digits = PHONE_PREFIX + digits
    return digits


def validate_phone(raw) -> str:
    """Normalize *raw* and require exactly 63 + 10 digits."""
    phone = normalize_phone(raw)
    if len(phone) != PHONE_FULL_DIGITS:
        raise ValidationError(INVALID_PHONE_MESSAGE)
    return phone


def format_phone_input(value) -> str:
    """Format a phone field as the user types.

    Keeps a leading 63 (truncated to 12 digits), adds 63 once 10 digits are
    entered, and leaves shorter input untouched.
    """
    digits = digits_only(value)
    if not digits:
        return ""
    if digits.startswith(PHONE_PREFIX):
        return digits[:PHONE_FULL_DIGITS]
    if len(digits) < PHONE_LOCAL_DIGITS:
        return digits
    return PHONE_PREFIX + digits[:PHONE_LOCAL_DIGITS]


def phone_display_value(value) -> str:
    """Show the 10 local digits of a full 63-prefixed number."""
    digits = digits_only(value)
    if digits.startswith(PHONE_PREFIX) and len(digits) == PHONE_FULL_DIGITS:
        return digits[len(PHONE_PREFIX):]
    return digits


def full_phone_number(value) -> str:
    """Full number for API calls, or "" when the input is incomplete."""
    digits = digits_only(value)
    if digits.startswith(PHONE_PREFIX):
        return digits[:PHONE_FULL_DIGITS]
    if len(digits) < PHONE_LOCAL_DIGITS:
        return ""
    return PHONE_PREFIX + digits[:PHONE_LOCAL_DIGITS]


# ─────────────────────────────────────────────
# Request payloads
# ─────────────────────────────────────────────

def require_fields(payload: dict, *names: str, message: Optional[str] = None) -> None:
    """Raise ValidationError unless every named field is present and non-empty."""
    missing = [name for name in names if not payload.get(name)]
    if missing:
        raise ValidationError(message or f"Missing required field(s): {', '.join(missing)}")


def parse_code_list(text) -> List[str]:
    """Split pasted gift card codes on commas and line breaks."""
    if isinstance(text, (list, tuple)):
        text = "\n".join(str(c) for c in text)
    return [c.strip() for c in _CODE_SPLIT_RE.split(text or "") if c.strip()]


def to_int(value, default: int = 0) -> int:
    """Leading integer of *value* ("3 pages" -> 3); junk gives *default*."""
    match = _LEADING_INT_RE.match(str(value)) if value is not None else None
    return int(match.group(1)) if match else default


def clamp_count(value, default: int = BATCH_MAX_COUNT) -> int:
    """Parse a batch size; missing, zero or garbage means *default*."""
    count = to_int(value) or default
    return min(max(count, 1), BATCH_MAX_COUNT)


def batch_amounts() -> List[str]:
    """Amount ladder used by batch sends, highest first."""
    return [f"{a:.2f}" for a in range(BATCH_AMOUNT_HIGH, BATCH_AMOUNT_LOW - 1, -1)]


def money(value) -> str:
    """Format an upstream amount as a 2-decimal string; junk counts as zero."""
    return f"{to_float(value):.2f}"


def to_float(value) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


# ─────────────────────────────────────────────
# Upstream responses
# ─────────────────────────────────────────────

def extract_token(body) -> Optional[str]:
    """Pull the bearer token out of a login/register response."""
    if not isinstance(body, dict):
        return None
    data = body.get("data") if isinstance(body.get("data"), dict) else {}
    return (
        data.get("token")
        or body.get("token")
        or data.get("access_token")
        or body.get("access_token")
    )


def is_account_missing(body) -> bool:
    """Login answered success=false because the phone has no account yet."""
    if not isinstance(body, dict) or body.get("success") is not False:
        return False
    message = body.get("message") or ""
    return any(marker in message for marker in ACCOUNT_MISSING_MARKERS)


def is_insufficient_balance(message) -> bool:
    msg = (message or "").lower()
    return any(marker in msg for marker in INSUFFICIENT_BALANCE_MARKERS)


def upstream_message(result: UpstreamResult, default: str) -> str:
    """Upstream error message, falling back to *default*."""
    return result.message or default
