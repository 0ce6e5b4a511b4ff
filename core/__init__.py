"""Core package - exports core functionality."""

from .errors import RelayError, ValidationError
from .session import (
    sessions,
    generate_device_id,
    get_session,
    clear_session,
    session_exists,
)
from .helpers import (
    normalize_phone,
    validate_phone,
    format_phone_input,
    phone_display_value,
    full_phone_number,
    require_fields,
    parse_code_list,
    clamp_count,
    batch_amounts,
    money,
    to_int,
    extract_token,
    is_account_missing,
    is_insufficient_balance,
    upstream_message,
)

__all__ = [
    "RelayError",
    "ValidationError",
    "sessions",
    "generate_device_id",
    "get_session",
    "clear_session",
    "session_exists",
    "normalize_phone",
    "validate_phone",
    "format_phone_input",
    "phone_display_value",
    "full_phone_number",
    "require_fields",
    "parse_code_list",
    "clamp_count",
    "batch_amounts",
    "money",
    "to_int",
    "extract_token",
    "is_account_missing",
    "is_insufficient_balance",
    "upstream_message",
]
