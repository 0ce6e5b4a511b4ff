"""
Phone OTP login and account registration against the upstream auth API.
"""

from typing import Optional

from app_logger import get_logger, mask_phone
from config.settings import (
    PATH_AUTH_PHONE, PATH_AUTH_LOGIN, PATH_AUTH_REGISTER, CALLING_CODE_ID,
)
from core.errors import ValidationError
from core.helpers import (
    normalize_phone, validate_phone, require_fields, extract_token, is_account_missing,
    format_phone_input, phone_display_value, full_phone_number,
    upstream_message,
)
from core.session import get_session, clear_session, session_exists
from models import ErrorType, UpstreamResult
from services.zus_client import zus_client

logger = get_logger("zus_relay")


def _network_failure(result: UpstreamResult) -> dict:
    return {"success": False, "error": result.error, "error_type": ErrorType.NETWORK.value}


def _status_failure(result: UpstreamResult, rate_limit_msg: str, validation_msg: str, default_msg: str) -> dict:
    """Map a failed upstream auth response onto the relay's error shape."""
    if result.status == 429:
        error_type, default = ErrorType.RATE_LIMIT, rate_limit_msg
    elif result.status == 422:
        error_type, default = ErrorType.VALIDATION, validation_msg
    else:
        error_type, default = ErrorType.UNKNOWN, default_msg
    return {
        "success": False,
        "error": upstream_message(result, default),
        "error_type": error_type.value,
        "status_code": result.status,
    }


def request_otp(phone: str, bearer: Optional[str] = None, session_id: Optional[str] = None) -> dict:
    """Ask the upstream to text a verification code to *phone*.

    A bearer passed here is remembered on the session as the signup bearer
    and reused by login and registration.
    """
    if not phone:
        raise ValidationError("Phone number is required")
    processed_phone = validate_phone(phone)

    session = get_session(session_id)
    if bearer:
        session.signup_bearer = bearer
    session.phone = processed_phone

    logger.info(f"Requesting OTP | phone={mask_phone(processed_phone)} | session={session_id or 'default'}")
    result = zus_client.post(
        PATH_AUTH_PHONE,
        data={
            "phone": processed_phone,
            "type": "SMS",
            "calling_code_id": CALLING_CODE_ID,
        },
        bearer=bearer,
        device_id=session.device_id,
    )

    if result.error:
        return _network_failure(result)

    if result.status == 200 and isinstance(result.body, dict) and result.body.get("success"):
        return {"success": True, "message": "Verification code sent to your phone!"}

    return _status_failure(
        result,
        rate_limit_msg="Please wait a while before requesting a new code.",
        validation_msg="Validation error. Please check your input.",
        default_msg="Failed to send OTP",
    )


def get_bearer_token(phone: Optional[str], otp_code: str, session_id: Optional[str] = None) -> dict:
    """Exchange an OTP for a bearer token.

    A phone with no account yet comes back as ``new_user`` so the caller can
    continue with registration on the same session.
    """
    if not otp_code:
        raise ValidationError("OTP code is required")

    session = get_session(session_id)
    if phone:
        processed_phone = normalize_phone(phone)
    elif session.phone:
        processed_phone = session.phone
    else:
        raise ValidationError("Phone number is required")

    result = zus_client.post(
        PATH_AUTH_LOGIN,
        data={
            "phone": processed_phone,
            "code": otp_code,
            "calling_code_id": CALLING_CODE_ID,
            "device_id": session.device_id,
        },
        bearer=session.signup_bearer,
        device_id=session.device_id,
    )

    if result.error:
        return _network_failure(result)

    if result.status == 200:
        if is_account_missing(result.body):
            logger.info(f"Login: no account yet | phone={mask_phone(processed_phone)}")
            return {
                "success": True,
                "otp_verified": True,
                "new_user": True,
                "message": "OTP verified. Please proceed with registration.",
                "bearer_token": None,
            }

        token = extract_token(result.body)
        if token:
            clear_session(session_id)
            logger.info(f"Login succeeded | phone={mask_phone(processed_phone)}")
            return {
                "success": True,
                "bearer_token": token,
                "message": "Bearer token retrieved successfully!",
            }

    return _status_failure(
        result,
        rate_limit_msg="Rate limit exceeded.",
        validation_msg="Invalid OTP code.",
        default_msg="Failed to get bearer token",
    )


def register_account(payload: dict, session_id: Optional[str] = None) -> dict:
    """Register a new account for the phone verified on this session."""
    require_fields(payload, "firstName", "lastName", "email", "dob", "phone", message="All fields are required")

    session = get_session(session_id)
    bearer = payload.get("bearer") or session.signup_bearer
    processed_phone = normalize_phone(payload["phone"])

    result = zus_client.post(
        PATH_AUTH_REGISTER,
        data={
            "first_name": payload["firstName"],
            "last_name": payload["lastName"],
            "email": payload["email"],
            "dob": payload["dob"],
            "phone": processed_phone,
            "calling_code_id": CALLING_CODE_ID,
            "device_id": session.device_id,
            "dob_private": "1" if payload.get("dobPrivate") else "0",
        },
        bearer=bearer,
        device_id=session.device_id,
    )

    if result.error:
        return _network_failure(result)

    if result.status == 200 and isinstance(result.body, dict) and result.body.get("success"):
        clear_session(session_id)
        logger.info(f"Registration succeeded | phone={mask_phone(processed_phone)}")
        return {
            "success": True,
            "message": "Account registered successfully!",
            "bearer_token": extract_token(result.body),
        }

    return {
        "success": False,
        "error": upstream_message(result, "Registration failed"),
        "error_type": ErrorType.VALIDATION.value,
        "status_code": result.status,
    }


def format_phone(value) -> dict:
    """The typed, display and full forms of a phone field.

    ``full`` is empty until enough digits have been entered for an API call.
    """
    return {
        "success": True,
        "input": format_phone_input(value),
        "display": phone_display_value(value),
        "full": full_phone_number(value),
    }


def describe_session(session_id: str) -> Optional[dict]:
    """Public view of a pending OTP session, or None if there is none."""
    if not session_exists(session_id):
        return None
    session = get_session(session_id)
    return {
        "device_id": session.device_id,
        "phone": session.phone,
        "has_signup_bearer": bool(session.signup_bearer),
    }
