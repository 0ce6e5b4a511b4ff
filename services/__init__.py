"""Services package - exports all service modules."""

from .zus_client import ZusClient
from .batch import fan_out, summarize_send, summarize_redeem
from .auth_service import (
    request_otp, get_bearer_token, register_account, format_phone, describe_session,
)
from .gift_card_service import (
    send_custom_gift_card,
    batch_send,
    redeem_gift_card,
    batch_redeem,
    get_incoming_gift_cards,
    redeem_incoming_page,
    get_redeemed_total,
)
from .wallet_service import activate_balance, get_balance, delete_account
from .generators import generate_all, generate_random, generate_email, generate_dob

__all__ = [
    "ZusClient",
    "fan_out",
    "summarize_send",
    "summarize_redeem",
    "request_otp",
    "get_bearer_token",
    "register_account",
    "format_phone",
    "describe_session",
    "send_custom_gift_card",
    "batch_send",
    "redeem_gift_card",
    "batch_redeem",
    "get_incoming_gift_cards",
    "redeem_incoming_page",
    "get_redeemed_total",
    "activate_balance",
    "get_balance",
    "delete_account",
    "generate_all",
    "generate_random",
    "generate_email",
    "generate_dob",
]
