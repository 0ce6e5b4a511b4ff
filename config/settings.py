"""
Relay configuration — loads settings from .env file.
"""

import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

# ─────────────────────────────────────────────
# Upstream API
# ─────────────────────────────────────────────
ZUS_BASE_URL = os.getenv("ZUS_BASE_URL", "https://appv2.zuscoffee.ph").rstrip("/")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", 30))  # seconds

PATH_AUTH_PHONE = "/api/v3/auth/phone"
PATH_AUTH_LOGIN = "/api/v3/auth/login"
PATH_AUTH_REGISTER = "/api/v3/auth/register"
PATH_CREATE_GIFT_CARD = "/api/v1/balance/gift-card/zb-create-gc"
PATH_REDEEM = "/api/v1/balance/redeem"
PATH_INCOMING_GIFT_CARDS = "/api/v1/balance/gift-card/incoming-gc"
PATH_REDEEMED_GIFT_CARDS = "/api/v1/balance/gift-card/list-redeemed"
PATH_ACTIVATE_BALANCE = "/api/v1/balance/activate"
PATH_USER = "/api/v2/user"
PATH_DEACTIVATE = "/api/v1/user/deactivate"

# ─────────────────────────────────────────────
# App Settings
# ─────────────────────────────────────────────
PORT = int(os.getenv("PORT", 3001))
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE_ENABLED = os.getenv("LOG_FILE_ENABLED", "true").lower() == "true"
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

# ─────────────────────────────────────────────
# HTTP Headers (mimic the mobile app)
# ─────────────────────────────────────────────
APP_USER_AGENT = os.getenv("APP_USER_AGENT", "Dart/3.5 (dart:io)")
APP_VERSION = os.getenv("APP_VERSION", "5.5.12")

APP_HEADERS = {
    "User-Agent": APP_USER_AGENT,
    "Accept": "application/json",
    "Accept-Encoding": "gzip",
    "accept-language": "en",
    "app-version": APP_VERSION,
}

# ─────────────────────────────────────────────
# Phone Numbers
# ─────────────────────────────────────────────
CALLING_CODE_ID = "175"
PHONE_PREFIX = "63"
PHONE_LOCAL_DIGITS = 10

# ─────────────────────────────────────────────
# Sessions
# ─────────────────────────────────────────────
DEFAULT_SESSION_ID = "default"

# ─────────────────────────────────────────────
# Gift Card Defaults
# ─────────────────────────────────────────────
DEFAULT_TEMPLATE_ID = "1"
DEFAULT_PAYMENT_METHOD = "99"
DEFAULT_SENDER_NAME = "Jenski Rende"
DEFAULT_RECIPIENT_NAME = "James Carl"
DEFAULT_GIFT_MESSAGE = (
    "You're the light in the dark. You cheer me up when I'm down. "
    "Here are some drinks for you!"
)
DEFAULT_CURRENCY = "₱"

# ─────────────────────────────────────────────
# Batch Fan-Out
# ─────────────────────────────────────────────
BATCH_MAX_COUNT = 100
BATCH_MAX_WORKERS = int(os.getenv("BATCH_MAX_WORKERS", 100))
BATCH_AMOUNT_HIGH = 300
BATCH_AMOUNT_LOW = 250  # Amounts step down by 1 from HIGH to LOW, then wrap

# Upper bound on redeemed-list pages fetched for one total
REDEEMED_MAX_PAGES = int(os.getenv("REDEEMED_MAX_PAGES", 50))

# Upstream messages that mean the sender wallet is empty
INSUFFICIENT_BALANCE_MARKERS = (
    "insufficient balance",
    "insufficient funds",
    "balance!",
)

# Login responses for a phone with no account yet
ACCOUNT_MISSING_MARKERS = (
    "account does not exist",
    "login account does not exist",
)
