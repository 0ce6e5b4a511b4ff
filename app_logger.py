"""
app_logger.py - Centralized logging configuration for zus-relay

Sets up Python logging with:
- File handler: logs/YYYY-MM-DD/relay.txt (daily folder)
- Console handler: stdout
- Configurable log level via LOG_LEVEL env variable
- Masking of sensitive data (bearer tokens, phone numbers)
"""

import logging
from datetime import datetime
from pathlib import Path

from config.settings import LOG_LEVEL, LOG_FILE_ENABLED


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds to the configured datefmt."""

    def formatTime(self, record, datefmt=None):
        if datefmt:
            s = datetime.fromtimestamp(record.created).strftime(datefmt)
            ms = int((record.created - int(record.created)) * 1000)
            return f"{s}.{ms:03d}"
        return super().formatTime(record, datefmt)


def sanitize_log_string(text: str) -> str:
    """
    Sanitize string for logging to prevent log injection attacks.
    Removes newlines, carriage returns, and other control characters.
    """
    if not text:
        return text
    text = text.replace('\n', ' ').replace('\r', ' ').replace('\t', ' ')
    text = ''.join(char if ord(char) >= 32 else ' ' for char in text)
    return text


def mask_token(token) -> str:
    """Show only the first and last 4 characters of a bearer token."""
    if not token or token == "false":
        return "none"
    token = str(token)
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}...{token[-4:]}"


def mask_phone(phone) -> str:
    """Keep the last 4 digits of a phone number."""
    if not phone:
        return ""
    phone = str(phone)
    if len(phone) <= 4:
        return "***"
    return "*" * (len(phone) - 4) + phone[-4:]


def setup_logger(name: str = "zus_relay", log_level: str = "INFO") -> logging.Logger:
    """
    Configure and return a logger with file and console handlers.

    Args:
        name: Logger name
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Prevent duplicate handlers if setup is called multiple times
    if logger.handlers:
        return logger

    formatter = MillisecondFormatter(
        fmt="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # ─── File Handler (one folder per day) ───
    if LOG_FILE_ENABLED:
        today = datetime.now().strftime("%Y-%m-%d")
        log_dir = Path("logs") / today
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / "relay.txt", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # ─── Console Handler ───
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger(name: str = "zus_relay") -> logging.Logger:
    """
    Get the configured logger instance.
    If logger doesn't exist, create it with default settings.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        setup_logger(name, LOG_LEVEL)
    return logger
