"""
Session Management

In-memory session store for the OTP → login/registration handshake.
Sessions live for the life of the process; concurrent writers to the
same key simply overwrite each other.
"""

import secrets
from typing import Dict, Optional

from config.settings import DEFAULT_SESSION_ID
from models import Session

# In-memory session store
sessions: Dict[str, Session] = {}


def generate_device_id() -> str:
    """Random 16-hex-char device id, as the mobile app sends."""
    return secrets.token_hex(8)


def _key(session_id: Optional[str]) -> str:
    return session_id or DEFAULT_SESSION_ID


def get_session(session_id: Optional[str] = None) -> Session:
    """Get session by ID, creating it on first reference."""
    key = _key(session_id)
    if key not in sessions:
        sessions[key] = Session(device_id=generate_device_id())
    return sessions[key]


def clear_session(session_id: Optional[str] = None) -> None:
    """Forget a session after a successful login or registration."""
    sessions.pop(_key(session_id), None)


def session_exists(session_id: Optional[str] = None) -> bool:
    """Check if a session exists."""
    return _key(session_id) in sessions
