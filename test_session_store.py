"""
Tests for the in-memory session store.
"""
import re

from core.session import (
    sessions, generate_device_id, get_session, clear_session, session_exists,
)


def test_device_id_is_16_hex_chars():
    device_id = generate_device_id()
    assert re.fullmatch(r"[0-9a-f]{16}", device_id)
    assert device_id != generate_device_id()


def test_get_session_creates_once():
    first = get_session("abc")
    first.phone = "639308201445"
    second = get_session("abc")
    assert second is first
    assert second.phone == "639308201445"
    assert second.signup_bearer is None


def test_missing_key_uses_default():
    assert get_session(None) is get_session("default")
    assert get_session("") is get_session("default")
    assert session_exists(None)


def test_clear_session():
    get_session("abc")
    clear_session("abc")
    assert not session_exists("abc")
    assert "abc" not in sessions
    # Clearing an unknown key is a no-op
    clear_session("never-created")


def test_new_session_after_clear_gets_new_device_id():
    old = get_session("abc").device_id
    clear_session("abc")
    assert get_session("abc").device_id != old
