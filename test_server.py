"""
Tests for the Flask app wiring: health check, body parsing and error handlers.
"""
from unittest.mock import patch

from app_logger import sanitize_log_string, mask_token, mask_phone
from config.settings import PATH_AUTH_PHONE
from conftest import ok


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "ok"
    assert body["service"] == "zus-relay"


def test_cors_header_present(client):
    resp = client.get("/health", headers={"Origin": "http://localhost:3000"})
    assert resp.headers.get("Access-Control-Allow-Origin") in ("*", "http://localhost:3000")


def test_invalid_json_reads_as_empty(client, fake_upstream):
    resp = client.post("/api/request-otp", data="not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Phone number is required"


def test_form_body_accepted(client, fake_upstream):
    fake_upstream.on("POST", PATH_AUTH_PHONE, ok({"success": True}))
    resp = client.post("/api/request-otp", data={"phone": "9308201445"})
    assert resp.get_json()["success"] is True


def test_unknown_route_is_json_404(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_unexpected_error_is_json_500(client):
    with patch("services.wallet_service.get_session", side_effect=RuntimeError("boom")):
        resp = client.post("/api/get-balance", json={"bearer": "tok"})
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "error": "Internal server error"}


class TestLogMasking:

    def test_sanitize_log_string(self):
        assert sanitize_log_string("a\nb\rc\td\x01") == "a b c d "
        assert sanitize_log_string("") == ""

    def test_mask_token(self):
        assert mask_token("abcdefghijklmnop") == "abcd...mnop"
        assert mask_token("short") == "***"
        assert mask_token(None) == "none"
        assert mask_token("false") == "none"

    def test_mask_phone(self):
        assert mask_phone("639308201445") == "********1445"
        assert mask_phone(None) == ""
