"""
Phone OTP login and registration endpoints, plus phone formatting
and pending-session lookup.
"""

from flask import Blueprint, jsonify

from routes import read_payload
from services import auth_service

auth_bp = Blueprint("auth", __name__, url_prefix="/api")


@auth_bp.route("/request-otp", methods=["POST"])
def request_otp():
    """
    Request:
        {"phone": "9308201445", "bearer": "...", "sessionId": "default"}
    """
    body = read_payload()
    return jsonify(auth_service.request_otp(
        body.get("phone"),
        bearer=body.get("bearer"),
        session_id=body.get("sessionId"),
    ))


@auth_bp.route("/get-bearer-token", methods=["POST"])
def get_bearer_token():
    body = read_payload()
    return jsonify(auth_service.get_bearer_token(
        body.get("phone"),
        body.get("otp_code"),
        session_id=body.get("sessionId"),
    ))


@auth_bp.route("/register-account", methods=["POST"])
def register_account():
    body = read_payload()
    return jsonify(auth_service.register_account(body, session_id=body.get("sessionId")))


@auth_bp.route("/format-phone", methods=["POST"])
def format_phone():
    """
    Request:
        {"phone": "9308201445"}
    Response:
        {"success": true, "input": "639308201445", "display": "9308201445", "full": "639308201445"}
    """
    body = read_payload()
    return jsonify(auth_service.format_phone(body.get("phone")))


@auth_bp.route("/session/<session_id>", methods=["GET"])
def get_session(session_id):
    """Inspect a pending OTP session."""
    session = auth_service.describe_session(session_id)
    if session is None:
        return jsonify({"success": False, "error": "Session not found"}), 404
    return jsonify({"success": True, "session": session})
