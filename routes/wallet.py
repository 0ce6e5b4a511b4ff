"""
Balance, activation and account deletion endpoints.
"""

from flask import Blueprint, jsonify

from routes import read_payload
from services import wallet_service

wallet_bp = Blueprint("wallet", __name__, url_prefix="/api")


@wallet_bp.route("/activate-balance", methods=["POST"])
def activate_balance():
    body = read_payload()
    return jsonify(wallet_service.activate_balance(body.get("bearer")))


@wallet_bp.route("/get-balance", methods=["POST"])
def get_balance():
    body = read_payload()
    return jsonify(wallet_service.get_balance(body.get("bearer")))


@wallet_bp.route("/delete-account", methods=["POST"])
def delete_account():
    body = read_payload()
    return jsonify(wallet_service.delete_account(body.get("bearer"), body.get("reason", "")))
