"""
Gift card endpoints: single and batch send, single and batch redeem,
incoming list, redeemed totals, and the send-form generator.
"""

from flask import Blueprint, jsonify, request

from routes import read_payload
from services import gift_card_service, generators

gift_cards_bp = Blueprint("gift_cards", __name__, url_prefix="/api")


@gift_cards_bp.route("/send-custom-gift-card", methods=["POST"])
def send_custom_gift_card():
    body = read_payload()
    return jsonify(gift_card_service.send_custom_gift_card(body.get("bearer"), body))


@gift_cards_bp.route("/batch-send", methods=["POST"])
def batch_send():
    """
    Request:
        {
            "bearer": "...",
            "senderName": "Jenski Rende",
            "recipientName": "James Carl",
            "recipientPhone": "639308201445",
            "message": "...",
            "count": 100
        }

    Response:
        {
            "success": true,
            "results": [{"index": 0, "success": true, "amount": "300.00", ...}, ...],
            "summary": {"attempted": 100, "success_count": 12, "total_amount": "3534.00",
                        "stopped": true, ...}
        }
    """
    body = read_payload()
    return jsonify(gift_card_service.batch_send(
        body.get("bearer"),
        body.get("recipientPhone"),
        sender_name=body.get("senderName"),
        recipient_name=body.get("recipientName"),
        message=body.get("message"),
        count=body.get("count"),
    ))


@gift_cards_bp.route("/redeem-gift-card", methods=["POST"])
def redeem_gift_card():
    body = read_payload()
    return jsonify(gift_card_service.redeem_gift_card(body.get("bearer"), body.get("code")))


@gift_cards_bp.route("/batch-redeem", methods=["POST"])
def batch_redeem():
    body = read_payload()
    return jsonify(gift_card_service.batch_redeem(body.get("bearer"), body.get("codes")))


@gift_cards_bp.route("/redeem-incoming", methods=["POST"])
def redeem_incoming():
    body = read_payload()
    return jsonify(gift_card_service.redeem_incoming_page(body.get("bearer"), body.get("page", 1)))


@gift_cards_bp.route("/get-incoming-gift-cards", methods=["POST"])
def get_incoming_gift_cards():
    body = read_payload()
    return jsonify(gift_card_service.get_incoming_gift_cards(body.get("bearer"), body.get("page", 1)))


@gift_cards_bp.route("/get-redeemed-gift-cards", methods=["POST"])
def get_redeemed_gift_cards():
    body = read_payload()
    return jsonify(gift_card_service.get_redeemed_total(body.get("bearer")))


@gift_cards_bp.route("/generate", methods=["GET"])
def generate():
    """
    Names and message for the send form, plus email and DOB for signup.

    ``?mode=random`` draws names and message at random instead of cycling.
    """
    if request.args.get("mode") == "random":
        data = generators.generate_random()
    else:
        data = generators.generate_all()
    data["email"] = generators.generate_email()
    data["dob"] = generators.generate_dob()
    return jsonify(data)
