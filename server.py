"""
ZUS Wallet Relay — API Backend
Runs on port 3001 and relays browser requests to the ZUS Coffee app API.

Usage:
    python server.py

Endpoints:
    POST http://localhost:3001/api/<operation>
    GET  http://localhost:3001/health
"""

from datetime import datetime, timezone

from dotenv import load_dotenv

load_dotenv()

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from app_logger import get_logger, sanitize_log_string
from config.settings import PORT, DEBUG, CORS_ORIGINS, ZUS_BASE_URL, APP_VERSION
from core.errors import RelayError
from routes.auth import auth_bp
from routes.gift_cards import gift_cards_bp
from routes.wallet import wallet_bp

# ─── Initialize logger ───
logger = get_logger("zus_relay")


def create_app() -> Flask:
    app = Flask(__name__)
    app.json.ensure_ascii = False
    CORS(app, origins=CORS_ORIGINS)

    app.register_blueprint(auth_bp)
    app.register_blueprint(gift_cards_bp)
    app.register_blueprint(wallet_bp)

    @app.errorhandler(RelayError)
    def handle_relay_error(error: RelayError):
        logger.warning(f"Rejected request | error_type={error.error_type.value} | error=\"{sanitize_log_string(error.message)}\"")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        return jsonify({"success": False, "error": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error: Exception):
        logger.error(f"Unhandled error: {error}", exc_info=True)
        return jsonify({"success": False, "error": "Internal server error"}), 500

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({
            "status": "ok",
            "service": "zus-relay",
            "upstream": ZUS_BASE_URL,
            "app_version": APP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        })

    return app


app = create_app()


if __name__ == "__main__":
    print("=" * 60)
    print("  ZUS Wallet Relay — API Server")
    print("=" * 60)
    print()
    print(f"🚀 Starting server on http://localhost:{PORT}")
    print(f"   POST http://localhost:{PORT}/api/request-otp")
    print(f"   POST http://localhost:{PORT}/api/batch-send")
    print(f"   GET  http://localhost:{PORT}/health")
    print()

    app.run(
        host="0.0.0.0",
        port=PORT,
        debug=DEBUG,
    )
