from flask import Blueprint, current_app, jsonify, request
from loguru import logger

from storyboard.errors import AuthenticationError

auth_bp = Blueprint("auth", __name__, url_prefix="/api")


@auth_bp.route("/login", methods=["POST"])
def login():
    payload = request.get_json(silent=True) or {}
    password = payload.get("password") if isinstance(payload, dict) else None

    if not current_app.extensions["credentials"].check(password):
        logger.info("Rejected login attempt")
        raise AuthenticationError()

    return jsonify({"success": True, "message": "Login successful"})
