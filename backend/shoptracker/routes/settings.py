# Overview: Flask API routes for the settings screen and data reset.

from flask import Blueprint, current_app, g, jsonify, request

from ..decorators import require_auth
from ..services import settings_service
from ..services.entity_service import ConfirmationRequired
from ..services.table_client import TableClientError


settings_bp = Blueprint("settings", __name__, url_prefix="/api/settings")


@settings_bp.get("")
@require_auth
def get_settings():
    return jsonify(settings_service.settings_overview(g.current_user)), 200


@settings_bp.post("/reset")
@require_auth
def reset_data():
    """
    Delete all shops, sales, expenses and store values.

    Body must carry {"confirm": true}.
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid JSON payload"}), 400
    try:
        deleted = settings_service.reset_all_data(confirmed=data.get("confirm") is True)
        return jsonify({"message": "All data has been reset successfully!", "deleted": deleted}), 200
    except ConfirmationRequired as exc:
        return jsonify({"error": str(exc), "confirm_required": True}), 400
    except TableClientError:
        current_app.logger.exception("Failed to reset data")
        return jsonify({"error": "Failed to reset data. Please try again."}), 500
