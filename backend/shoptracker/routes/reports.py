from flask import Blueprint, jsonify, request

from ..decorators import require_auth
from ..services import reporting_service


reports_bp = Blueprint("reports", __name__, url_prefix="/api/reports")


@reports_bp.get("")
@require_auth
def reports():
    days = request.args.get("days", type=int)
    if days is not None and days < 1:
        return jsonify({"error": "days must be a positive integer"}), 400
    return jsonify(reporting_service.reports(days=days)), 200
