# Overview: Flask API route for the dashboard KPI cards.

from flask import Blueprint, jsonify

from ..decorators import require_auth
from ..services import reporting_service


dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/api/dashboard")


@dashboard_bp.get("")
@require_auth
def dashboard():
    return jsonify(reporting_service.dashboard_kpis()), 200
