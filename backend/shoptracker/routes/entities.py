# Overview: Flask API routes for shops, sales, expenses and store values; one blueprint per entity schema.

from flask import Blueprint, Response, current_app, jsonify, request

from ..decorators import require_auth
from ..models import EXPENSE_CATEGORIES
from ..services import entity_service, export_service
from ..services.entity_service import (
    EXPENSES,
    SALES,
    SHOPS,
    STORE_VALUES,
    ConfirmationRequired,
    EntityError,
    EntityNotFoundError,
    EntitySchema,
)
from ..services.table_client import TableClientError
from ..validation import ConflictError, ValidationError


def _error_response(exc: Exception, action: str, schema: EntitySchema):
    if isinstance(exc, ValidationError):
        return jsonify({"error": str(exc)}), 400
    if isinstance(exc, ConflictError):
        return jsonify({"error": str(exc)}), 409
    if isinstance(exc, EntityNotFoundError):
        return jsonify({"error": str(exc)}), 404
    if isinstance(exc, ConfirmationRequired):
        return jsonify({"error": str(exc), "confirm_required": True}), 400
    if isinstance(exc, EntityError):
        return jsonify({"error": str(exc)}), 400
    current_app.logger.exception("Failed to %s %s", action, schema.label)
    return jsonify({"error": f"Failed to {action} {schema.label}. Please try again."}), 500


def make_entity_blueprint(schema: EntitySchema) -> Blueprint:
    bp = Blueprint(schema.name, __name__, url_prefix=f"/api/{schema.path}")

    @bp.get("")
    @require_auth
    def list_route():
        return jsonify(entity_service.list_view(schema)), 200

    @bp.post("")
    @require_auth
    def create_route():
        try:
            row = entity_service.create_row(schema, request.get_json(silent=True))
            return jsonify(row), 201
        except (ValueError, EntityError, TableClientError) as exc:
            return _error_response(exc, "save", schema)

    @bp.get("/<row_id>")
    @require_auth
    def get_route(row_id: str):
        try:
            return jsonify(entity_service.get_row(schema, row_id)), 200
        except (EntityError, TableClientError) as exc:
            return _error_response(exc, "load", schema)

    @bp.put("/<row_id>")
    @require_auth
    def update_route(row_id: str):
        try:
            row = entity_service.update_row(schema, row_id, request.get_json(silent=True))
            return jsonify(row), 200
        except (ValueError, EntityError, TableClientError) as exc:
            return _error_response(exc, "save", schema)

    if schema.allow_delete:
        @bp.delete("/<row_id>")
        @require_auth
        def delete_route(row_id: str):
            confirmed = request.args.get("confirm", "false").lower() == "true"
            try:
                entity_service.delete_row(schema, row_id, confirmed=confirmed)
                return jsonify({"message": f"{schema.label.capitalize()} deleted"}), 200
            except (EntityError, TableClientError) as exc:
                return _error_response(exc, "delete", schema)

    if schema.export_columns:
        @bp.get("/export")
        @require_auth
        def export_route():
            rows = entity_service.list_rows(schema)
            records = entity_service.export_records(schema, rows)
            headers = [column.header for column in schema.export_columns]
            content = export_service.build_workbook(schema.export_sheet, headers, records)
            filename = export_service.export_filename(schema.export_name)
            return Response(
                content,
                mimetype=export_service.XLSX_MIMETYPE,
                headers={"Content-Disposition": f"attachment; filename={filename}"},
            )

    return bp


shops_bp = make_entity_blueprint(SHOPS)
sales_bp = make_entity_blueprint(SALES)
expenses_bp = make_entity_blueprint(EXPENSES)
store_values_bp = make_entity_blueprint(STORE_VALUES)


@expenses_bp.get("/categories")
@require_auth
def expense_categories():
    return jsonify({"categories": list(EXPENSE_CATEGORIES)}), 200


@store_values_bp.get("/available-shops")
@require_auth
def available_shops():
    """Shops the store value form may select; pass ?editing=<id> while editing."""
    try:
        shops = entity_service.available_shops(editing_id=request.args.get("editing"))
        return jsonify({"shops": shops}), 200
    except TableClientError:
        current_app.logger.exception("Failed to load available shops")
        return jsonify({"error": "Internal server error"}), 500
