# Overview: Page routes with the login/dashboard redirect rules and the navigation shell.

from flask import Blueprint, jsonify, redirect

from ..decorators import load_auth_context
from ..navigation import NAV_ITEMS, AuthState, resolve_page


pages_bp = Blueprint("pages", __name__)


@pages_bp.get("/")
@pages_bp.get("/<path:path>")
def page(path: str = ""):
    if path == "api" or path.startswith("api/"):
        return jsonify({"error": "Not found"}), 404

    context = load_auth_context()
    state = AuthState.AUTHENTICATED if context else AuthState.UNAUTHENTICATED
    resolution = resolve_page("/" + path, state)

    if resolution.redirect:
        return redirect(resolution.redirect)

    if not resolution.private:
        return jsonify({"page": resolution.page}), 200

    return jsonify({
        "page": resolution.page,
        "nav": NAV_ITEMS,
        "user": context.user.to_dict(),
    }), 200
