# Overview: Flask API routes for auth operations; parses input and returns JSON responses.

from flask import Blueprint, request, jsonify, current_app

from ..services import auth_service
from ..services import session_service
from ..decorators import extract_token, load_auth_context


auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@auth_bp.post("/login")
def login_route():
    """
    Authenticate with email + password and create a session token.

    The token is returned in the body for Authorization headers and also set
    as an HttpOnly cookie for page navigation.
    """
    try:
        data = request.get_json(silent=True) or {}
        email = data.get("email")
        password = data.get("password")

        if not all([email, password]):
            return jsonify({"error": "email and password required"}), 400

        user = auth_service.authenticate(email, password)
        if not user:
            return jsonify({"error": "Invalid credentials"}), 401

        session, token = session_service.create_session(
            user_id=user.id,
            user_agent=request.headers.get("User-Agent"),
            ip_address=request.remote_addr,
        )

        response = jsonify({
            "user": user.to_dict(),
            "token": token,
            "session": session.to_dict(),
            "message": "Login successful"
        })
        response.set_cookie(
            current_app.config["SESSION_TOKEN_COOKIE"],
            token,
            httponly=True,
            samesite="Lax",
            max_age=int(session_service.SESSION_ABSOLUTE_TIMEOUT.total_seconds()),
        )
        return response, 200

    except Exception:
        current_app.logger.exception("Failed to login user")
        return jsonify({"error": "Internal server error"}), 500


@auth_bp.post("/logout")
def logout_route():
    """Revoke the current session token and clear the cookie."""
    try:
        token = extract_token()
        if not token:
            return jsonify({"error": "Authorization header required"}), 401

        if not session_service.revoke_session(token, reason="User logout"):
            return jsonify({"error": "Invalid or expired token"}), 401

        response = jsonify({"message": "Logout successful"})
        response.delete_cookie(current_app.config["SESSION_TOKEN_COOKIE"])
        return response, 200

    except Exception:
        current_app.logger.exception("Failed to logout user")
        return jsonify({"error": "Internal server error"}), 500


@auth_bp.get("/session")
def session_route():
    """
    Current auth state: authenticated (with user) or unauthenticated.

    Always 200; clients use it for the initial session check.
    """
    context = load_auth_context()
    if not context:
        return jsonify({"status": "unauthenticated", "user": None}), 200
    return jsonify(context.to_dict()), 200
