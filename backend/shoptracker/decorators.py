# Overview: Request authentication decorators for API routes.

from functools import wraps
from flask import current_app, request, jsonify, g

from .services import session_service
from .services.session_service import AuthContext


def extract_token() -> str | None:
    """Bearer token from the Authorization header, else the session cookie."""
    auth_header = request.headers.get("Authorization")
    if auth_header and auth_header.startswith("Bearer "):
        return auth_header.split(" ", 1)[1].strip() or None
    cookie_name = current_app.config.get("SESSION_TOKEN_COOKIE", "session_token")
    return request.cookies.get(cookie_name) or None


def load_auth_context() -> AuthContext | None:
    """
    Resolve the request's AuthContext.

    Sets g.auth (AuthContext or None) and g.current_user.
    """
    token = extract_token()
    context = session_service.validate_session(token) if token else None

    g.auth = context
    g.current_user = context.user if context else None
    return context


def require_auth(f):
    """
    Require a valid session.

    Returns 401 if:
    - No bearer token or session cookie
    - Invalid, expired or revoked token
    - User account deactivated
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not extract_token():
            return jsonify({"error": "Authentication required"}), 401

        if not load_auth_context():
            return jsonify({"error": "Invalid or expired token"}), 401

        return f(*args, **kwargs)

    return decorated_function
