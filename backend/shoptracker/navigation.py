# Overview: Page routing table and the auth gate that decides redirects.

from __future__ import annotations

import enum
from dataclasses import dataclass


class AuthState(enum.Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


LOGIN_PATH = "/login"
HOME_PATH = "/dashboard"

NAV_ITEMS = [
    {"path": "/dashboard", "page": "dashboard", "label": "Dashboard"},
    {"path": "/sales", "page": "sales", "label": "Sales"},
    {"path": "/expenses", "page": "expenses", "label": "Expenses"},
    {"path": "/store-value", "page": "store_value", "label": "Store Value"},
    {"path": "/shops", "page": "shops", "label": "Shops"},
    {"path": "/reports", "page": "reports", "label": "Reports"},
    {"path": "/settings", "page": "settings", "label": "Settings"},
]

PRIVATE_PAGES = {item["path"]: item for item in NAV_ITEMS}


@dataclass(frozen=True)
class PageResolution:
    page: str | None = None
    redirect: str | None = None
    private: bool = False


def resolve_page(path: str, state: AuthState) -> PageResolution:
    """
    - loading: nothing rendered, no redirect yet
    - /login: login page, or dashboard once signed in
    - private pages: the page when signed in, else /login
    - / and anything unknown: /dashboard
    """
    if state is AuthState.LOADING:
        return PageResolution()

    normalized = "/" + path.strip("/") if path else "/"

    if normalized == LOGIN_PATH:
        if state is AuthState.AUTHENTICATED:
            return PageResolution(redirect=HOME_PATH)
        return PageResolution(page="login")

    item = PRIVATE_PAGES.get(normalized)
    if item is None:
        return PageResolution(redirect=HOME_PATH)

    if state is not AuthState.AUTHENTICATED:
        return PageResolution(redirect=LOGIN_PATH)
    return PageResolution(page=item["page"], private=True)
