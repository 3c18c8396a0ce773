# backend/shoptracker/config.py
from __future__ import annotations
import os


class Config:
    # Optional "SECRET_KEY", with default dev key
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # SQLite DB stored in backend/instance/shoptracker.sqlite3
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL", #optional alternative location
        "sqlite:///shoptracker.sqlite3", #default local location
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Display currency; amounts are stored as plain numbers
    CURRENCY_CODE = os.environ.get("CURRENCY_CODE", "MZN")
    CURRENCY_LOCALE = os.environ.get("CURRENCY_LOCALE", "pt_MZ")

    # Reports: number of most recent distinct sale dates in the daily series
    DAILY_SERIES_DAYS = int(os.environ.get("DAILY_SERIES_DAYS", "14"))

    # Cookie carrying the session token for page routes
    SESSION_TOKEN_COOKIE = os.environ.get("SESSION_TOKEN_COOKIE", "session_token")

    # Frontend dev servers allowed to call the API
    CORS_ORIGINS = tuple(
        origin.strip()
        for origin in os.environ.get(
            "CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173,http://localhost:4173,http://127.0.0.1:4173",
        ).split(",")
        if origin.strip()
    )
