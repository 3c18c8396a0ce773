# Overview: Display formatting for monetary amounts.

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from babel.numbers import format_currency as babel_format_currency
from flask import current_app, has_app_context

DEFAULT_CURRENCY = "MZN"
DEFAULT_LOCALE = "pt_MZ"

# Whole units only; symbol placement follows the pt_MZ convention
WHOLE_UNIT_PATTERN = "#,##0 ¤"


def round_whole(amount) -> Decimal:
    """Round half away from zero to whole currency units (display only)."""
    try:
        value = Decimal(str(amount if amount is not None else 0))
    except InvalidOperation:
        value = Decimal(0)
    if not value.is_finite():
        value = Decimal(0)
    return value.quantize(Decimal("1"), rounding=ROUND_HALF_UP)


def format_currency(amount, currency: str = DEFAULT_CURRENCY, locale: str = DEFAULT_LOCALE) -> str:
    """
    Format an amount as whole-unit currency, e.g. 1234.56 -> "1 235 MTn".

    Stored values keep their decimals; only the display is rounded.
    """
    return babel_format_currency(
        round_whole(amount),
        currency,
        format=WHOLE_UNIT_PATTERN,
        locale=locale,
        currency_digits=False,
    )


def format_amount(amount) -> str:
    """format_currency using the application's configured currency."""
    if has_app_context():
        return format_currency(
            amount,
            current_app.config.get("CURRENCY_CODE", DEFAULT_CURRENCY),
            current_app.config.get("CURRENCY_LOCALE", DEFAULT_LOCALE),
        )
    return format_currency(amount)
