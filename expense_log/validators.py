"""Validation helpers for the CLI and API entry points."""

from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation

from .exceptions import ValidationError
from .models import MAX_AMOUNT_EXPONENT, Category, parse_date, sanitize_description


def parse_amount(raw: object, field: str = "amount") -> Decimal:
    """Convert raw input to a finite, non-negative Decimal."""
    if isinstance(raw, bool) or raw is None:
        raise ValidationError(f"{field} must be a numeric value")
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, TypeError) as exc:  # type: ignore[arg-type]
        raise ValidationError(f"{field} must be a numeric value") from exc

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number")
    if amount < 0:
        raise ValidationError(f"{field} must not be negative")
    if amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise ValidationError(f"{field} must be below 1e{MAX_AMOUNT_EXPONENT + 1}")
    return amount


def validate_category(value: object, field: str = "category") -> Category:
    """Accept a category label (any case) or its 1-based menu number."""
    if isinstance(value, Category):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        category = Category.from_menu_choice(value)
    elif isinstance(value, str):
        text = value.strip()
        category = (
            Category.from_menu_text(text) if text.isdecimal() else Category.from_label(text)
        )
    else:
        raise ValidationError(f"{field} must be a string")

    if category is None:
        choices = ", ".join(member.value for member in Category)
        raise ValidationError(f"{field} must be one of: {choices}")
    return category


def validate_date(value: object, field: str = "date") -> date:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a YYYY-MM-DD string")
    try:
        return parse_date(value)
    except ValueError as exc:
        raise ValidationError(f"{field} must use the YYYY-MM-DD format") from exc


def validate_description(value: object, field: str = "description") -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return sanitize_description(value.strip())
