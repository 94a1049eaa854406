"""Data models and line codec for the expense log."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Dict, Optional

__all__ = [
    "Category",
    "Expense",
    "LineResult",
    "FIELD_DELIMITER",
    "MAX_AMOUNT_EXPONENT",
    "format_date",
    "parse_date",
    "format_line",
    "parse_line",
    "sanitize_description",
]

DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")
# Largest accepted power of ten; keeps sums clear of decimal.Overflow.
MAX_AMOUNT_EXPONENT = 15
FIELD_DELIMITER = " | "
FIELD_COUNT = 4


class Category(str, Enum):
    FOOD = "Food"
    TRAVEL = "Travel"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    HEALTH = "Health"
    OTHERS = "Others"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> Optional["Category"]:
        """Return the member whose label matches case-insensitively, if any."""
        canonical = label.strip().lower()
        for member in cls:
            if member.value.lower() == canonical:
                return member
        return None

    @classmethod
    def from_menu_choice(cls, choice: int) -> Optional["Category"]:
        """Return the member at 1-based menu position ``choice``, if any."""
        members = list(cls)
        if 1 <= choice <= len(members):
            return members[choice - 1]
        return None

    @classmethod
    def from_menu_text(cls, text: str) -> Optional["Category"]:
        """Return the member for a typed menu number, or None for anything else."""
        text = text.strip()
        if not text.isdecimal():
            return None
        try:
            choice = int(text)
        except ValueError:
            # Digit strings past the interpreter's int conversion limit.
            return None
        return cls.from_menu_choice(choice)


def format_date(value: date) -> str:
    # strftime does not zero-pad years below 1000 on every platform.
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(value: str) -> date:
    """Parse a zero-padded ``YYYY-MM-DD`` string into a date."""
    match = DATE_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"date {value!r} does not match YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    return date(year, month, day)


@dataclass(frozen=True)
class Expense:
    amount: Decimal
    category: str
    description: str
    date: date

    @property
    def known_category(self) -> Optional[Category]:
        return Category.from_label(self.category)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the expense to JSON-friendly natives."""
        return {
            "date": format_date(self.date),
            "amount": str(self.amount),
            "category": str(self.category),
            "description": self.description,
        }


@dataclass(frozen=True)
class LineResult:
    """Outcome of decoding one persisted line: a record or a skip reason."""

    line_number: int
    record: Optional[Expense] = None
    skip_reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.record is not None


def sanitize_description(text: str) -> str:
    """Strip line breaks and the field delimiter so the line codec stays unambiguous."""
    flattened = " ".join(text.splitlines())
    # Replacement can expose a new delimiter in runs like "a | | b".
    while FIELD_DELIMITER in flattened:
        flattened = flattened.replace(FIELD_DELIMITER, " / ")
    # Lone surrogates cannot be written as UTF-8.
    return flattened.encode("utf-8", "replace").decode("utf-8")


def format_line(expense: Expense) -> str:
    return FIELD_DELIMITER.join(
        (
            format_date(expense.date),
            str(expense.amount),
            str(expense.category),
            expense.description,
        )
    )


def parse_line(line: str, line_number: int = 0) -> LineResult:
    """Decode a single persisted line without raising."""
    text = line.rstrip("\r\n")
    if not text.strip():
        return LineResult(line_number, skip_reason="blank line")

    # maxsplit keeps any stray delimiter inside the trailing description field.
    parts = text.split(FIELD_DELIMITER, FIELD_COUNT - 1)
    if len(parts) < FIELD_COUNT:
        return LineResult(
            line_number,
            skip_reason=f"expected {FIELD_COUNT} fields, found {len(parts)}",
        )
    raw_date, raw_amount, category, description = parts

    try:
        when = parse_date(raw_date)
    except ValueError:
        return LineResult(line_number, skip_reason=f"invalid date {raw_date!r}")

    try:
        amount = Decimal(raw_amount.strip())
    except InvalidOperation:
        return LineResult(line_number, skip_reason=f"invalid amount {raw_amount!r}")
    if not amount.is_finite() or amount < 0 or amount.adjusted() > MAX_AMOUNT_EXPONENT:
        return LineResult(line_number, skip_reason=f"amount out of range {raw_amount!r}")

    return LineResult(
        line_number,
        record=Expense(
            amount=amount,
            category=category.strip(),
            description=description,
            date=when,
        ),
    )
