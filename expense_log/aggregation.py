"""Read-only summaries over a sequence of expenses."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, NamedTuple, Tuple

from .models import Category, Expense

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class PeriodListing(NamedTuple):
    records: Tuple[Expense, ...]
    total: Decimal


def summarize_by_category(records: Iterable[Expense]) -> Dict[Category, Decimal]:
    """Total spend per category, every category present and in declared order.

    Records carrying a label outside the enumeration are left out of the
    summary; they still count in period listings.
    """
    totals: Dict[Category, Decimal] = {category: ZERO for category in Category}
    for expense in records:
        category = expense.known_category
        if category is None:
            logger.debug("Ignoring unknown category %r in summary", expense.category)
            continue
        totals[category] += expense.amount
    return totals


def list_by_period(records: Iterable[Expense], start: date, end: date) -> PeriodListing:
    """Records dated within ``[start, end]`` in input order, with their total."""
    if start > end:
        return PeriodListing((), ZERO)
    matching = tuple(expense for expense in records if start <= expense.date <= end)
    return PeriodListing(matching, grand_total(matching))


def grand_total(records: Iterable[Expense]) -> Decimal:
    return sum((expense.amount for expense in records), start=ZERO)
