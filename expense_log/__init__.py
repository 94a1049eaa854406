"""Core record store and summaries for the daily expense tracker."""

from .aggregation import PeriodListing, grand_total, list_by_period, summarize_by_category
from .exceptions import PersistenceError, ValidationError
from .models import Category, Expense, LineResult
from .storage import ExpenseStore, LoadReport

__all__ = [
    "Category",
    "Expense",
    "LineResult",
    "ExpenseStore",
    "LoadReport",
    "PeriodListing",
    "grand_total",
    "list_by_period",
    "summarize_by_category",
    "PersistenceError",
    "ValidationError",
]
