"""Shared fixtures for the expense tracker tests."""

from datetime import date
from decimal import Decimal

import pytest

from expense_log.models import Expense
from expense_log.storage import ExpenseStore


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "expenses.txt"


@pytest.fixture
def store(data_file):
    store = ExpenseStore(data_file)
    store.load()
    return store


@pytest.fixture
def sample_records():
    return [
        Expense(Decimal("12.5"), "Food", "Lunch", date(2024, 1, 1)),
        Expense(Decimal("40"), "Travel", "Train ticket", date(2024, 1, 15)),
        Expense(Decimal("99.99"), "Utilities", "Electricity", date(2024, 2, 1)),
    ]
