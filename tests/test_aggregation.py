"""Tests for category and period summaries."""

from datetime import date
from decimal import Decimal

from expense_log.aggregation import grand_total, list_by_period, summarize_by_category
from expense_log.models import Category, Expense


class TestSummarizeByCategory:
    """Tests for the per-category totals."""

    def test_empty_input_has_every_category_at_zero(self):
        totals = summarize_by_category([])
        assert list(totals) == list(Category)
        assert all(total == 0 for total in totals.values())

    def test_totals_accumulate(self, sample_records):
        extra = Expense(Decimal("0.5"), "Food", "Snack", date(2024, 1, 2))
        totals = summarize_by_category(sample_records + [extra])
        assert totals[Category.FOOD] == Decimal("13.0")
        assert totals[Category.TRAVEL] == Decimal("40")
        assert totals[Category.HEALTH] == 0

    def test_sum_of_totals_matches_known_records(self, sample_records):
        totals = summarize_by_category(sample_records)
        assert sum(totals.values()) == grand_total(sample_records)

    def test_unknown_category_is_left_out(self, sample_records):
        foreign = Expense(Decimal("1000"), "Groceries", "", date(2024, 1, 5))
        totals = summarize_by_category(sample_records + [foreign])
        assert sum(totals.values()) == grand_total(sample_records)

    def test_decimal_sum_is_exact(self):
        records = [Expense(Decimal("0.1"), "Food", "", date(2024, 1, 1))] * 10
        assert summarize_by_category(records)[Category.FOOD] == Decimal("1.0")


class TestListByPeriod:
    """Tests for the inclusive date-range listing."""

    def test_both_boundaries_included(self, sample_records):
        listing = list_by_period(sample_records, date(2024, 1, 1), date(2024, 1, 31))
        assert listing.records == tuple(sample_records[:2])
        assert listing.total == Decimal("52.5")

    def test_inverted_range_is_empty(self, sample_records):
        records, total = list_by_period(sample_records, date(2024, 2, 1), date(2024, 1, 1))
        assert records == ()
        assert total == 0

    def test_keeps_input_order(self):
        later = Expense(Decimal("1"), "Food", "later", date(2024, 1, 20))
        earlier = Expense(Decimal("2"), "Food", "earlier", date(2024, 1, 10))
        listing = list_by_period([later, earlier], date(2024, 1, 1), date(2024, 1, 31))
        assert [r.description for r in listing.records] == ["later", "earlier"]

    def test_counts_unknown_categories(self):
        foreign = Expense(Decimal("4"), "Groceries", "", date(2024, 1, 5))
        listing = list_by_period([foreign], date(2024, 1, 5), date(2024, 1, 5))
        assert listing.total == Decimal("4")

    def test_single_day_range(self, sample_records):
        listing = list_by_period(sample_records, date(2024, 2, 1), date(2024, 2, 1))
        assert [r.description for r in listing.records] == ["Electricity"]
