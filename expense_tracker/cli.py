"""Console interface for the daily expense tracker."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Callable, List, Optional

from expense_log.aggregation import list_by_period, summarize_by_category
from expense_log.config import configure_logging, resolve_data_file
from expense_log.exceptions import PersistenceError, ValidationError
from expense_log.models import Category, Expense, format_date
from expense_log.storage import ExpenseStore
from expense_log.validators import (
    parse_amount,
    validate_category,
    validate_date,
    validate_description,
)

logger = logging.getLogger(__name__)

MENU = (
    "\n1. Add Expense"
    "\n2. View Expenses by Period"
    "\n3. View Expenses by Category"
    "\n4. Exit"
)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _parse_date(value: str) -> date:
    try:
        return validate_date(value)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        ) from exc


def _parse_amount(value: str) -> Decimal:
    try:
        return parse_amount(value)
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def _format_expense(expense: Expense) -> str:
    return (
        f"{format_date(expense.date)} | {_money(expense.amount)} | "
        f"{expense.category} | {expense.description or '-'}"
    )


def _load_store(data_file: Optional[Path]) -> ExpenseStore:
    store = ExpenseStore(resolve_data_file(data_file))
    store.load()
    if store.last_load.missing:
        print("No previous expenses found. Starting fresh.")
    elif store.last_load.error:
        print(f"Error loading expenses: {store.last_load.error}", file=sys.stderr)
    return store


def print_period(store: ExpenseStore, start: date, end: date, write: Writer = print) -> None:
    listing = list_by_period(store.records, start, end)
    write(f"\nExpenses from {format_date(start)} to {format_date(end)}:")
    for expense in listing.records:
        write(_format_expense(expense))
    write(f"Total Expenses: {_money(listing.total)}")


def print_categories(store: ExpenseStore, write: Writer = print) -> None:
    totals = summarize_by_category(store.records)
    write("\nExpense Summary by Category:")
    for category, total in totals.items():
        write(f"{category.value}: {_money(total)}")


# Interactive menu ---------------------------------------------------------
def _menu_add(store: ExpenseStore, read: Reader, write: Writer, today: Callable[[], date]) -> None:
    try:
        amount = parse_amount(read("Enter amount: "))
    except ValidationError as exc:
        write(f"Invalid input: {exc}.")
        return

    write("Select a category:")
    for index, category in enumerate(Category, start=1):
        write(f"{index}. {category.value}")
    raw_choice = read(f"Choose a category (1-{len(Category)}): ").strip()
    category = Category.from_menu_text(raw_choice)
    if category is None:
        write("Invalid category selection.")
        return

    description = validate_description(read("Enter description: "))

    try:
        store.add(amount, category, description, today())
    except PersistenceError as exc:
        write(f"Error saving expenses: {exc}")
        return
    write("Expense added successfully!")


def _menu_period(store: ExpenseStore, read: Reader, write: Writer) -> None:
    try:
        start = validate_date(read("Enter start date (YYYY-MM-DD): "))
        end = validate_date(read("Enter end date (YYYY-MM-DD): "))
    except ValidationError:
        write("Invalid date format. Please use YYYY-MM-DD.")
        return
    print_period(store, start, end, write)


def run_menu(
    store: ExpenseStore,
    *,
    read: Reader = input,
    write: Writer = print,
    today: Callable[[], date] = date.today,
) -> None:
    """Drive the numbered menu until the user exits or input runs out."""
    while True:
        write(MENU)
        try:
            choice = read("Choose an option: ").strip()
            if choice == "1":
                _menu_add(store, read, write, today)
            elif choice == "2":
                _menu_period(store, read, write)
            elif choice == "3":
                print_categories(store, write)
            elif choice == "4":
                write("Exiting program.")
                return
            elif choice.isdecimal():
                write("Invalid choice. Try again.")
            else:
                write("Invalid input. Please enter a number.")
        except UnicodeDecodeError:
            write("Invalid input. Text could not be decoded.")
        except EOFError:
            write("")
            logger.debug("Input closed; leaving menu")
            return


# One-shot commands --------------------------------------------------------
def handle_add(args: argparse.Namespace, store: ExpenseStore) -> None:
    category = validate_category(args.category)
    description = validate_description(args.description)
    expense = store.add(args.amount, category, description, args.date or date.today())
    print("Expense added:\n" + _format_expense(expense))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Daily Expense Tracker")
    parser.add_argument(
        "--data-file",
        type=Path,
        help="File holding the expense log (default: $EXPENSE_TRACKER_DATA_FILE or ./expenses.txt)",
    )
    parser.add_argument("--log-level", help="Logging level written to stderr (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command")

    add_parser = subparsers.add_parser("add", help="Record a new expense")
    add_parser.add_argument("amount", type=_parse_amount)
    add_parser.add_argument(
        "category",
        help=f"One of {', '.join(c.value for c in Category)} or its number (1-{len(Category)})",
    )
    add_parser.add_argument("--description", default="")
    add_parser.add_argument("--date", type=_parse_date, help="Defaults to today")

    period_parser = subparsers.add_parser("period", help="List expenses in an inclusive date range")
    period_parser.add_argument("start", type=_parse_date)
    period_parser.add_argument("end", type=_parse_date)

    subparsers.add_parser("categories", help="Show totals per category")
    subparsers.add_parser("menu", help="Start the interactive menu (default)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    store = _load_store(args.data_file)

    try:
        if args.command in (None, "menu"):
            run_menu(store)
        elif args.command == "add":
            handle_add(args, store)
        elif args.command == "period":
            print_period(store, args.start, args.end)
        elif args.command == "categories":
            print_categories(store)
        else:  # pragma: no cover - argparse should prevent this
            parser.error(f"Unknown command: {args.command}")
            return 2
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    except PersistenceError as exc:
        print(f"Storage error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
