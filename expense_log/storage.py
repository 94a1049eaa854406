"""Flat-file persistence for the expense log."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .exceptions import PersistenceError
from .models import Category, Expense, LineResult, format_line, parse_line, sanitize_description

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """What the last load recovered, what it skipped, and any read failure."""

    loaded: int = 0
    skipped: List[LineResult] = field(default_factory=list)
    error: Optional[str] = None
    missing: bool = False


class ExpenseStore:
    """Owns the in-memory expense list and rewrites the whole file on every add."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._expenses: List[Expense] = []
        self.last_load = LoadReport()

    # Public API -----------------------------------------------------------
    def load(self) -> List[Expense]:
        """Read every recoverable record from disk, replacing the in-memory list.

        Malformed lines are skipped and I/O failures are logged; neither aborts
        the load, so callers always get whatever could be recovered.
        """
        report = LoadReport()
        expenses: List[Expense] = []
        if not self._path.exists():
            logger.info("No previous expenses found at %s; starting fresh", self._path)
            report.missing = True
            self._expenses, self.last_load = expenses, report
            return list(expenses)

        try:
            with self._path.open("rb") as handle:
                for number, raw in enumerate(handle, start=1):
                    # Decode per line so one bad byte only costs its own line.
                    try:
                        line = raw.decode("utf-8")
                    except UnicodeDecodeError:
                        result = LineResult(number, skip_reason="line is not valid UTF-8")
                    else:
                        result = parse_line(line, number)
                    if result.ok:
                        expenses.append(result.record)
                    else:
                        report.skipped.append(result)
                        logger.warning(
                            "Skipping line %d of %s: %s", number, self._path, result.skip_reason
                        )
        except OSError as exc:
            report.error = str(exc)
            logger.error("Error loading expenses from %s: %s", self._path, exc)

        report.loaded = len(expenses)
        logger.info(
            "Loaded %d expenses from %s (%d lines skipped)",
            report.loaded,
            self._path,
            len(report.skipped),
        )
        self._expenses, self.last_load = expenses, report
        return list(expenses)

    def add(
        self,
        amount: Decimal,
        category: Union[Category, str],
        description: str,
        when: date,
    ) -> Expense:
        """Append a record and persist the full list.

        Category membership is the caller's concern. If the save fails the
        record stays in memory and ``PersistenceError`` propagates.
        """
        expense = Expense(
            amount=amount,
            category=str(category),
            description=sanitize_description(description),
            date=when,
        )
        self._expenses.append(expense)
        self.save()
        return expense

    def save(self) -> None:
        temp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8", newline="\n") as handle:
                for expense in self._expenses:
                    handle.write(format_line(expense))
                    handle.write("\n")
                handle.flush()
            # Use replace for atomic move on POSIX; the file is always rewritten whole.
            temp_path.replace(self._path)
        except (OSError, UnicodeEncodeError) as exc:
            logger.error("Error saving expenses to %s: %s", self._path, exc)
            if temp_path.exists():
                temp_path.unlink()
            raise PersistenceError(f"Unable to write to {self._path}") from exc

    @property
    def records(self) -> Tuple[Expense, ...]:
        """Immutable snapshot handed to the aggregation functions."""
        return tuple(self._expenses)

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._expenses)
