"""Flask REST API exposing the expense log."""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional, Union

from flask import Flask, jsonify, request
from flask_cors import CORS

from expense_log.aggregation import grand_total, list_by_period, summarize_by_category
from expense_log.config import configure_logging, resolve_data_file
from expense_log.exceptions import PersistenceError, ValidationError
from expense_log.models import Category
from expense_log.storage import ExpenseStore
from expense_log.validators import (
    parse_amount,
    validate_category,
    validate_date,
    validate_description,
)


def create_app(data_file: Optional[Union[str, Path]] = None) -> Flask:
    app = Flask(__name__)

    env_name = os.getenv("EXPENSE_TRACKER_ENV", "prod").lower()
    if env_name in {"dev", "development"}:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    else:
        allowed_origins = os.getenv("EXPENSE_TRACKER_ALLOWED_ORIGINS")
        if allowed_origins:
            origins = [origin.strip() for origin in allowed_origins.split(",") if origin.strip()]
            CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)
        else:
            CORS(app)

    store = ExpenseStore(resolve_data_file(data_file))
    store.load()
    app.config["EXPENSE_STORE"] = store

    def _success(payload: Any, status: int = 200):
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "details": str(exc)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error")

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(exc: PersistenceError):
        return _handle_error(exc, 500, "Persistence error")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    @app.get("/categories")
    def list_categories():
        return _success({"items": [category.value for category in Category]})

    @app.get("/expenses")
    def list_expenses():
        start = request.args.get("start")
        end = request.args.get("end")
        if start or end:
            if not (start and end):
                raise ValidationError("start and end must be provided together")
            listing = list_by_period(
                store.records, validate_date(start, "start"), validate_date(end, "end")
            )
            records, total = listing.records, listing.total
        else:
            records = store.records
            total = grand_total(records)
        return _success({
            "items": [expense.to_dict() for expense in records],
            "total": f"{total:.2f}",
        })

    @app.post("/expenses")
    def create_expense():
        payload = _json_body()
        raw_date = payload.get("date")
        expense = store.add(
            parse_amount(payload.get("amount")),
            validate_category(payload.get("category")),
            validate_description(payload.get("description")),
            validate_date(raw_date) if raw_date is not None else date.today(),
        )
        return _success(expense.to_dict(), 201)

    @app.get("/summary/categories")
    def summary_by_category():
        totals = summarize_by_category(store.records)
        return _success({
            "items": [
                {"category": category.value, "total": f"{total:.2f}"}
                for category, total in totals.items()
            ],
            "total": f"{sum(totals.values()):.2f}",
        })

    return app


if __name__ == "__main__":
    configure_logging()
    create_app().run()
