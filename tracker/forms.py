"""Turn raw form input into domain values.

Both parsers return an ``Either``: ``Right`` carries what the page should
store, ``Left`` carries an error dict describing why the submission was
discarded. The page never shows these errors; incomplete forms are simply
ignored.
"""

from typing import Any, Mapping, Optional, Tuple

import pandas as pd

from tracker.domain import Transaction
from tracker.functional import Either, Left, Right
from tracker.transforms import new_transaction_id

TRANSACTION_FIELDS = ("description", "amount", "date", "category")
BUDGET_FIELDS = ("category", "amount")


def is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def require_fields(fields: Mapping[str, Any], names: Tuple[str, ...]) -> Either[dict, Mapping[str, Any]]:
    missing = [name for name in names if is_empty(fields.get(name))]
    if missing:
        return Left({
            "error": "missing_field",
            "message": f"Missing value for {', '.join(missing)}",
            "fields": missing,
        })
    return Right(fields)


def coerce_amount(value: Any) -> Either[dict, float]:
    try:
        return Right(float(value))
    except (TypeError, ValueError):
        return Left({
            "error": "invalid_amount",
            "message": f"Amount {value!r} is not a number",
            "amount": value,
        })


def coerce_date(value: Any) -> Either[dict, Any]:
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return Left({
            "error": "invalid_date",
            "message": f"Date {value!r} could not be read",
            "date": value,
        })
    return Right(ts.date())


def parse_transaction_form(
    fields: Mapping[str, Any],
    existing: Tuple[Transaction, ...],
    now_ms: Optional[int] = None,
) -> Either[dict, Transaction]:
    def build(valid: Mapping[str, Any]) -> Either[dict, Transaction]:
        return coerce_amount(valid["amount"]).bind(
            lambda amount: coerce_date(valid["date"]).map(
                lambda day: Transaction(
                    id=new_transaction_id(existing, now_ms),
                    description=str(valid["description"]),
                    amount=amount,
                    date=day,
                    category=str(valid["category"]),
                )
            )
        )

    return require_fields(fields, TRANSACTION_FIELDS).bind(build)


def parse_budget_form(fields: Mapping[str, Any]) -> Either[dict, Tuple[str, float]]:
    return require_fields(fields, BUDGET_FIELDS).bind(
        lambda valid: coerce_amount(valid["amount"]).map(
            lambda amount: (str(valid["category"]), amount)
        )
    )
