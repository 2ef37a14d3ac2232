"""
Day records, one row per user, month and day.

The category map is kept as a JSON object so a day is read and written as
a single document. Writing a day replaces its whole document.
"""

import json
import logging
import math

from budget.models import CATEGORIES, ExpenseRecord
from stores.db import MySQLStore, store_call

logger = logging.getLogger(__name__)


def decode_amounts(raw) -> dict[str, float]:
    """Read a stored category map, dropping values that are not amounts."""
    if raw is None:
        return {}
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        try:
            raw = json.loads(raw) if raw.strip() else {}
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable category map: %r", raw[:80])
            return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring category map of type %s", type(raw).__name__)
        return {}

    amounts = {}
    for key, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.warning("Skipping non-numeric amount for %s: %r", key, value)
            continue
        if not math.isfinite(value) or value < 0:
            logger.warning("Skipping invalid amount for %s: %r", key, value)
            continue
        amounts[str(key)] = float(value)
    return amounts


def encode_amounts(amounts: dict[str, float]) -> str:
    return json.dumps({key: float(value) for key, value in amounts.items()}, sort_keys=True)


def record_from_row(row) -> ExpenseRecord:
    return ExpenseRecord(
        day=int(row["day"]),
        category_amounts=decode_amounts(row.get("amounts")),
        notes=row.get("notes") or "",
        receipt_ref=row.get("receipt_ref") or None,
    )


class RecordStore(MySQLStore):

    @store_call
    def get(self, user_id, month_label):
        with self._cursor() as cur:
            cur.execute(
                "SELECT day, amounts, notes, receipt_ref FROM expense_days "
                "WHERE user_id=%s AND month_label=%s ORDER BY day",
                (user_id, month_label)
            )
            rows = cur.fetchall()
        return [record_from_row(row) for row in rows]

    @store_call
    def get_day(self, user_id, month_label, day):
        with self._cursor() as cur:
            cur.execute(
                "SELECT day, amounts, notes, receipt_ref FROM expense_days "
                "WHERE user_id=%s AND month_label=%s AND day=%s",
                (user_id, month_label, day)
            )
            row = cur.fetchone()
        return record_from_row(row) if row else None

    @store_call
    def put(self, user_id, month_label, record):
        with self._cursor(commit=True) as cur:
            cur.execute(
                """
                INSERT INTO expense_days (user_id, month_label, day, amounts, notes, receipt_ref)
                VALUES (%s, %s, %s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    amounts = VALUES(amounts),
                    notes = VALUES(notes),
                    receipt_ref = VALUES(receipt_ref)
                """,
                (
                    user_id,
                    month_label,
                    record.day,
                    encode_amounts(record.category_amounts),
                    record.notes or "",
                    record.receipt_ref,
                )
            )
        logger.info("Saved %s day %s for user %s", month_label, record.day, user_id)
        return record


def empty_record(day) -> ExpenseRecord:
    return ExpenseRecord(day=day, category_amounts={category: 0.0 for category in CATEGORIES})
