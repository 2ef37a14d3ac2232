"""
Adapters between the app and its storage.

Every store method returns a ``StoreResult`` instead of raising, so callers
always get an explicit success or failure.
"""

from stores.result import StoreResult
from stores.records import RecordStore
from stores.limits import LimitStore
from stores.receipts import ReceiptStore

__all__ = ["StoreResult", "RecordStore", "LimitStore", "ReceiptStore"]
