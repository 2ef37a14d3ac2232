"""
Receipt photos on local disk.

Each user gets a directory under the receipt folder; a stored receipt is
referred to as ``"<user_id>/<name>"`` relative to that folder.
"""

import logging
import os
import uuid

from werkzeug.utils import secure_filename

from errors import StoreUnavailable, Unauthenticated
from stores.result import StoreResult

logger = logging.getLogger(__name__)

ALLOWED_RECEIPT_EXT = {"png", "jpg", "jpeg"}


def receipt_extension(filename):
    if not filename or "." not in filename:
        return None
    return filename.rsplit(".", 1)[1].lower()


def allowed_receipt(filename, allowed=ALLOWED_RECEIPT_EXT):
    return receipt_extension(filename) in allowed


def owns_receipt(user_id, receipt_ref):
    """True when ``receipt_ref`` points inside the user's own directory."""
    if user_id is None or not receipt_ref:
        return False
    owner, _, name = receipt_ref.partition("/")
    return owner == str(user_id) and bool(name) and name == secure_filename(name)


class ReceiptStore:

    def __init__(self, folder):
        self._folder = folder

    def _user_dir(self, user_id):
        return os.path.join(self._folder, str(user_id))

    def save(self, user_id, upload):
        if user_id is None:
            return StoreResult.failure(Unauthenticated())
        ext = receipt_extension(upload.filename)
        name = f"{uuid.uuid4().hex}.{ext}"
        try:
            os.makedirs(self._user_dir(user_id), exist_ok=True)
            upload.save(os.path.join(self._user_dir(user_id), name))
        except OSError as e:
            logger.error("Receipt upload failed for user %s: %s", user_id, e)
            return StoreResult.failure(StoreUnavailable(str(e)))
        logger.info("Stored receipt %s for user %s", name, user_id)
        return StoreResult.success(f"{user_id}/{name}")

    def list(self, user_id):
        if user_id is None:
            return StoreResult.failure(Unauthenticated())
        user_dir = self._user_dir(user_id)
        if not os.path.isdir(user_dir):
            return StoreResult.success([])
        try:
            entries = sorted(
                (entry for entry in os.scandir(user_dir) if entry.is_file() and allowed_receipt(entry.name)),
                key=lambda entry: entry.stat().st_mtime,
                reverse=True,
            )
        except OSError as e:
            logger.error("Listing receipts failed for user %s: %s", user_id, e)
            return StoreResult.failure(StoreUnavailable(str(e)))
        return StoreResult.success([f"{user_id}/{entry.name}" for entry in entries])

    def delete(self, user_id, receipt_ref):
        if user_id is None:
            return StoreResult.failure(Unauthenticated())
        if not owns_receipt(user_id, receipt_ref):
            return StoreResult.failure(StoreUnavailable(f"Not a receipt of user {user_id}: {receipt_ref}"))
        try:
            os.remove(os.path.join(self._folder, receipt_ref))
        except FileNotFoundError:
            logger.debug("Receipt %s already gone", receipt_ref)
            return StoreResult.success(None)
        except OSError as e:
            logger.error("Removing receipt %s failed: %s", receipt_ref, e)
            return StoreResult.failure(StoreUnavailable(str(e)))
        logger.info("Removed receipt %s", receipt_ref)
        return StoreResult.success(None)
