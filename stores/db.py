import logging
from contextlib import contextmanager
from functools import wraps

import mysql.connector

from errors import StoreUnavailable, Unauthenticated
from stores.result import StoreResult

logger = logging.getLogger(__name__)


def store_call(fn):
    """
    Run a store method and turn its outcome into a StoreResult.

    The wrapped method receives ``user_id`` first and returns the success
    value. Calls without a user fail at once; database errors become
    StoreUnavailable failures.
    """
    @wraps(fn)
    def wrapper(self, user_id, *args, **kwargs):
        if user_id is None:
            return StoreResult.failure(Unauthenticated())
        try:
            value = fn(self, user_id, *args, **kwargs)
        except mysql.connector.Error as e:
            logger.error("%s.%s failed for user %s: %s", type(self).__name__, fn.__name__, user_id, e)
            return StoreResult.failure(StoreUnavailable(str(e)))
        return StoreResult.success(value)
    return wrapper


class MySQLStore:
    """Base for stores backed by the app's MySQL connection pool."""

    def __init__(self, pool):
        self._pool = pool

    @contextmanager
    def _cursor(self, commit=False):
        conn = self._pool.get_connection()
        try:
            with conn.cursor(dictionary=True) as cur:
                yield cur
            if commit:
                conn.commit()
        finally:
            conn.close()
