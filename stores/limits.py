import logging

from budget.models import PeriodLimits
from stores.db import MySQLStore, store_call

logger = logging.getLogger(__name__)


class LimitStore(MySQLStore):

    @store_call
    def get(self, user_id):
        with self._cursor() as cur:
            cur.execute(
                "SELECT daily_limit, monthly_limit, yearly_limit FROM user_limits WHERE user_id=%s",
                (user_id,)
            )
            row = cur.fetchone()
        if not row:
            return PeriodLimits()
        return PeriodLimits(
            daily_limit=float(row["daily_limit"] or 0),
            monthly_limit=float(row["monthly_limit"] or 0),
            yearly_limit=float(row["yearly_limit"] or 0),
        )

    @store_call
    def put(self, user_id, limits):
        with self._cursor(commit=True) as cur:
            cur.execute(
                """
                INSERT INTO user_limits (user_id, daily_limit, monthly_limit, yearly_limit)
                VALUES (%s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    daily_limit = VALUES(daily_limit),
                    monthly_limit = VALUES(monthly_limit),
                    yearly_limit = VALUES(yearly_limit)
                """,
                (user_id, limits.daily_limit, limits.monthly_limit, limits.yearly_limit)
            )
        logger.info("Saved limits for user %s", user_id)
        return limits
