import logging

from budget.models import PeriodLimits, PeriodSelector

logger = logging.getLogger(__name__)


class LimitsState:
    """
    The current user's limits, owned by whoever creates it.

    Screens that need the limits receive this object instead of reading a
    global. ``refresh`` pulls the stored values; ``save`` writes new ones and
    only replaces the held copy once the store has accepted them.
    """

    def __init__(self, store, user_id):
        self._store = store
        self._user_id = user_id
        self.limits = PeriodLimits()

    def refresh(self):
        result = self._store.get(self._user_id)
        if result.ok:
            self.limits = result.value
        else:
            logger.warning("Keeping previous limits for user %s: %s", self._user_id, result.error)
        return result

    def save(self, limits: PeriodLimits):
        result = self._store.put(self._user_id, limits)
        if result.ok:
            self.limits = limits
        return result

    def limit_for(self, selector: PeriodSelector) -> float:
        return self.limits.for_selector(selector)
