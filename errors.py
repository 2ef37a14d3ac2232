"""
Error types shared by the stores, the limit parser and the routes.
"""


class DailySpendsError(Exception):
    """Base class for application errors."""


class StoreUnavailable(DailySpendsError):
    """The database or receipt storage could not complete a call."""


class ParseFailure(DailySpendsError, ValueError):
    """Text could not be read as a non-negative amount."""


class Unauthenticated(DailySpendsError):
    """A call needed a user identity and none was available."""

    def __init__(self, message="No user is logged in"):
        super().__init__(message)
