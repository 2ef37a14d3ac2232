from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class StoreResult:
    ok: bool
    value: Any = None
    error: Optional[Exception] = None

    @classmethod
    def success(cls, value=None):
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error):
        return cls(ok=False, error=error)
