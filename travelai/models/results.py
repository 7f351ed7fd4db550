from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Outcome of a call that depends on an external service.

    `value` is always usable: either the real result or the designed-in
    default. `fallback_used` tells the two apart, `error` keeps the reason.
    """
    value: T
    fallback_used: bool = False
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def fallback(cls, value: T, error: Optional[str] = None) -> "ServiceResult[T]":
        return cls(value=value, fallback_used=True, error=error)
