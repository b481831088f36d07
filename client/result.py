"""
Result type for client network calls

Every API call resolves to either ``Ok(value)`` or ``Err(error)`` so callers
have to handle both branches instead of letting a failure pass silently.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: str

    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
