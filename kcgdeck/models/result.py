"""
Explicit success/failure values.

Codec, validation and deck operations never raise for bad input. They
return either ``Ok(value)`` or ``Err(error)``, and callers branch with
``match`` or ``is_ok()``:

    match decode_kcg_code(code):
        case Ok(card_ids):
            ...
        case Err(error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed outcome carrying an error value."""

    error: E

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True


Result = Union[Ok[T], Err[E]]
