from typing import Any, Callable, TypeVar, Union
from typing import TypeGuard as TypeGuard

T = TypeVar("T")
R = TypeVar("R")

Nullary = Callable[[], T]
Unary = Callable[[T], R]
Predicate = Callable[[T], bool]
Procedure = Callable[[T], Any]

# A constant or a thunk producing it; resolved lazily by otherwise()/or_().
Value = Union[T, Callable[[], T]]
Fallback = Value
Proposition = Union[bool, Callable[[], bool]]


def resolve(value: Any) -> Any:
    if callable(value):
        return value()
    return value
