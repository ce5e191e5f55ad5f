"""
Optional family: only UNDEFINED is absent. None is an ordinary value here,
so some(None) is present.
"""
from typing import Any, TypeVar

from presence.core.values import UNDEFINED, is_defined, is_undefined
from presence.core.wrapper import Absent, Present, Wrapper

T = TypeVar("T")


class Optional(Wrapper[T]):
    @staticmethod
    def _holds(value: Any) -> bool:
        return is_defined(value)

    @staticmethod
    def _of(value: Any) -> "Optional[Any]":
        return optional(value)

    @staticmethod
    def _filtered() -> "Optional[Any]":
        return vacant()


class Some(Present[T], Optional[T]):
    _requirement = "defined"


class Vacant(Absent[T], Optional[T]):
    _marker = UNDEFINED


def some(value: T) -> Some[T]:
    return Some(value)


def vacant() -> Vacant[Any]:
    return Vacant()


def optional(value: Any = UNDEFINED) -> Optional[Any]:
    if is_undefined(value):
        return vacant()
    return some(value)
