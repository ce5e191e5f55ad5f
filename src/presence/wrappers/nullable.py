"""
Nullable family: only None is absent. UNDEFINED is an ordinary value here,
so solum(UNDEFINED) is present.
"""
from typing import Any, Optional, TypeVar

from presence.core.values import is_not_null, is_null
from presence.core.wrapper import Absent, Present, Wrapper

T = TypeVar("T")


class Nullable(Wrapper[T]):
    @staticmethod
    def _holds(value: Any) -> bool:
        return is_not_null(value)

    @staticmethod
    def _of(value: Any) -> "Nullable[Any]":
        return nullable(value)

    @staticmethod
    def _filtered() -> "Nullable[Any]":
        return nil()


class Solum(Present[T], Nullable[T]):
    _requirement = "not null"


class Nil(Absent[T], Nullable[T]):
    _marker = None


def solum(value: T) -> Solum[T]:
    return Solum(value)


def nil() -> Nil[Any]:
    return Nil()


def nullable(value: Optional[T]) -> Nullable[T]:
    if is_null(value):
        return nil()
    return solum(value)
