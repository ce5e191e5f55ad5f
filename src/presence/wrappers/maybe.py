"""
Maybe family: present values, absent-undefined and absent-null are three
distinct variants (Just, Nothing, Naught).
"""
from typing import Any, TypeVar

from presence.core.values import UNDEFINED, is_null, is_present, is_undefined
from presence.core.wrapper import Absent, Present, Wrapper

T = TypeVar("T")


class Maybe(Wrapper[T]):
    @staticmethod
    def _holds(value: Any) -> bool:
        return is_present(value)

    @staticmethod
    def _of(value: Any) -> "Maybe[Any]":
        return maybe(value)

    @staticmethod
    def _filtered() -> "Maybe[Any]":
        return nothing()


class Just(Present[T], Maybe[T]):
    pass


class Nothing(Absent[T], Maybe[T]):
    _marker = UNDEFINED


class Naught(Absent[T], Maybe[T]):
    _marker = None


def just(value: T) -> Just[T]:
    return Just(value)


def nothing() -> Nothing[Any]:
    return Nothing()


def naught() -> Naught[Any]:
    return Naught()


def maybe(value: Any) -> Maybe[Any]:
    if is_undefined(value):
        return nothing()
    if is_null(value):
        return naught()
    return just(value)
