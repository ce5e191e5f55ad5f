from typing import Any, Callable, Hashable

from .values import (
    is_absent,
    is_defined,
    is_not_null,
    is_null,
    is_present,
    is_undefined,
    property_of,
)


def _has_property(check: Callable[[Any], bool], keys: tuple) -> Callable[[Any], bool]:
    def _guard(value: Any) -> bool:
        return all(check(property_of(value, key)) for key in keys)

    return _guard


def has_present_property(*keys: Hashable) -> Callable[[Any], bool]:
    return _has_property(is_present, keys)

def has_absent_property(*keys: Hashable) -> Callable[[Any], bool]:
    return _has_property(is_absent, keys)

def has_defined_property(*keys: Hashable) -> Callable[[Any], bool]:
    return _has_property(is_defined, keys)

def has_undefined_property(*keys: Hashable) -> Callable[[Any], bool]:
    return _has_property(is_undefined, keys)

def has_not_null_property(*keys: Hashable) -> Callable[[Any], bool]:
    return _has_property(is_not_null, keys)

def has_null_property(*keys: Hashable) -> Callable[[Any], bool]:
    return _has_property(is_null, keys)


def is_instance(*types: type) -> Callable[[Any], bool]:
    def _guard(value: Any) -> bool:
        return isinstance(value, types)

    return _guard
