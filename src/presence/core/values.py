from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Hashable


class UndefinedType:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "UNDEFINED"
    def __bool__(self): return False

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self
    def __reduce__(self): return (UndefinedType, ())


UNDEFINED = UndefinedType()


class Presence(Enum):
    PRESENT = "✓"
    UNDEFINED = "∅"
    NULL = "⊥"


def is_undefined(val: Any) -> bool:
    return val is UNDEFINED

def is_defined(val: Any) -> bool:
    return val is not UNDEFINED

def is_null(val: Any) -> bool:
    return val is None

def is_not_null(val: Any) -> bool:
    return val is not None

def is_absent(val: Any) -> bool:
    return val is UNDEFINED or val is None

def is_present(val: Any) -> bool:
    return val is not UNDEFINED and val is not None


def presence_of(val: Any) -> Presence:
    if val is UNDEFINED:
        return Presence.UNDEFINED
    if val is None:
        return Presence.NULL
    return Presence.PRESENT


def property_of(val: Any, key: Hashable) -> Any:
    """
    Read a property the way a dynamic object lookup would:
      • mappings by key
      • sequences by integer index (negative indices count from the end)
      • anything else by attribute name
    A missing property reads as UNDEFINED instead of raising.
    """
    if is_absent(val):
        return UNDEFINED
    if isinstance(val, Mapping):
        return val.get(key, UNDEFINED)
    if isinstance(key, int) and isinstance(val, Sequence) and not isinstance(val, str):
        if -len(val) <= key < len(val):
            return val[key]
        return UNDEFINED
    if isinstance(key, str):
        return getattr(val, key, UNDEFINED)
    return UNDEFINED
