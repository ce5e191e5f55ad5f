from .errors import InvariantViolation, PresenceError, fail, panic
from .values import (
    UNDEFINED,
    Presence,
    UndefinedType,
    is_absent,
    is_defined,
    is_not_null,
    is_null,
    is_present,
    is_undefined,
    presence_of,
    property_of,
)
from .wrapper import Absent, Present, Wrapper
