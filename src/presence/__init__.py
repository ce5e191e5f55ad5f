from presence.config import LoggingConfig, __version__
from presence.core import (
    UNDEFINED,
    InvariantViolation,
    Presence,
    PresenceError,
    Wrapper,
    fail,
    is_absent,
    is_defined,
    is_not_null,
    is_null,
    is_present,
    is_undefined,
    panic,
    presence_of,
    property_of,
)
from presence.core.predicates import (
    has_absent_property,
    has_defined_property,
    has_not_null_property,
    has_null_property,
    has_present_property,
    has_undefined_property,
    is_instance,
)
from presence.logging_config import configure_logging
from presence.wrappers import (
    Just,
    Maybe,
    Naught,
    Nil,
    Nothing,
    Nullable,
    Optional,
    Solum,
    Some,
    Vacant,
    just,
    maybe,
    naught,
    nil,
    nothing,
    nullable,
    optional,
    solum,
    some,
    vacant,
)

configure_logging()
