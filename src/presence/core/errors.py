from typing import Callable, NoReturn, Optional

from loguru import logger


class PresenceError(Exception):
    pass


class InvariantViolation(PresenceError, ValueError):
    """A variant was constructed against its presence invariant."""


def fail(message: Optional[str] = None) -> Callable[[], NoReturn]:
    """
    Fallback that raises PresenceError when an absent value reaches it:

        user = maybe(users.get(uid)).or_(fail(f"Unknown user {uid}"))
    """
    def _fail() -> NoReturn:
        logger.debug("Absent value escalated: {message}", message=message)
        raise PresenceError(message)

    return _fail


def panic(error: BaseException) -> Callable[[], NoReturn]:
    def _panic() -> NoReturn:
        logger.debug("Absent value escalated with {error!r}", error=error)
        raise error

    return _panic
