from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Tuple, TypeVar

from loguru import logger

from .errors import InvariantViolation
from .types import Predicate, Procedure, Proposition, TypeGuard, Value, resolve
from .values import Presence, presence_of, property_of

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, eq=False, repr=False)
class Wrapper(ABC, Generic[T]):
    """
    A value slot that is either present or absent in the sense of its family.

    Families differ only in three hooks:
      • _holds(value): does the raw value count as present?
      • _of(value): classify a raw value into the family's variant
      • _filtered(): the absent variant produced by a failed filter
    Every combinator short-circuits on absence, except lift().
    """

    value: Any

    def __post_init__(self) -> None:
        pass

    @staticmethod
    @abstractmethod
    def _holds(value: Any) -> bool:
        ...

    @staticmethod
    @abstractmethod
    def _of(value: Any) -> Wrapper[Any]:
        ...

    @staticmethod
    @abstractmethod
    def _filtered() -> Wrapper[Any]:
        ...

    @property
    def present(self) -> bool:
        return self._holds(self.value)

    def onto(self, bind: Callable[[T], Wrapper[U]]) -> Wrapper[U]:
        if not self.present:
            return self  # type: ignore[return-value]
        result = bind(self.value)
        if not isinstance(result, Wrapper):
            raise TypeError(
                f"onto() expects the bound function to return a wrapper, got {type(result).__name__}"
            )
        return result

    def to(self, map: Callable[[T], Any]) -> Wrapper[Any]:
        if not self.present:
            return self
        return self._of(map(self.value))

    def pick(self, key: Value[Hashable]) -> Wrapper[Any]:
        return self.to(lambda value: property_of(value, resolve(key)))

    def that(self, predicate: Predicate[T]) -> Wrapper[T]:
        if not self.present or predicate(self.value):
            return self
        return self._filtered()

    def which(self, guard: Callable[[T], TypeGuard[U]]) -> Wrapper[U]:
        # Same check as that(); the guard only narrows the static type.
        return self.that(guard)  # type: ignore[return-value]

    def when(self, condition: Proposition) -> Wrapper[T]:
        if not self.present or resolve(condition):
            return self
        return self._filtered()

    def otherwise(self, fallback: Value[Any]) -> Wrapper[Any]:
        """
        Keep a present value; otherwise re-classify the resolved fallback.
        A callable fallback is called only when needed, and whatever it raises
        reaches the caller unchanged (see errors.fail/panic).
        """
        if self.present:
            return self
        return self._of(resolve(fallback))

    def or_(self, fallback: Value[Any]) -> Any:
        if self.present:
            return self.value
        return resolve(fallback)

    def run(self, procedure: Procedure[T]) -> Wrapper[T]:
        if self.present:
            procedure(self.value)
        return self

    def lift(self, fn: Callable[[Any], Any]) -> Wrapper[Any]:
        return self._of(fn(self.value))

    @property
    def _family(self) -> type:
        # Family base: the class that defines the classification hooks.
        return next(cls for cls in type(self).__mro__ if "_of" in cls.__dict__)

    def _kind(self) -> Tuple[type, bool, Presence]:
        return self._family, self.present, presence_of(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Wrapper):
            return NotImplemented
        return self._kind() == other._kind() and self.value == other.value

    def __hash__(self) -> int:
        return hash((self._kind(), self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


_UNSET = object()


class Present(Wrapper[T]):
    """Base of the present variants; construction validates the value."""

    _requirement = "present"

    def __post_init__(self) -> None:
        if not self._holds(self.value):
            logger.debug("Rejected {variant} holding {value!r}", variant=type(self).__name__, value=self.value)
            raise InvariantViolation(f"{type(self).__name__} value must be {self._requirement}")


class Absent(Wrapper[T]):
    """
    Base of the absent variants. Each concrete absent class is a process-wide
    singleton holding its family's marker, so `is` comparison is valid.
    """

    _marker: Any = None
    _requirement = "absent"

    def __new__(cls, value: Any = _UNSET):
        if value is not _UNSET and value is not cls._marker:
            logger.debug("Rejected {variant} holding {value!r}", variant=cls.__name__, value=value)
            raise InvariantViolation(f"{cls.__name__} value must be {cls._requirement}")
        instance = cls.__dict__.get("_instance")
        if instance is None:
            instance = super().__new__(cls)
            object.__setattr__(instance, "value", cls._marker)
            cls._instance = instance
        return instance

    def __init__(self, value: Any = _UNSET) -> None:
        pass

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (type(self), ())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
