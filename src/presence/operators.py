"""
Curried forms of the wrapper combinators, for building pipelines:

    area = chain(maybe(shape), pick("width"), to(lambda w: w * w), or_(0))
"""
from typing import Any, Callable, Hashable, TypeVar

from presence.core.types import Predicate, Procedure, Proposition, TypeGuard, Value
from presence.core.wrapper import Wrapper

T = TypeVar("T")
U = TypeVar("U")

Step = Callable[[Wrapper[Any]], Any]


def onto(bind: Callable[[T], Wrapper[U]]) -> Callable[[Wrapper[T]], Wrapper[U]]:
    return lambda wrapper: wrapper.onto(bind)


def to(map: Callable[[T], Any]) -> Callable[[Wrapper[T]], Wrapper[Any]]:
    return lambda wrapper: wrapper.to(map)


def pick(key: Hashable) -> Callable[[Wrapper[Any]], Wrapper[Any]]:
    return lambda wrapper: wrapper.pick(key)


def that(predicate: Predicate[T]) -> Callable[[Wrapper[T]], Wrapper[T]]:
    return lambda wrapper: wrapper.that(predicate)


def which(guard: Callable[[T], TypeGuard[U]]) -> Callable[[Wrapper[T]], Wrapper[U]]:
    return lambda wrapper: wrapper.which(guard)


def when(condition: Proposition) -> Callable[[Wrapper[T]], Wrapper[T]]:
    return lambda wrapper: wrapper.when(condition)


def otherwise(fallback: Value[Any]) -> Callable[[Wrapper[Any]], Wrapper[Any]]:
    return lambda wrapper: wrapper.otherwise(fallback)


def or_(fallback: Value[Any]) -> Callable[[Wrapper[Any]], Any]:
    return lambda wrapper: wrapper.or_(fallback)


def run(procedure: Procedure[T]) -> Callable[[Wrapper[T]], Wrapper[T]]:
    return lambda wrapper: wrapper.run(procedure)


def lift(fn: Callable[[Any], Any]) -> Callable[[Wrapper[Any]], Wrapper[Any]]:
    return lambda wrapper: wrapper.lift(fn)


def chain(wrapper: Wrapper[Any], *steps: Step) -> Any:
    result: Any = wrapper
    for step in steps:
        result = step(result)
    return result
