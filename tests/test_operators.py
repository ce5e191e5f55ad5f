from presence.core.errors import PresenceError, fail
from presence.core.values import UNDEFINED, is_undefined
from presence.operators import chain, lift, onto, or_, otherwise, pick, run, that, to, when, which
from presence.wrappers.maybe import just, maybe, naught, nothing

import pytest


def test_chain_with_present_value():
    area = chain(maybe({"width": 3}), pick("width"), to(lambda w: w * w), or_(0))
    assert area == 9

def test_chain_with_missing_property():
    area = chain(maybe({}), pick("width"), to(lambda w: w * w), or_(0))
    assert area == 0

def test_operators_map_over_wrappers():
    wrappers = [just(1), nothing(), naught()]
    assert list(map(to(str), wrappers)) == [just("1"), nothing(), naught()]
    assert list(map(otherwise(0), wrappers)) == [just(1), just(0), just(0)]
    assert list(map(lift(is_undefined), wrappers)) == [just(False), just(True), just(False)]

def test_operators_match_methods():
    wrapper = just(3.14)
    assert onto(lambda x: just(-x))(wrapper) == wrapper.onto(lambda x: just(-x))
    assert that(lambda x: x > 3)(wrapper) == wrapper.that(lambda x: x > 3)
    assert which(lambda x: isinstance(x, int))(wrapper) is nothing()
    assert when(False)(wrapper) is nothing()
    assert or_(UNDEFINED)(nothing()) is UNDEFINED

def test_run_operator():
    seen = []
    wrapper = just(3.14)
    assert run(seen.append)(wrapper) is wrapper
    assert seen == [3.14]

def test_chain_propagates_fallback_errors():
    with pytest.raises(PresenceError, match="width is required"):
        chain(maybe({}), pick("width"), or_(fail("width is required")))
