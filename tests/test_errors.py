import pytest
from loguru import logger

from presence.core.errors import InvariantViolation, PresenceError, fail, panic


def test_fail_raises_presence_error():
    with pytest.raises(PresenceError, match="Value is absent"):
        fail("Value is absent")()

def test_fail_without_message():
    with pytest.raises(PresenceError):
        fail()()

def test_panic_raises_given_error():
    error = RuntimeError("boom")
    with pytest.raises(RuntimeError) as info:
        panic(error)()
    assert info.value is error

def test_invariant_violation_hierarchy():
    assert issubclass(InvariantViolation, PresenceError)
    assert issubclass(InvariantViolation, ValueError)

def test_escalation_is_logged():
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        with pytest.raises(PresenceError):
            fail("pi is missing")()
    finally:
        logger.remove(sink_id)
    assert any("pi is missing" in m for m in messages)
