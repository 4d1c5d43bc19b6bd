from __future__ import annotations

import dataclasses
import typing

import pytest

from conftest import Tagged, Trace, err, ok
from letanything import LetConfig, Sequencer, let_anything, run_let

pytestmark = pytest.mark.unit


def _always_continue(value: Tagged, k: typing.Callable[[typing.Any], Tagged]) -> Tagged:
    return k(value.value)


# =============================================================================
# Sequencing
# =============================================================================


def test_no_yields_returns_final_value_without_binding() -> None:
    def let_(value: Tagged, k: typing.Any) -> Tagged:
        raise AssertionError("let_ must not be called")

    final = ok("v")

    def computation():
        return final
        yield  # pragma: no cover

    assert let_anything(LetConfig(let_=let_))(computation) is final


def test_payloads_are_sent_back_in_yield_order() -> None:
    seen: list[typing.Any] = []

    def let_(value: Tagged, k: typing.Callable[[typing.Any], Tagged]) -> Tagged:
        seen.append(value.value)
        return k(value.value)

    def computation():
        a = yield ok(2)
        b = yield ok(3)
        return ok(a * 10 + b)

    result = let_anything(LetConfig(let_=let_))(computation)

    assert seen == [2, 3]
    assert result == ok(23)


def test_final_type_may_differ_from_yielded_type() -> None:
    def computation():
        count = yield ok(3)
        return f"{count} items"

    assert let_anything(LetConfig(let_=_always_continue))(computation) == "3 items"


def test_failure_stops_computation(let_tagged: Sequencer[Tagged], trace: Trace) -> None:
    def computation():
        trace.hit("first")
        yield ok("d")
        trace.hit("second")
        yield err("bug")
        trace.hit("third")
        yield ok("e")
        return ok("should-not-reach")

    result = let_tagged(computation)

    assert result == err("bug")
    assert trace.points == ["first", "second"]


def test_all_succeed(let_tagged: Sequencer[Tagged]) -> None:
    def computation():
        d = yield ok("d")
        e = yield ok("e")
        return ok(d + e)

    assert let_tagged(computation) == ok("de")


def test_each_run_gets_its_own_generator(let_tagged: Sequencer[Tagged]) -> None:
    created: list[list[int]] = []

    def computation():
        state: list[int] = []
        created.append(state)
        state.append((yield ok(1)))
        state.append((yield ok(2)))
        return ok(list(state))

    first = let_tagged(computation)
    second = let_tagged(computation)

    assert first == ok([1, 2])
    assert second == ok([1, 2])
    assert len(created) == 2
    assert created[0] is not created[1]


# =============================================================================
# Continuation control
# =============================================================================


def test_stored_continuation_resumes_later() -> None:
    parked: list[typing.Callable[[typing.Any], typing.Any]] = []

    def let_(value: Tagged, k: typing.Callable[[typing.Any], typing.Any]) -> str:
        parked.append(k)
        return "parked"

    def computation():
        name = yield ok("ignored")
        return f"hello {name}"

    assert let_anything(LetConfig(let_=let_))(computation) == "parked"
    assert parked[0]("world") == "hello world"


def test_second_continuation_call_resumes_advanced_generator() -> None:
    calls: list[tuple[typing.Any, typing.Any]] = []
    received: list[typing.Any] = []

    def let_(value: int, k: typing.Callable[[typing.Any], typing.Any]) -> typing.Any:
        first = k(value)
        second = k(value)
        calls.append((first, second))
        return second

    def computation():
        a = yield 1
        received.append(a)
        b = yield 2
        received.append(b)
        return ("done", a, b)

    result = let_anything(LetConfig(let_=let_))(computation)

    # the generator body runs once; repeated resumes hit the exhausted generator
    assert received == [1, 2]
    assert calls == [(("done", 1, 2), None), (None, None)]
    assert result is None


# =============================================================================
# Errors
# =============================================================================


def test_bind_exception_propagates() -> None:
    def let_(value: Tagged, k: typing.Any) -> Tagged:
        raise ValueError("bad bind")

    def computation():
        yield ok(1)
        return ok(2)

    with pytest.raises(ValueError, match="bad bind"):
        let_anything(LetConfig(let_=let_))(computation)


def test_deep_computation_hits_recursion_limit() -> None:
    def computation():
        total = 0
        for step in range(5000):
            total += yield ok(step)
        return ok(total)

    with pytest.raises(RecursionError):
        let_anything(LetConfig(let_=_always_continue))(computation)


def test_computation_exception_propagates(let_tagged: Sequencer[Tagged]) -> None:
    def computation():
        value = yield ok(0)
        return ok(1 / value)

    with pytest.raises(ZeroDivisionError):
        let_tagged(computation)


def test_no_yields_never_touches_non_callable_bind() -> None:
    final = ok("v")

    def computation():
        return final
        yield  # pragma: no cover

    sequencer = let_anything(LetConfig(let_=None))  # type: ignore[arg-type]

    assert sequencer(computation) is final


def test_non_callable_bind_fails_only_when_reached() -> None:
    def computation():
        yield ok(1)
        return ok(2)  # pragma: no cover

    sequencer = let_anything(LetConfig(let_=None))  # type: ignore[arg-type]

    with pytest.raises(TypeError):
        sequencer(computation)


def test_config_is_frozen() -> None:
    config = LetConfig(let_=_always_continue)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.let_ = _always_continue  # type: ignore[misc]


# =============================================================================
# Sugar
# =============================================================================


def test_lifted_passes_arguments_and_keeps_metadata(let_tagged: Sequencer[Tagged]) -> None:
    @let_tagged.lifted
    def greet(name: str, *, punctuation: str = "!"):
        """Say hello."""
        prefix = yield ok("hello")
        return ok(f"{prefix} {name}{punctuation}")

    assert greet("ann") == ok("hello ann!")
    assert greet("bob", punctuation="?") == ok("hello bob?")
    assert greet.__name__ == "greet"
    assert greet.__doc__ == "Say hello."


def test_call_runs_generator_function_with_arguments(let_tagged: Sequencer[Tagged]) -> None:
    def add(x: int, y: int):
        a = yield ok(x)
        b = yield ok(y)
        return ok(a + b)

    assert let_tagged.call(add, 2, y=5) == ok(7)


def test_run_let_matches_sequencer(let_tagged: Sequencer[Tagged]) -> None:
    def computation():
        a = yield ok(4)
        return ok(a + 1)

    assert run_let(computation, let_=let_tagged.config.let_) == let_tagged(computation)


def test_repr_mentions_bind() -> None:
    sequencer = let_anything(LetConfig(let_=_always_continue))
    assert "_always_continue" in repr(sequencer)
