"""Pytest configuration and fixtures.

Provides a tiny tagged Result double (mirrors what a caller would wire into
``let_anything``) and a recorder for reached yield points.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass, field

import pytest

from letanything import LetConfig, Sequencer, let_anything

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass(frozen=True, slots=True)
class Tagged:
    """Success/failure wrapper the core knows nothing about."""

    value: typing.Any
    is_ok: bool = True


def ok(value: typing.Any) -> Tagged:
    return Tagged(value)


def err(value: typing.Any) -> Tagged:
    return Tagged(value, is_ok=False)


@dataclass
class Trace:
    """Records which yield points a computation reached."""

    points: list[str] = field(default_factory=list)

    def hit(self, name: str) -> None:
        self.points.append(name)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def trace() -> Trace:
    return Trace()


@pytest.fixture
def let_tagged() -> Sequencer[Tagged]:
    """Short-circuits on failure, like ``value.isOk ? k(value.unwrap) : value``."""
    return let_anything(LetConfig(let_=lambda value, k: k(value.value) if value.is_ok else value))
