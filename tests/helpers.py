"""Shared assertions for kungfu results."""

from __future__ import annotations

import typing

from kungfu import Error, Ok


def ok_value(result: typing.Any) -> typing.Any:
    match result:
        case Ok(value):
            return value
        case _:
            raise AssertionError(f"expected Ok, got {result!r}")


def error_value(result: typing.Any) -> typing.Any:
    match result:
        case Error(err):
            return err
        case _:
            raise AssertionError(f"expected Error, got {result!r}")
