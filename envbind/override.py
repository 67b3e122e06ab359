"""Scoped overrides of environment variables, local to the current context."""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, TypeVar

__all__ = ["with_override", "overridden", "current_overrides"]

T = TypeVar("T")

_active: ContextVar[Mapping[str, str] | None] = ContextVar("envbind_overrides", default=None)


def _pairs(args: tuple[str, ...]) -> Mapping[str, str]:
    if len(args) % 2:
        raise ValueError("an override requires an even number of arguments")
    return MappingProxyType(dict(zip(args[::2], args[1::2])))


@contextmanager
def overridden(*args: str) -> Iterator[Mapping[str, str]]:
    """Override variables given as ``key, value, ...`` pairs within the block.

    Only the innermost override is consulted; it does not merge with outer ones.
    Overrides are local to the current thread or task.
    """
    values = _pairs(args)
    token = _active.set(values)
    try:
        yield values
    finally:
        _active.reset(token)


def with_override(callback: Callable[[], T], *args: str) -> T:
    """Run ``callback`` with the given ``key, value, ...`` overrides in effect."""
    with overridden(*args):
        return callback()


def current_overrides() -> Mapping[str, Any] | None:
    """Return the innermost active overrides, or ``None`` outside any override."""
    return _active.get()