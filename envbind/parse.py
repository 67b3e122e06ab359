"""Binding environment variables onto dataclass instances."""

from __future__ import annotations

import dataclasses
import enum
import os
import types
import typing
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, TypeVar

from .loader import load
from .override import current_overrides
from .value import Value

__all__ = [
    "EnvError",
    "NotAPointerError",
    "TimeLayoutRequiredError",
    "RequiredFieldError",
    "EmptyFieldError",
    "UnsupportedTypeError",
    "Kind",
    "env_field",
    "lookup",
    "parse",
    "must_parse",
    "load_and_parse",
    "must_load_and_parse",
]

T = TypeVar("T")

_METADATA_KEY = "envbind"


class EnvError(Exception):
    """Base class of all binding errors."""


class NotAPointerError(EnvError, TypeError):
    """The target is not a dataclass instance."""


class TimeLayoutRequiredError(EnvError):
    """A time field was declared without a time layout."""


class RequiredFieldError(EnvError):
    """A required variable is not defined."""


class EmptyFieldError(EnvError):
    """A variable marked as not empty holds only whitespace."""


class UnsupportedTypeError(EnvError, TypeError):
    """The field's type cannot be filled from the environment."""


class Kind(enum.Enum):
    """Target type of a bound field."""

    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    BOOL = "bool"
    TIME = "time"
    DURATION = "duration"
    STRING_LIST = "string_list"


@dataclass(frozen=True)
class _Spec:
    name: str
    required: bool
    not_empty: bool
    default: str
    delimiter: str | None
    time_layout: str | None
    kind: Kind | None


_SIMPLE_CONVERTERS: dict[Kind, Callable[[Value], Any]] = {
    Kind.INT: Value.as_int,
    Kind.INT8: Value.as_int8,
    Kind.INT16: Value.as_int16,
    Kind.INT32: Value.as_int32,
    Kind.INT64: Value.as_int64,
    Kind.UINT: Value.as_uint,
    Kind.UINT8: Value.as_uint8,
    Kind.UINT16: Value.as_uint16,
    Kind.UINT32: Value.as_uint32,
    Kind.UINT64: Value.as_uint64,
    Kind.FLOAT32: Value.as_float32,
    Kind.FLOAT64: Value.as_float64,
    Kind.STRING: Value.as_string,
    Kind.BOOL: Value.as_bool,
    Kind.DURATION: Value.as_duration,
}

_KIND_BY_TYPE: dict[Any, Kind] = {
    bool: Kind.BOOL,
    int: Kind.INT,
    float: Kind.FLOAT64,
    str: Kind.STRING,
    datetime: Kind.TIME,
    timedelta: Kind.DURATION,
}

_KIND_BY_NAME: dict[str, Kind] = {
    "bool": Kind.BOOL,
    "int": Kind.INT,
    "float": Kind.FLOAT64,
    "str": Kind.STRING,
    "datetime": Kind.TIME,
    "datetime.datetime": Kind.TIME,
    "timedelta": Kind.DURATION,
    "datetime.timedelta": Kind.DURATION,
    "list": Kind.STRING_LIST,
    "list[str]": Kind.STRING_LIST,
    "List[str]": Kind.STRING_LIST,
    "typing.List[str]": Kind.STRING_LIST,
}

_OPTIONAL_PREFIXES = ("Optional[", "typing.Optional[")


def env_field(
    name: str,
    *,
    required: bool = False,
    not_empty: bool = False,
    default: str = "",
    delimiter: str | None = None,
    time_layout: str | None = None,
    kind: Kind | None = None,
) -> Any:
    """Declare a dataclass field filled from the variable ``name``.

    ``default`` is the raw text used when the variable is not defined.
    ``kind`` is inferred from the field's annotation when omitted.
    """
    spec = _Spec(name, required, not_empty, default, delimiter, time_layout, kind)
    return dataclasses.field(default=None, metadata={_METADATA_KEY: spec})


def lookup(name: str, default: str = "") -> tuple[Value, bool]:
    """Return the variable's value and whether it is defined.

    Active overrides take precedence over the process environment.
    """
    overrides = current_overrides()
    if overrides is not None and name in overrides:
        return Value(overrides[name]), True

    raw = os.environ.get(name)
    if raw is None:
        return Value(default), False
    return Value(raw), True


def _infer_kind_from_text(text: str) -> Kind | None:
    text = text.replace(" ", "").strip("'\"")
    for prefix in _OPTIONAL_PREFIXES:
        if text.startswith(prefix) and text.endswith("]"):
            return _infer_kind_from_text(text[len(prefix):-1])
    if "|" in text:
        members = [part for part in text.split("|") if part not in ("None", "")]
        return _infer_kind_from_text(members[0]) if len(members) == 1 else None
    return _KIND_BY_NAME.get(text)


def _infer_kind(annotation: Any) -> Kind | None:
    if isinstance(annotation, str):
        return _infer_kind_from_text(annotation)
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        return _infer_kind(members[0]) if len(members) == 1 else None
    if annotation is list or (origin is list and typing.get_args(annotation) == (str,)):
        return Kind.STRING_LIST
    try:
        return _KIND_BY_TYPE.get(annotation)
    except TypeError:
        return None


def _convert(spec: _Spec, raw: Value, annotation: Any) -> Any:
    kind = spec.kind if spec.kind is not None else _infer_kind(annotation)

    if kind is Kind.TIME:
        if spec.time_layout is None:
            raise TimeLayoutRequiredError(
                "expecting a time layout for environment variables of type time"
            )
        return raw.as_time(spec.time_layout)

    if kind is Kind.STRING_LIST:
        return raw.as_string_slice(spec.delimiter or ",")

    converter = _SIMPLE_CONVERTERS.get(kind) if kind is not None else None
    if converter is None:
        raise UnsupportedTypeError(
            f"unsupported environment data type `{annotation}` for variable `{spec.name}`"
        )
    return converter(raw)


def parse(target: T) -> T:
    """Fill the ``env_field`` fields of a dataclass instance from the environment.

    The nearest ``.env`` file is loaded first. Returns ``target``.
    """
    load()

    if isinstance(target, type) or not dataclasses.is_dataclass(target):
        raise NotAPointerError(
            f"given `{type(target).__name__}` is not a dataclass instance"
        )

    for field in dataclasses.fields(target):
        spec = field.metadata.get(_METADATA_KEY)
        if spec is None:
            continue

        raw, defined = lookup(spec.name, spec.default)
        if spec.required and not defined:
            raise RequiredFieldError(
                f"environment variable `{spec.name}` must be defined"
            )
        if spec.not_empty and raw.is_zero():
            raise EmptyFieldError(
                f"environment variable `{spec.name}` cannot be empty"
            )

        value = _convert(spec, raw, field.type)
        object.__setattr__(target, field.name, value)

    return target


def must_parse(target: T) -> T:
    """Like :func:`parse`, but any failure is raised as :class:`RuntimeError`."""
    try:
        return parse(target)
    except (EnvError, OSError) as exc:
        raise RuntimeError(str(exc)) from exc


def load_and_parse(target: T) -> T:
    """Load the nearest ``.env`` file, then :func:`parse` into ``target``."""
    load()
    return parse(target)


def must_load_and_parse(target: T) -> T:
    """Like :func:`load_and_parse`, but any failure is raised as :class:`RuntimeError`."""
    try:
        return load_and_parse(target)
    except (EnvError, OSError) as exc:
        raise RuntimeError(str(exc)) from exc