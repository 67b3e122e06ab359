"""Raw environment values and their conversions to typed Python values."""

from __future__ import annotations

import math
import re
import struct
from datetime import datetime, timedelta, timezone
from fractions import Fraction

__all__ = ["Value", "parse_duration", "parse_time", "ZERO_TIME"]

#: Value returned by :meth:`Value.as_time` when the text cannot be parsed.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_SIGNED_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")
_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FLOAT32_MAX = 3.4028234663852886e38

_NANOS = {
    "ns": 1,
    "us": 1_000,
    "\u00b5s": 1_000,
    "\u03bcs": 1_000,
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3_600 * 1_000_000_000,
    "d": 86_400 * 1_000_000_000,
    "w": 604_800 * 1_000_000_000,
}
_DURATION_PART_RE = re.compile(r"([0-9]*(?:\.[0-9]*)?)([^0-9.]*)")
_MAX_NANOS = (1 << 63) - 1

_LAYOUT_RE = re.compile(
    r"January|Jan|Monday|Mon|MST|2006|Z07:00|-07:00|Z0700|-0700"
    r"|[.,](?:0+|9+)(?![0-9])|15|0[1-6]|PM|pm"
)
_DIRECTIVES = {
    "January": "%B", "Jan": "%b", "Monday": "%A", "Mon": "%a", "MST": "%Z",
    "2006": "%Y", "Z07:00": "%z", "-07:00": "%z", "Z0700": "%z", "-0700": "%z",
    "15": "%H", "01": "%m", "02": "%d", "03": "%I", "04": "%M", "05": "%S",
    "06": "%y", "PM": "%p", "pm": "%p",
}


def parse_duration(text: str) -> timedelta:
    """Parse a human readable duration such as ``"1w2d12h30m5s"``.

    Raises :class:`ValueError` on malformed input.
    """
    negative = text[:1] == "-"
    rest = text[1:] if text[:1] in ("+", "-") else text
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    total = Fraction(0)
    position = 0
    while position < len(rest):
        match = _DURATION_PART_RE.match(rest, position)
        amount, unit = match.groups()
        if unit not in _NANOS or amount in ("", "."):
            raise ValueError(f"invalid duration {text!r}")
        total += Fraction(amount) * _NANOS[unit]
        position = match.end()

    nanos = math.floor(total)
    if nanos > _MAX_NANOS:
        raise ValueError(f"duration {text!r} out of range")
    delta = timedelta(microseconds=nanos // 1000)
    return -delta if negative else delta


def parse_time(layout: str, text: str) -> datetime:
    """Parse ``text`` using a reference-time layout such as ``2006-01-02T15:04:05``.

    The result is timezone aware; without a zone it is UTC.
    Raises :class:`ValueError` when ``text`` does not match ``layout``.
    """
    parts = []
    position = 0
    for match in _LAYOUT_RE.finditer(layout):
        parts.append(layout[position:match.start()].replace("%", "%%"))
        token = match.group()
        parts.append(token[0] + "%f" if token[0] in ".," else _DIRECTIVES[token])
        position = match.end()
    parts.append(layout[position:].replace("%", "%%"))

    parsed = datetime.strptime(text, "".join(parts))
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def _parse_float(text: str) -> float:
    if not text or not text.isascii() or "_" in text or text != text.strip():
        raise ValueError(f"invalid float {text!r}")
    try:
        number = float(text)
    except ValueError:
        number = float.fromhex(text)
    if math.isinf(number) and "inf" not in text.lower():
        raise ValueError(f"float {text!r} out of range")
    return number


class Value(str):
    """A raw environment value; conversions yield the type's zero on bad input."""

    def is_zero(self) -> bool:
        return self.strip() == ""

    def _signed(self, bits: int) -> int:
        text = str(self)
        if _SIGNED_RE.fullmatch(text):
            number = int(text)
            if -(1 << (bits - 1)) <= number < (1 << (bits - 1)):
                return number
        return 0

    def _unsigned(self, bits: int) -> int:
        text = str(self)
        if _UNSIGNED_RE.fullmatch(text) and int(text) < 1 << bits:
            return int(text)
        return 0

    def as_int(self) -> int:
        return self._signed(64)

    def as_int8(self) -> int:
        return self._signed(8)

    def as_int16(self) -> int:
        return self._signed(16)

    def as_int32(self) -> int:
        return self._signed(32)

    def as_int64(self) -> int:
        return self._signed(64)

    def as_uint(self) -> int:
        return self._unsigned(64)

    def as_uint8(self) -> int:
        return self._unsigned(8)

    def as_uint16(self) -> int:
        return self._unsigned(16)

    def as_uint32(self) -> int:
        return self._unsigned(32)

    def as_uint64(self) -> int:
        return self._unsigned(64)

    def as_float32(self) -> float:
        number = self.as_float64()
        if math.isfinite(number) and abs(number) > _FLOAT32_MAX:
            return 0.0
        return struct.unpack("f", struct.pack("f", number))[0]

    def as_float64(self) -> float:
        try:
            return _parse_float(str(self))
        except ValueError:
            return 0.0

    def as_string(self) -> str:
        return str(self)

    def as_bool(self) -> bool:
        return str(self) in _TRUE

    def as_time(self, layout: str) -> datetime:
        try:
            return parse_time(layout, str(self))
        except ValueError:
            return ZERO_TIME

    def as_duration(self) -> timedelta:
        try:
            return parse_duration(str(self))
        except ValueError:
            return timedelta(0)

    def as_string_slice(self, delimiter: str) -> list[str]:
        if self.is_zero():
            return []
        return list(self) if delimiter == "" else str(self).split(delimiter)