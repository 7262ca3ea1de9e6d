"""Flag values holding maps from string keys to integers."""

from __future__ import annotations

from typing import Mapping, Optional

from flagvalues.numbers import parse_int
from flagvalues.values import FlagValueError, Value


def _parse_pairs(text: str, bits: int) -> dict[str, int]:
    """Parse ``key=value`` pairs separated by commas."""
    out: dict[str, int] = {}
    for pair in text.split(","):
        key, separator, number = pair.partition("=")
        if not separator:
            raise FlagValueError(f"{pair} must be formatted as key=value")
        out[key] = parse_int(number, bits, 10)
    return out


def _convert(text: str, bits: int) -> dict[str, int]:
    inner = text.strip("[]")
    if inner == "":
        return {}
    return _parse_pairs(inner, bits)


class StringToIntValue(Value):
    """A map of string keys to decimal integers, set from ``a=1,b=2``.

    The first ``set`` replaces the default; later calls merge into the map,
    overwriting keys given again. A bad pair raises without changing it.
    """

    type_name = "stringToInt"
    bits = 64

    def __init__(self, value: Optional[Mapping[str, int]] = None) -> None:
        super().__init__({key: int(number) for key, number in (value or {}).items()})
        self.changed = False

    def parse(self, text: str) -> dict[str, int]:
        return _parse_pairs(text, self.bits)

    def set(self, text: str) -> None:
        items = self.parse(text)
        if self.changed:
            self.value.update(items)
        else:
            self.value = items
        self.changed = True

    def __str__(self) -> str:
        return "[" + ",".join(f"{key}={number}" for key, number in self.value.items()) + "]"


class StringToInt64Value(StringToIntValue):
    """A map of string keys to 64-bit decimal integers."""

    type_name = "stringToInt64"
    bits = 64


def string_to_int_conv(text: str) -> dict[str, int]:
    """Convert the bracketed text of a string-to-int flag back to a map."""
    return _convert(text, 64)


def string_to_int64_conv(text: str) -> dict[str, int]:
    """Convert the bracketed text of a string-to-int64 flag back to a map."""
    return _convert(text, 64)