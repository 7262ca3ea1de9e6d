"""Flag values holding lists of integers split from comma-separated text."""

from __future__ import annotations

from typing import Iterable

from flagvalues.numbers import parse_int, parse_uint
from flagvalues.values import SliceValue


def _parse_number(text: str, bits: int, signed: bool, base: int) -> int:
    if signed:
        return parse_int(text, bits, base)
    return parse_uint(text, bits, base)


def _convert(text: str, bits: int, signed: bool, base: int) -> list[int]:
    inner = text.strip("[]")
    if inner == "":
        return []
    return [_parse_number(part, bits, signed, base) for part in inner.split(",")]


class IntegerSliceValue(SliceValue):
    """A list of integers; each argument is a comma-separated list of items.

    The first ``set`` replaces the default and later calls extend the list.
    A bad item raises without changing the stored list.
    """

    type_name = "int64Slice"
    bits = 64
    signed = True
    base = 0

    def __init__(self, value: Iterable[int] = ()) -> None:
        super().__init__(int(item) for item in value)

    def parse_item(self, text: str) -> int:
        return _parse_number(text, self.bits, self.signed, self.base)

    def format_item(self, item: int) -> str:
        return str(item)

    def set(self, text: str) -> None:
        items = [self.parse_item(part) for part in text.split(",")]
        if self.changed:
            self.value.extend(items)
        else:
            self.value = items
        self.changed = True

    def append(self, text: str) -> None:
        self.value.append(self.parse_item(text))

    def replace(self, values: Iterable[str]) -> None:
        self.value = [self.parse_item(text) for text in values]

    def get_slice(self) -> list[str]:
        return [self.format_item(item) for item in self.value]

    def __str__(self) -> str:
        return "[" + ",".join(self.get_slice()) + "]"


class IntSliceValue(IntegerSliceValue):
    """A list of decimal integers."""

    type_name = "intSlice"
    bits = 64
    signed = True
    base = 10


class Int32SliceValue(IntegerSliceValue):
    """A list of 32-bit signed integers, with base prefixes allowed."""

    type_name = "int32Slice"
    bits = 32
    signed = True
    base = 0


class Int64SliceValue(IntegerSliceValue):
    """A list of 64-bit signed integers, with base prefixes allowed."""

    type_name = "int64Slice"
    bits = 64
    signed = True
    base = 0


class UintSliceValue(IntegerSliceValue):
    """A list of decimal unsigned integers."""

    type_name = "uintSlice"
    bits = 64
    signed = False
    base = 10


def int_slice_conv(text: str) -> list[int]:
    """Convert the bracketed text of an int slice flag back to a list."""
    return _convert(text, 64, True, 10)


def int32_slice_conv(text: str) -> list[int]:
    """Convert the bracketed text of an int32 slice flag back to a list."""
    return _convert(text, 32, True, 0)


def int64_slice_conv(text: str) -> list[int]:
    """Convert the bracketed text of an int64 slice flag back to a list."""
    return _convert(text, 64, True, 0)


def uint_slice_conv(text: str) -> list[int]:
    """Convert the bracketed text of a uint slice flag back to a list."""
    return _convert(text, 64, False, 10)