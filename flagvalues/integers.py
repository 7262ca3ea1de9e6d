"""Flag values holding signed and unsigned integers of fixed bit sizes."""

from __future__ import annotations

from flagvalues.numbers import NumberError, parse_int, parse_uint
from flagvalues.values import Value


class IntegerValue(Value):
    """An integer flag value limited to ``bits`` bits.

    Text may carry a ``0x``, ``0o``, ``0b`` or leading ``0`` prefix. When
    parsing fails the stored value becomes what the parse settled on (zero
    for bad syntax, the nearest bound when out of range) and the error is
    raised.
    """

    type_name = "int64"
    bits = 64
    signed = True

    def __init__(self, value: int = 0) -> None:
        super().__init__(int(value))

    def parse(self, text: str) -> int:
        if self.signed:
            return parse_int(text, self.bits, 0)
        return parse_uint(text, self.bits, 0)

    def set(self, text: str) -> None:
        try:
            self.value = self.parse(text)
        except NumberError as exc:
            self.value = exc.value
            raise

    def __str__(self) -> str:
        return str(self.value)


class Int8Value(IntegerValue):
    type_name = "int8"
    bits = 8
    signed = True


class Int64Value(IntegerValue):
    type_name = "int64"
    bits = 64
    signed = True


class UintValue(IntegerValue):
    type_name = "uint"
    bits = 64
    signed = False


class Uint8Value(IntegerValue):
    type_name = "uint8"
    bits = 8
    signed = False


class Uint16Value(IntegerValue):
    type_name = "uint16"
    bits = 16
    signed = False


class Uint32Value(IntegerValue):
    type_name = "uint32"
    bits = 32
    signed = False


class Uint64Value(IntegerValue):
    type_name = "uint64"
    bits = 64
    signed = False


def int8_conv(text: str) -> int:
    """Convert the stored text of an int8 flag."""
    return parse_int(text, 8, 0)


def int64_conv(text: str) -> int:
    """Convert the stored text of an int64 flag."""
    return parse_int(text, 64, 0)


def uint_conv(text: str) -> int:
    """Convert the stored text of a uint flag."""
    return parse_uint(text, 0, 0)


def uint8_conv(text: str) -> int:
    """Convert the stored text of a uint8 flag."""
    return parse_uint(text, 8, 0)


def uint16_conv(text: str) -> int:
    """Convert the stored text of a uint16 flag."""
    return parse_uint(text, 16, 0)


def uint32_conv(text: str) -> int:
    """Convert the stored text of a uint32 flag."""
    return parse_uint(text, 32, 0)


def uint64_conv(text: str) -> int:
    """Convert the stored text of a uint64 flag."""
    return parse_uint(text, 64, 0)