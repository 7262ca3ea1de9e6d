"""Integer parsing with C-like prefixes, bit sizes and range checks."""

from __future__ import annotations

from flagvalues.values import FlagValueError

INVALID_SYNTAX = "invalid syntax"
OUT_OF_RANGE = "value out of range"

_DIGITS = {c: i for i, c in enumerate("0123456789abcdefghijklmnopqrstuvwxyz")}


class NumberError(FlagValueError):
    """Raised when text is not a valid integer of the requested size.

    ``value`` holds the result the parse settles on: zero for bad input,
    the nearest bound when the number is out of range.
    """

    def __init__(self, function: str, text: str, reason: str, value: int = 0) -> None:
        self.function = function
        self.text = text
        self.reason = reason
        self.value = value
        super().__init__(f"{function}: parsing {_quote(text)}: {reason}")

    @property
    def out_of_range(self) -> bool:
        return self.reason == OUT_OF_RANGE


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _underscore_ok(text: str) -> bool:
    """Check that underscores only separate digits."""
    saw = "^"
    if text[:1] in ("+", "-"):
        text = text[1:]
    start = 0
    hexadecimal = False
    if len(text) >= 2 and text[0] == "0" and text[1].lower() in "box":
        start = 2
        saw = "0"
        hexadecimal = text[1].lower() == "x"
    for char in text[start:]:
        if "0" <= char <= "9" or (hexadecimal and "a" <= char.lower() <= "f"):
            saw = "0"
        elif char == "_":
            if saw != "0":
                return False
            saw = "_"
        else:
            if saw == "_":
                return False
            saw = "!"
    return saw != "_"


def _check_bits(function: str, text: str, bits: int) -> int:
    if bits == 0:
        return 64
    if not 0 < bits <= 64:
        raise NumberError(function, text, f"invalid bit size {bits}")
    return bits


def _unsigned(function: str, text: str, bits: int, base: int) -> int:
    if text == "":
        raise NumberError(function, text, INVALID_SYNTAX)
    original = text
    base_zero = base == 0
    if base_zero:
        base = 10
        if text[0] == "0":
            prefix = text[1:2].lower()
            if len(text) >= 3 and prefix in ("b", "o", "x"):
                base = {"b": 2, "o": 8, "x": 16}[prefix]
                text = text[2:]
            else:
                base = 8
                text = text[1:]
    elif not 2 <= base <= 36:
        raise NumberError(function, original, f"invalid base {base}")

    bits = _check_bits(function, original, bits)
    max_value = (1 << bits) - 1
    number = 0
    underscores = False
    for char in text:
        if char == "_" and base_zero:
            underscores = True
            continue
        digit = _DIGITS.get(char.lower(), 36) if char.isascii() else 36
        if digit >= base:
            raise NumberError(function, original, INVALID_SYNTAX)
        number = number * base + digit
        if number > max_value:
            raise NumberError(function, original, OUT_OF_RANGE, max_value)
    if underscores and not _underscore_ok(original):
        raise NumberError(function, original, INVALID_SYNTAX)
    return number


def parse_uint(text: str, bits: int = 64, base: int = 0) -> int:
    """Parse an unsigned integer that fits in ``bits`` bits.

    With ``base`` 0 the base follows the prefix: ``0x`` hexadecimal,
    ``0b`` binary, ``0o`` or a leading ``0`` octal, otherwise decimal;
    underscores may then separate digits. ``bits`` 0 means 64.
    """
    return _unsigned("parse_uint", text, bits, base)


def parse_int(text: str, bits: int = 64, base: int = 0) -> int:
    """Parse a signed integer that fits in ``bits`` bits.

    Accepts an optional sign, then the same forms as ``parse_uint``.
    """
    if text == "":
        raise NumberError("parse_int", text, INVALID_SYNTAX)
    negative = text[0] == "-"
    magnitude_text = text[1:] if text[0] in ("+", "-") else text
    try:
        magnitude = _unsigned("parse_int", magnitude_text, bits, base)
    except NumberError as exc:
        if not exc.out_of_range:
            raise NumberError("parse_int", text, exc.reason) from None
        magnitude = exc.value
    bits = _check_bits("parse_int", text, bits)
    cutoff = 1 << (bits - 1)
    if not negative and magnitude >= cutoff:
        raise NumberError("parse_int", text, OUT_OF_RANGE, cutoff - 1)
    if negative and magnitude > cutoff:
        raise NumberError("parse_int", text, OUT_OF_RANGE, -cutoff)
    return -magnitude if negative else magnitude