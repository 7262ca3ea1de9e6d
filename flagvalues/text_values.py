"""Flag values holding a string, a list of strings split as CSV, or a list
of whole strings."""

from __future__ import annotations

from typing import Iterable, Iterator

from flagvalues.values import FlagValueError, SliceValue, Value

_BARE_QUOTE = 'bare " in non-quoted-field'
_BAD_QUOTE = 'extraneous or missing " in quoted-field'
# Separators Python treats as whitespace but a CSV writer does not.
_NOT_SPACE = "\x1c\x1d\x1e\x1f"


def _lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``, each ending in a single ``\\n``."""
    for piece in text.split("\n")[:-1] if text.endswith("\n") else text.split("\n"):
        if piece.endswith("\r"):
            piece = piece[:-1]
        yield piece + "\n"


def _parse_error(line_number: int, message: str) -> FlagValueError:
    return FlagValueError(f"parse error on line {line_number}: {message}")


def read_as_csv(text: str) -> list[str]:
    """Read the first CSV record of ``text`` as a list of fields.

    Empty text gives an empty list. Text holding only blank lines raises
    ``EOFError``; malformed quoting raises ``FlagValueError``.
    """
    if text == "":
        return []
    lines = _lines(text)
    line_number = 0
    for line in lines:
        line_number += 1
        if line != "\n":
            break
    else:
        raise EOFError("no record in CSV text")

    fields: list[str] = []
    while True:
        if not line.startswith('"'):
            comma = line.find(",")
            field = line[:comma] if comma >= 0 else line[:-1]
            if '"' in field:
                raise _parse_error(line_number, _BARE_QUOTE)
            fields.append(field)
            if comma < 0:
                return fields
            line = line[comma + 1:]
            continue

        line = line[1:]
        parts: list[str] = []
        while True:
            quote = line.find('"')
            if quote >= 0:
                parts.append(line[:quote])
                line = line[quote + 1:]
                if line.startswith('"'):
                    parts.append('"')
                    line = line[1:]
                elif line.startswith(","):
                    line = line[1:]
                    fields.append("".join(parts))
                    break
                elif line == "\n":
                    fields.append("".join(parts))
                    return fields
                else:
                    raise _parse_error(line_number, _BAD_QUOTE)
            else:
                parts.append(line)
                following = next(lines, None)
                if following is None:
                    raise _parse_error(line_number, _BAD_QUOTE)
                line_number += 1
                line = following


def _needs_quotes(field: str) -> bool:
    if field == "":
        return False
    if field == "\\.":
        return True
    if any(char in field for char in ',"\r\n'):
        return True
    first = field[0]
    return first.isspace() and first not in _NOT_SPACE


def write_as_csv(values: Iterable[str]) -> str:
    """Write ``values`` as one CSV record without the line ending."""
    rendered = []
    for field in values:
        if _needs_quotes(field):
            rendered.append('"' + field.replace('"', '""') + '"')
        else:
            rendered.append(field)
    return ",".join(rendered)


def _read_csv_value(text: str) -> list[str]:
    try:
        return read_as_csv(text)
    except EOFError:
        raise FlagValueError("EOF") from None


def _strip_brackets(text: str) -> str:
    if len(text) < 2:
        raise FlagValueError(f"malformed list value: {text!r}")
    return text[1:-1]


class StringValue(Value):
    """A flag value holding a string exactly as given."""

    type_name = "string"

    def __init__(self, value: str = "") -> None:
        super().__init__(str(value))

    def set(self, text: str) -> None:
        self.value = text

    def __str__(self) -> str:
        return self.value


def string_conv(text: str) -> str:
    """Convert the stored text of a string flag."""
    return text


class StringSliceValue(SliceValue):
    """A list of strings; each argument is split as one CSV record."""

    type_name = "stringSlice"

    def parse(self, text: str) -> list[str]:
        return _read_csv_value(text)

    def set(self, text: str) -> None:
        items = self.parse(text)
        if self.changed:
            self.value.extend(items)
        else:
            self.value = items
        self.changed = True

    def __str__(self) -> str:
        return "[" + write_as_csv(self.value) + "]"

    def append(self, text: str) -> None:
        self.value.append(text)

    def replace(self, values: Iterable[str]) -> None:
        self.value = list(values)

    def get_slice(self) -> list[str]:
        return list(self.value)


def string_slice_conv(text: str) -> list[str]:
    """Convert the bracketed text of a string slice flag back to a list."""
    inner = _strip_brackets(text)
    if inner == "":
        return []
    return _read_csv_value(inner)


class StringArrayValue(SliceValue):
    """A list of strings; each argument is one item, commas and all."""

    type_name = "stringArray"

    def set(self, text: str) -> None:
        if self.changed:
            self.value.append(text)
        else:
            self.value = [text]
            self.changed = True

    def __str__(self) -> str:
        return "[" + write_as_csv(self.value) + "]"

    def append(self, text: str) -> None:
        self.value.append(text)

    def replace(self, values: Iterable[str]) -> None:
        self.value = list(values)

    def get_slice(self) -> list[str]:
        return list(self.value)


def string_array_conv(text: str) -> list[str]:
    """Convert the bracketed text of a string array flag back to a list."""
    inner = _strip_brackets(text)
    if inner == "":
        return []
    return _read_csv_value(inner)