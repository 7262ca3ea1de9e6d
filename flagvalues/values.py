"""Base classes for values that flags hold and set from command-line text."""

from __future__ import annotations

from typing import Any, Iterable


class FlagValueError(ValueError):
    """Raised when text cannot be turned into a flag's value."""


class Value:
    """A flag value that is set from command-line text.

    The base class stores the text unchanged; subclasses override ``parse``
    to convert it and ``type_name`` to name their type.
    """

    type_name = "string"

    def __init__(self, value: Any = "") -> None:
        self.value = value

    def parse(self, text: str) -> Any:
        """Convert ``text`` into the value this flag stores."""
        return text

    def set(self, text: str) -> None:
        """Parse ``text`` and store the result."""
        self.value = self.parse(text)

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class SliceValue(Value):
    """A flag value holding a list of items.

    The first ``set`` replaces the default; later calls extend the list.
    """

    type_name = "stringSlice"

    def __init__(self, value: Iterable[Any] = ()) -> None:
        super().__init__(list(value))
        self.changed = False

    def split(self, text: str) -> list[str]:
        """Split one argument into the texts of its items."""
        return text.split(",")

    def parse_item(self, text: str) -> Any:
        """Convert the text of one item."""
        return text

    def format_item(self, item: Any) -> str:
        """Render one item as text."""
        return str(item)

    def parse(self, text: str) -> list[Any]:
        return [self.parse_item(part) for part in self.split(text)]

    def set(self, text: str) -> None:
        items = self.parse(text)
        if self.changed:
            self.value.extend(items)
        else:
            self.value = items
        self.changed = True

    def append(self, text: str) -> None:
        """Parse one item and add it to the end of the list."""
        self.value.append(self.parse_item(text))

    def replace(self, values: Iterable[str]) -> None:
        """Replace the whole list with the parsed ``values``."""
        self.value = [self.parse_item(text) for text in values]

    def get_slice(self) -> list[str]:
        """Return the items rendered as text."""
        return [self.format_item(item) for item in self.value]

    def __str__(self) -> str:
        return "[" + ",".join(self.get_slice()) + "]"