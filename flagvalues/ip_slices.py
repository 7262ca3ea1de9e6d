"""Flag values holding IP networks and lists of IP addresses or networks."""

from __future__ import annotations

import ipaddress
from typing import Any, Iterable, Optional, Union

from flagvalues.ip import Address, parse_ip
from flagvalues.text_values import read_as_csv, write_as_csv
from flagvalues.values import FlagValueError, SliceValue, Value

Network = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

_QUOTES = str.maketrans("", "", "\"'`")


def parse_cidr(text: str) -> Network:
    """Parse CIDR notation such as ``192.168.0.0/16`` into its network.

    The host bits of the address are cleared. The prefix length must be
    plain decimal digits no larger than the address size. Raises
    ``FlagValueError`` for anything else.
    """
    error = FlagValueError(f"invalid CIDR address: {text}")
    address_text, slash, prefix_text = text.partition("/")
    if not slash or "%" in address_text:
        raise error
    try:
        address = ipaddress.ip_address(address_text)
    except ValueError:
        raise error from None
    if not (prefix_text.isascii() and prefix_text.isdigit()):
        raise error
    prefix = int(prefix_text)
    if prefix > address.max_prefixlen:
        raise error
    return ipaddress.ip_network((address, prefix), strict=False)


def _read_items(text: str) -> list[str]:
    """Split an argument as one CSV record after dropping all quote marks."""
    try:
        return read_as_csv(text.translate(_QUOTES))
    except EOFError:
        return []


class IPNetValue(Value):
    """A flag value holding one IP network."""

    type_name = "ipNet"

    def __init__(self, value: Union[Network, str, None] = None) -> None:
        if isinstance(value, str):
            value = parse_cidr(value)
        super().__init__(value)

    def set(self, text: str) -> None:
        self.value = parse_cidr(text.strip())

    def __str__(self) -> str:
        return "<nil>" if self.value is None else str(self.value)


def ipnet_conv(text: str) -> Network:
    """Convert the stored text of an IP network flag."""
    try:
        return parse_cidr(text.strip())
    except FlagValueError:
        raise FlagValueError(
            f"invalid string being converted to IPNet: {text}"
        ) from None


def _parse_address(text: str) -> Address:
    try:
        return parse_ip(text.strip())
    except FlagValueError:
        raise FlagValueError(
            f"invalid string being converted to IP address: {text}"
        ) from None


def _parse_network(text: str) -> Network:
    try:
        return parse_cidr(text.strip())
    except FlagValueError:
        raise FlagValueError(
            f"invalid string being converted to CIDR: {text}"
        ) from None


class IPSliceValue(SliceValue):
    """A list of IP addresses; each argument is a comma-separated list.

    Quote marks in an argument are dropped before it is split. The first
    ``set`` replaces the default and later calls extend the list.
    """

    type_name = "ipSlice"

    def parse(self, text: str) -> list[Address]:
        return [_parse_address(item) for item in _read_items(text)]

    def set(self, text: str) -> None:
        items = self.parse(text)
        if self.changed:
            self.value.extend(items)
        else:
            self.value = items
        self.changed = True

    def parse_item(self, text: str) -> Optional[Address]:
        # Single items added through append or replace are not checked;
        # text that is no address is kept as a missing entry.
        try:
            return parse_ip(text.strip())
        except FlagValueError:
            return None

    def format_item(self, item: Any) -> str:
        return "<nil>" if item is None else str(item)

    def append(self, text: str) -> None:
        self.value.append(self.parse_item(text))

    def replace(self, values: Iterable[str]) -> None:
        self.value = [self.parse_item(text) for text in values]

    def get_slice(self) -> list[str]:
        return [self.format_item(item) for item in self.value]

    def __str__(self) -> str:
        return "[" + write_as_csv(self.get_slice()) + "]"


def ip_slice_conv(text: str) -> list[Address]:
    """Convert the bracketed text of an IP slice flag back to a list."""
    inner = text.strip("[]")
    if inner == "":
        return []
    return [_parse_address(part) for part in inner.split(",")]


class IPNetSliceValue(Value):
    """A list of IP networks; each argument is a comma-separated list.

    Quote marks in an argument are dropped before it is split. The first
    ``set`` replaces the default and later calls extend the list.
    """

    type_name = "ipNetSlice"

    def __init__(self, value: Iterable[Union[Network, str]] = ()) -> None:
        super().__init__(
            [parse_cidr(item) if isinstance(item, str) else item for item in value]
        )
        self.changed = False

    def parse(self, text: str) -> list[Network]:
        return [_parse_network(item) for item in _read_items(text)]

    def set(self, text: str) -> None:
        items = self.parse(text)
        if self.changed:
            self.value.extend(items)
        else:
            self.value = items
        self.changed = True

    def __str__(self) -> str:
        return "[" + write_as_csv(str(network) for network in self.value) + "]"


def ipnet_slice_conv(text: str) -> list[Network]:
    """Convert the bracketed text of an IP network slice flag back to a list."""
    inner = text.strip("[]")
    if inner == "":
        return []
    return [_parse_network(part) for part in inner.split(",")]