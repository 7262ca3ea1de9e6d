"""Flag values holding an IP address or an IPv4 mask."""

from __future__ import annotations

import ipaddress
from typing import Optional, Union

from flagvalues.numbers import NumberError, parse_int
from flagvalues.values import FlagValueError, Value

Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def parse_ip(text: str) -> Address:
    """Parse an IPv4 or IPv6 address.

    IPv4-mapped IPv6 addresses come back as IPv4 addresses; zones are not
    accepted. Raises ``FlagValueError`` for anything else.
    """
    if "%" not in text:
        try:
            address = ipaddress.ip_address(text)
        except ValueError:
            pass
        else:
            if isinstance(address, ipaddress.IPv6Address) and address.ipv4_mapped is not None:
                return address.ipv4_mapped
            return address
    raise FlagValueError(f"invalid IP address: {text}")


class IPValue(Value):
    """A flag value holding one IP address; empty text leaves it unchanged."""

    type_name = "ip"

    def __init__(self, value: Union[Address, str, None] = None) -> None:
        if isinstance(value, str):
            value = parse_ip(value)
        super().__init__(value)

    def set(self, text: str) -> None:
        if text == "":
            return
        try:
            self.value = parse_ip(text.strip())
        except FlagValueError:
            raise FlagValueError(f"failed to parse IP: {_quote(text)}") from None

    def __str__(self) -> str:
        return "<nil>" if self.value is None else str(self.value)


def ip_conv(text: str) -> Address:
    """Convert the stored text of an IP flag."""
    try:
        return parse_ip(text)
    except FlagValueError:
        raise FlagValueError(
            f"invalid string being converted to IP address: {text}"
        ) from None


def parse_ipv4_mask(text: str) -> bytes:
    """Parse an IPv4 mask written as an address or as eight hex digits.

    Returns the four mask bytes; for an IPv6 address these are its last
    four bytes. Raises ``FlagValueError`` when the text is neither form.
    """
    try:
        address = parse_ip(text)
    except FlagValueError:
        if len(text) != 8:
            raise FlagValueError(f"invalid IPv4 mask: {text}") from None
        try:
            octets = [parse_int("0x" + text[i:i + 2], 0, 0) for i in range(0, 8, 2)]
        except NumberError:
            raise FlagValueError(f"invalid IPv4 mask: {text}") from None
        address = parse_ip(".".join(str(octet) for octet in octets))
    return address.packed[-4:]


class IPMaskValue(Value):
    """A flag value holding an IPv4 mask as four bytes."""

    type_name = "ipMask"

    def __init__(self, value: Optional[bytes] = None) -> None:
        super().__init__(None if value is None else bytes(value))

    def set(self, text: str) -> None:
        try:
            self.value = parse_ipv4_mask(text)
        except FlagValueError:
            raise FlagValueError(f"failed to parse IP mask: {_quote(text)}") from None

    def __str__(self) -> str:
        return "<nil>" if self.value is None else self.value.hex()


def ipv4_mask_conv(text: str) -> bytes:
    """Convert the stored text of an IP mask flag."""
    try:
        return parse_ipv4_mask(text)
    except FlagValueError:
        raise FlagValueError(f"unable to parse {text} as net.IPMask") from None