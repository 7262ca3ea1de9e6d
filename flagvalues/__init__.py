"""Typed command-line flag values: integers, strings, lists, maps, IP addresses, masks and networks."""

__version__ = "0.1.0"