"""Typed values shared by parsers and the configuration layer."""

from .datatypes import INT32_MAX, INT32_MIN, Locale, Location

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "Locale",
    "Location",
]
