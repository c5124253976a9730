"""Top-level package for Waystones configuration values.

This package converts raw configuration input into typed values and back into
canonical text. The collaborator entry points are `parse_value` and
`render_value`.
"""

from .kinds import ValueKind, parse_value, render_value

__all__ = ["ValueKind", "__version__", "parse_value", "render_value"]

__version__ = "0.1.0"
