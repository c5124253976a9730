"""Telemetry for configuration value resolution."""

from .logger import ConfigEventLogger

__all__ = ["ConfigEventLogger"]
