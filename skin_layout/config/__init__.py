"""Packaged YAML configuration and the manager that reads it."""

from .manager import ConfigManager

__all__ = [
    "ConfigManager",
]
