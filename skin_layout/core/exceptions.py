from __future__ import annotations

"""Layout interpreter exception classes.

Every error raised while reading a layout file carries enough context for
the layout author to find the faulty markup: the layout file, the source
line where known, and the offending element or type name.
"""

from typing import Optional

__all__ = [
    "LayoutError",
    "ConfigurationError",
    "StructureError",
    "RegistrationError",
]


class LayoutError(Exception):
    """Base exception for all layout-related errors.

    The rendered message is prefixed with the layout file and, where
    available, the source line, e.g. ``layout.xml (line 12): ...``.
    """

    def __init__(self, message: str, layout_file: Optional[str] = None,
                 line: Optional[int] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.layout_file = layout_file
        self.line = line
        self.cause = cause

    def __str__(self) -> str:
        if self.layout_file and self.line is not None:
            return f"{self.layout_file} (line {self.line}): {self.message}"
        if self.layout_file:
            return f"{self.layout_file}: {self.message}"
        return self.message


class ConfigurationError(LayoutError):
    """Raised when the interpreter is not set up correctly.

    This includes unreadable layout files and components that need a
    component factory but got a page context without one.
    """
    pass


class StructureError(LayoutError):
    """Raised when the layout file describes an invalid structure.

    Covers the missing ``structure`` root, disallowed element names,
    unknown component types, and missing or invalid modification types.
    """

    def __init__(self, message: str, layout_file: Optional[str] = None,
                 line: Optional[int] = None,
                 element_name: Optional[str] = None,
                 type_name: Optional[str] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, layout_file, line, cause)
        self.element_name = element_name
        self.type_name = type_name


class RegistrationError(LayoutError):
    """Raised when a class cannot be registered as a component type."""

    def __init__(self, message: str, type_name: Optional[str] = None,
                 namespace: Optional[str] = None) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.namespace = namespace
