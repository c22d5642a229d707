"""Layout interpreter core: registry, factory, page context and errors."""

from .exceptions import ConfigurationError, LayoutError, RegistrationError, StructureError
from .registry import ComponentRegistry, TypeRegistry
from .context import PageContext
from .factory import ComponentFactory

__all__ = [
    "LayoutError",
    "ConfigurationError",
    "StructureError",
    "RegistrationError",
    "TypeRegistry",
    "ComponentRegistry",
    "PageContext",
    "ComponentFactory",
]
