"""Top-level package for skin_layout.

Front-ends should only depend on the public API exposed here rather than
importing internal modules directly.
"""

from .core import (
    ComponentFactory,
    ConfigurationError,
    LayoutError,
    PageContext,
    StructureError,
)

__version__ = "1.0.0"

__all__: list[str] = [
    "ComponentFactory",
    "PageContext",
    "LayoutError",
    "ConfigurationError",
    "StructureError",
]
