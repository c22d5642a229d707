"""Built-in layout components.

Importing this package registers the built-in component and modification
types and exposes :data:`default_registry`, the registry the component
factory resolves layout elements against.
"""

from skin_layout.core.registry import ComponentRegistry

from .base import Component, LayoutNode, component_types
from .container import Cell, Container, Grid, Row, Structure
from .modifications import HideFor, Modification, ShowOnlyFor, Sticky, modification_types
from .simple import Html, Silent

default_registry = ComponentRegistry(component_types, modification_types)

__all__ = [
    "Component",
    "LayoutNode",
    "Container",
    "Structure",
    "Grid",
    "Row",
    "Cell",
    "Silent",
    "Html",
    "Modification",
    "Sticky",
    "ShowOnlyFor",
    "HideFor",
    "component_types",
    "modification_types",
    "default_registry",
]
