from __future__ import annotations

"""Base class and protocol for layout components.

Every element of a layout file becomes a :class:`Component`. Concrete
types register themselves in :data:`component_types` under the name used
in layout files (``<component type="Name"/>``).
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Protocol, runtime_checkable

from lxml import etree as ET

from skin_layout.config import ConfigManager
from skin_layout.core.exceptions import ConfigurationError
from skin_layout.core.registry import COMPONENTS_NAMESPACE, TypeRegistry

logger = logging.getLogger(__name__)

__all__ = ["LayoutNode", "Component", "component_types"]


@runtime_checkable
class LayoutNode(Protocol):
    """Protocol for anything that can sit in a layout tree."""

    page_context: Any
    dom_element: Optional[ET._Element]
    indent: int

    @property
    def children(self) -> List["LayoutNode"]:
        """Child nodes, in document order."""
        ...

    def get_html(self) -> str:
        """Render the node and its children."""
        ...


class Component(ABC):
    """Abstract base class for all layout components.

    Args:
        page_context: Shared per-render context, passed through unmodified
        dom_element: Layout element describing this component
        indent: Nesting depth, used to indent rendered HTML
        html_class_attribute: Extra CSS classes for the rendered element
    """

    def __init__(self, page_context: Any, dom_element: Optional[ET._Element] = None,
                 indent: int = 0, html_class_attribute: str = "") -> None:
        self.page_context = page_context
        self.dom_element = dom_element
        self.indent = indent
        self._classes: List[str] = []
        self._children: List[Component] = []
        self._init_classes(html_class_attribute)

    def _init_classes(self, html_class_attribute: str) -> None:
        self.add_classes(html_class_attribute)
        if self.dom_element is not None:
            self.add_classes(self.dom_element.get("class", ""))

    @property
    def children(self) -> List[Component]:
        return self._children

    @abstractmethod
    def get_html(self) -> str:
        """Return the HTML for this component and its children."""
        pass

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------
    @property
    def html_class_attribute(self) -> str:
        return self.get_class_string()

    def get_class_string(self) -> str:
        return " ".join(self._classes)

    def add_classes(self, classes: str) -> None:
        for html_class in classes.split():
            if html_class not in self._classes:
                self._classes.append(html_class)

    def remove_classes(self, classes: str) -> None:
        to_remove = set(classes.split())
        self._classes = [c for c in self._classes if c not in to_remove]

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        if self.dom_element is None:
            return default
        return self.dom_element.get(name, default)

    def indent_line(self, offset: int = 0) -> str:
        """Return a newline followed by the indentation for this depth."""
        indent_string = ConfigManager().get_layout_config().get("indent_string", "\t")
        return "\n" + indent_string * max(self.indent + offset, 0)

    def get_component_factory(self):
        """Return the factory bound to the page context.

        Raises:
            ConfigurationError: If the page context has no component factory
        """
        factory = getattr(self.page_context, "component_factory", None)
        if factory is None:
            raise ConfigurationError(
                f"{type(self).__name__} needs a page context bound to a component factory"
            )
        return factory

    def iter_components(self, include_self: bool = True) -> Iterator[Component]:
        """Iterate over this component and all descendants (depth-first)."""
        if include_self:
            yield self
        for child in self.children:
            yield from child.iter_components(include_self=True)

    def __repr__(self) -> str:
        line = getattr(self.dom_element, "sourceline", None)
        line_str = f", line={line}" if line is not None else ""
        children_str = f", children={len(self.children)}" if self.children else ""
        return f"{type(self).__name__}(indent={self.indent}{line_str}{children_str})"


component_types = TypeRegistry(COMPONENTS_NAMESPACE, Component)
