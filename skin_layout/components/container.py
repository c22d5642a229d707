"""Container components: plain containers and the grid family."""

from __future__ import annotations

import logging
from html import escape
from typing import Any, Optional

from lxml import etree as ET

from .base import Component, component_types

logger = logging.getLogger(__name__)

__all__ = ["Container", "Structure", "Grid", "Row", "Cell"]


@component_types.register()
class Container(Component):
    """Component wrapping its child components in a ``<div>``.

    One child component is built per direct child element of the layout
    element, through the component factory of the page context.
    """

    # Classes always added to the rendered element
    default_classes = ""

    def __init__(self, page_context: Any, dom_element: Optional[ET._Element] = None,
                 indent: int = 0, html_class_attribute: str = "") -> None:
        super().__init__(page_context, dom_element, indent, html_class_attribute)
        self.add_classes(self.default_classes)
        self._build_children()

    def _build_children(self) -> None:
        if self.dom_element is None:
            return
        elements = [child for child in self.dom_element if isinstance(child.tag, str)]
        if not elements:
            return

        factory = self.get_component_factory()
        for child in elements:
            self._children.append(factory.get_component(child, self.indent + 1))

    def get_html(self) -> str:
        html = self.indent_line() + f'<div class="{escape(self.get_class_string(), quote=True)}">'
        html += "".join(child.get_html() for child in self.children)
        html += self.indent_line() + "</div>"
        return html


@component_types.register()
class Structure(Container):
    """Root of a layout."""
    pass


@component_types.register()
class Grid(Container):
    default_classes = "container"


@component_types.register()
class Row(Container):
    default_classes = "row"


@component_types.register()
class Cell(Container):
    """Grid cell; the ``span`` attribute gives its width in columns (1-12)."""

    DEFAULT_SPAN = 12

    @property
    def span(self) -> int:
        try:
            span = int(self.get_attribute("span", str(self.DEFAULT_SPAN)))
        except ValueError:
            logger.warning("Invalid cell span %r (line %s), using %d",
                           self.get_attribute("span"),
                           getattr(self.dom_element, "sourceline", None),
                           self.DEFAULT_SPAN)
            return self.DEFAULT_SPAN
        return min(max(span, 1), 12)

    def get_class_string(self) -> str:
        return " ".join(filter(None, [f"col-{self.span}", super().get_class_string()]))
