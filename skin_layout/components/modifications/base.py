from __future__ import annotations

"""Base class for modifications.

A modification decorates an already built component. It is declared as a
``<modification type="Name"/>`` child of the element it modifies and
takes that component's place in the layout tree.
"""

from typing import List

from lxml import etree as ET

from skin_layout.core.registry import MODIFICATIONS_NAMESPACE, TypeRegistry

from ..base import Component

__all__ = ["Modification", "modification_types"]


class Modification(Component):
    """Component decorator.

    The default implementation is transparent: children, CSS classes and
    HTML are those of the wrapped component, so modifications can be
    stacked. Subclasses override :meth:`get_html` or adjust the wrapped
    component in their constructor.

    Args:
        component: The component being modified
        dom_element: The ``modification`` element
    """

    def __init__(self, component: Component, dom_element: ET._Element) -> None:
        self.component = component
        super().__init__(component.page_context, dom_element, component.indent)

    def _init_classes(self, html_class_attribute: str) -> None:
        # classes live on the wrapped component
        pass

    @property
    def children(self) -> List[Component]:
        return self.component.children

    @property
    def html_class_attribute(self) -> str:
        return self.component.html_class_attribute

    def get_class_string(self) -> str:
        return self.component.get_class_string()

    def add_classes(self, classes: str) -> None:
        self.component.add_classes(classes)

    def remove_classes(self, classes: str) -> None:
        self.component.remove_classes(classes)

    def get_html(self) -> str:
        return self.component.get_html()

    def get_attribute_list(self, name: str) -> List[str]:
        """Return a comma-separated attribute of the modification as a list."""
        value = self.get_attribute(name, "") or ""
        return [item.strip() for item in value.split(",") if item.strip()]


modification_types = TypeRegistry(MODIFICATIONS_NAMESPACE, Modification, strict=True)
