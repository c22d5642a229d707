"""Sticky modification."""

from __future__ import annotations

from lxml import etree as ET

from ..base import Component
from .base import Modification, modification_types

__all__ = ["Sticky"]


@modification_types.register()
class Sticky(Modification):
    """Marks the modified component as sticky by adding the ``sticky`` class."""

    STICKY_CLASS = "sticky"

    def __init__(self, component: Component, dom_element: ET._Element) -> None:
        super().__init__(component, dom_element)
        component.add_classes(self.STICKY_CLASS)
