"""Leaf components."""

from __future__ import annotations

from .base import Component, component_types

__all__ = ["Silent", "Html"]


@component_types.register()
class Silent(Component):
    """Placeholder for elements that produce no output, e.g. modifications."""

    def get_html(self) -> str:
        return ""


@component_types.register()
class Html(Component):
    """Emits the text content of its layout element verbatim."""

    def get_html(self) -> str:
        if self.dom_element is None:
            return ""
        return "".join(self.dom_element.itertext())
