from __future__ import annotations

"""Layout interpreter.

:class:`ComponentFactory` reads a layout file once, locates its
``structure`` element and turns it into a tree of components. Component
types are resolved by name through a :class:`ComponentRegistry`;
``modification`` child elements wrap the component built for their parent
element.

Typical use::

    factory = ComponentFactory("layouts/standard.xml")
    factory.create_page_context(user_groups={"sysop"})
    html = factory.get_root_component().get_html()
"""

import logging
import os
from pathlib import Path
from threading import RLock
from typing import Any, Optional

from lxml import etree as ET

from skin_layout.components import Component, default_registry
from skin_layout.config import ConfigManager

from .context import PageContext
from .exceptions import ConfigurationError, StructureError
from .registry import ComponentRegistry

logger = logging.getLogger(__name__)

__all__ = ["ComponentFactory", "get_layouts_dir"]

ROOT_ELEMENT = "structure"
MODIFICATION_ELEMENT = "modification"


def get_layouts_dir() -> Path:
    """Directory holding the layout files shipped with the package."""
    return Path(__file__).resolve().parent.parent / "layouts"


class ComponentFactory:
    """Builds the component tree described by a layout file.

    The layout file is checked when it is set; parsing and building happen
    on the first call to :meth:`get_root_component` and their result is
    kept for the lifetime of the factory. One factory is meant to serve
    one page render.

    Args:
        layout_file_name: Path of the layout file
        registry: Registry used to resolve element names to classes;
            defaults to the built-in registry
    """

    def __init__(self, layout_file_name: str | os.PathLike,
                 registry: Optional[ComponentRegistry] = None) -> None:
        # the root component of the page; normally a Structure
        self._root_component: Optional[Component] = None
        self._document: Optional[ET._ElementTree] = None
        self._layout_file: Optional[str] = None
        self._page_context: Any = None
        self._registry = registry or default_registry
        self._lock = RLock()
        self.set_layout_file(layout_file_name)

    @classmethod
    def from_config(cls, registry: Optional[ComponentRegistry] = None) -> ComponentFactory:
        """Create a factory for the ``default_layout`` configured in ``layout.yml``.

        Raises:
            ConfigurationError: If no default layout is configured or the
                file is not accessible
        """
        layout_name = ConfigManager().get_layout_config().get("default_layout")
        if not layout_name:
            raise ConfigurationError("No default_layout configured in layout.yml")

        layout_path = Path(layout_name).expanduser()
        if not layout_path.is_absolute():
            layout_path = get_layouts_dir() / layout_path
        return cls(layout_path, registry)

    # ------------------------------------------------------------------
    # Tree building
    # ------------------------------------------------------------------
    def get_root_component(self) -> Component:
        """Return the component built from the layout's ``structure`` element.

        Raises:
            StructureError: If the layout file is malformed or describes
                an invalid structure
        """
        with self._lock:
            if self._root_component is None:
                document = self._load_document()
                root_element = next(document.iter(ROOT_ELEMENT), None)

                if root_element is None:
                    raise StructureError(
                        f"XML description is missing an element: {ROOT_ELEMENT}.",
                        layout_file=self.get_layout_file(),
                        element_name=ROOT_ELEMENT,
                    )

                self._root_component = self.get_component(root_element)
                logger.debug("Built layout %s: %d components", self.get_layout_file(),
                             sum(1 for _ in self._root_component.iter_components()))

        return self._root_component

    def get_component(self, description: ET._Element, indent: int = 0,
                      html_class_attribute: str = "") -> Component:
        """Build the component for a layout element.

        Args:
            description: Layout element
            indent: Nesting depth of the component
            html_class_attribute: Extra CSS classes for the component

        Returns:
            The component, wrapped by the element's modifications if any

        Raises:
            StructureError: If the element or its type is invalid
        """
        component_class = self._registry.resolve_component_class(
            description.tag,
            description.get("type"),
            line=description.sourceline,
            layout_file=self.get_layout_file(),
        )
        component = component_class(self.get_page_context(), description, indent,
                                    html_class_attribute)

        for child in description:
            # comments and processing instructions have a non-string tag
            if isinstance(child.tag, str) and child.tag.lower() == MODIFICATION_ELEMENT:
                component = self.get_modified_component(child, component)

        return component

    def get_modified_component(self, description: ET._Element,
                               component: Component) -> Component:
        """Wrap *component* in the modification described by *description*.

        Raises:
            StructureError: If the ``type`` attribute is missing or does not
                name a modification
        """
        type_name = description.get("type")
        if type_name is None:
            raise StructureError(
                "Modification element missing an attribute: type.",
                layout_file=self.get_layout_file(),
                line=description.sourceline,
                element_name=description.tag,
            )

        modification_class = self._registry.resolve_modification_class(
            type_name,
            line=description.sourceline,
            layout_file=self.get_layout_file(),
        )
        logger.debug("Applying modification %s (line %s)", type_name, description.sourceline)
        return modification_class(component, description)

    def _load_document(self) -> ET._ElementTree:
        with self._lock:
            if self._document is None:
                layout_file = self.get_layout_file()
                parser = ET.XMLParser(remove_comments=False, resolve_entities=False)
                try:
                    self._document = ET.parse(layout_file, parser)
                except ET.XMLSyntaxError as exc:
                    raise StructureError(
                        f"Malformed XML: {exc.msg}.",
                        layout_file=layout_file,
                        line=exc.lineno,
                        cause=exc,
                    ) from exc
                except OSError as exc:
                    raise ConfigurationError(
                        f"Could not read layout file: {exc}",
                        layout_file=layout_file,
                        cause=exc,
                    ) from exc
                logger.debug("Parsed layout file %s", layout_file)
            return self._document

    # ------------------------------------------------------------------
    # Layout file
    # ------------------------------------------------------------------
    def get_layout_file(self) -> Optional[str]:
        return self._layout_file

    def set_layout_file(self, file_name: str | os.PathLike) -> None:
        """Set the layout file.

        Raises:
            ConfigurationError: If the file is not accessible
        """
        file_name = self.sanitize_file_name(os.fspath(file_name))

        if not (os.path.isfile(file_name) and os.access(file_name, os.R_OK)):
            raise ConfigurationError(f"Expected an accessible {file_name} layout file")

        self._layout_file = file_name

    @staticmethod
    def sanitize_file_name(file_name: str) -> str:
        """Replace both path separator styles with the platform's own."""
        return file_name.replace("\\", os.sep).replace("/", os.sep)

    # ------------------------------------------------------------------
    # Page context
    # ------------------------------------------------------------------
    def get_page_context(self) -> Any:
        return self._page_context

    def set_page_context(self, page_context: Any) -> None:
        """Set the context handed to every component built from now on."""
        self._page_context = page_context

    def create_page_context(self, **kwargs: Any) -> PageContext:
        """Create a :class:`PageContext` bound to this factory and set it."""
        page_context = PageContext(component_factory=self, **kwargs)
        self.set_page_context(page_context)
        return page_context
