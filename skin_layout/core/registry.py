from __future__ import annotations

"""Component type registry.

Maps the symbolic names used in layout files to the classes that implement
them. Concrete component and modification types register themselves with
the ``register`` decorator of their namespace's :class:`TypeRegistry`;
:class:`ComponentRegistry` turns XML element names into qualified type
names and resolves them against those tables.
"""

import logging
from threading import RLock
from typing import Callable, Dict, List, Optional, Type

from .exceptions import RegistrationError, StructureError

logger = logging.getLogger(__name__)

__all__ = ["TypeRegistry", "ComponentRegistry"]

COMPONENTS_NAMESPACE = "Components"
MODIFICATIONS_NAMESPACE = "Components.Modifications"

# Element names that map straight onto a built-in type of the same name
_STRUCTURAL_ELEMENTS = ("structure", "grid", "row", "cell")


class TypeRegistry:
    """Name to class table for one namespace.

    Only subclasses of *base_class* are accepted. With ``strict=True`` the
    base class itself is rejected as well, which is how modifications are
    kept apart from the abstract ``Modification`` capability.
    """

    def __init__(self, namespace: str, base_class: type, strict: bool = False) -> None:
        self.namespace = namespace
        self.base_class = base_class
        self.strict = strict
        self._types: Dict[str, type] = {}
        self._lock = RLock()
        self._logger = logging.getLogger(f"{__name__}.TypeRegistry")

    def __repr__(self) -> str:
        return f"<TypeRegistry {self.namespace}: {self.names()}>"

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def accepts(self, cls: object) -> bool:
        """Return True if *cls* satisfies this namespace's capability."""
        if not isinstance(cls, type) or not issubclass(cls, self.base_class):
            return False
        if self.strict and cls is self.base_class:
            return False
        return True

    def register(self, name: Optional[str] = None) -> Callable[[Type], Type]:
        """Class decorator registering the class under *name*.

        The class name is used when *name* is omitted.

        Raises:
            RegistrationError: If the class does not satisfy the capability
                or the name is already taken
        """
        def _register(cls: Type) -> Type:
            self.add(cls, name)
            return cls
        return _register

    def add(self, cls: type, name: Optional[str] = None) -> None:
        """Register *cls* directly; see :meth:`register`."""
        key = name or getattr(cls, "__name__", None)
        if not key:
            raise RegistrationError("Cannot register an unnamed type",
                                    namespace=self.namespace)

        if not self.accepts(cls):
            raise RegistrationError(
                f"{key} does not implement {self.base_class.__name__}",
                type_name=key,
                namespace=self.namespace,
            )

        with self._lock:
            existing = self._types.get(key)
            if existing is not None and existing is not cls:
                raise RegistrationError(
                    f"{key} is already registered in {self.namespace}",
                    type_name=key,
                    namespace=self.namespace,
                )
            self._types[key] = cls

        self._logger.debug("Registered %s.%s", self.namespace, key)

    def unregister(self, name: str) -> bool:
        """Remove *name* from the table.

        Returns:
            True if the name was registered, False otherwise
        """
        with self._lock:
            removed = self._types.pop(name, None) is not None
        if removed:
            self._logger.debug("Unregistered %s.%s", self.namespace, name)
        return removed

    def get(self, name: str) -> Optional[type]:
        """Return the class registered as *name*, or None."""
        with self._lock:
            cls = self._types.get(name)
        if cls is None or not self.accepts(cls):
            return None
        return cls

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._types)


class ComponentRegistry:
    """Resolves layout elements to component and modification classes.

    Resolution is a pure lookup: nothing is instantiated here.
    """

    def __init__(self, component_types: TypeRegistry,
                 modification_types: TypeRegistry) -> None:
        self.component_types = component_types
        self.modification_types = modification_types

    def resolve_class_name(self, element_name: str,
                           type_attribute: Optional[str] = None,
                           line: Optional[int] = None,
                           layout_file: Optional[str] = None) -> str:
        """Return the qualified type name for a layout element.

        Args:
            element_name: Tag name of the element
            type_attribute: Value of the ``type`` attribute, only
                consulted for ``component`` elements
            line: Source line, used in error messages
            layout_file: Layout file, used in error messages

        Returns:
            Qualified name such as ``Components.Grid``

        Raises:
            StructureError: If the element is not allowed in a layout
        """
        node_name = element_name.lower()

        if node_name in _STRUCTURAL_ELEMENTS:
            type_name = node_name.capitalize()
        elif node_name == "component":
            type_name = type_attribute if type_attribute is not None else "Container"
        elif node_name == "modification":
            type_name = "Silent"
        else:
            raise StructureError(
                f"XML element not allowed here: {element_name}.",
                layout_file=layout_file,
                line=line,
                element_name=element_name,
            )

        return f"{COMPONENTS_NAMESPACE}.{type_name}"

    def resolve_component_class(self, element_name: str,
                                type_attribute: Optional[str] = None,
                                line: Optional[int] = None,
                                layout_file: Optional[str] = None) -> type:
        """Resolve a layout element to its component class.

        Raises:
            StructureError: If the element is not allowed, or the type is
                unknown or not a component
        """
        class_name = self.resolve_class_name(element_name, type_attribute, line, layout_file)
        type_name = class_name[len(COMPONENTS_NAMESPACE) + 1:]

        cls = self.component_types.get(type_name)
        if cls is None:
            raise StructureError(
                f"Invalid component type: {type_name}.",
                layout_file=layout_file,
                line=line,
                element_name=element_name,
                type_name=type_name,
            )
        return cls

    def resolve_modification_class(self, type_name: str,
                                   line: Optional[int] = None,
                                   layout_file: Optional[str] = None) -> type:
        """Resolve a modification ``type`` attribute to its class.

        Raises:
            StructureError: If the type is unknown or not a strict
                subclass of ``Modification``
        """
        cls = self.modification_types.get(type_name)
        if cls is None:
            raise StructureError(
                f"Invalid modification type: {type_name}.",
                layout_file=layout_file,
                line=line,
                element_name="modification",
                type_name=type_name,
            )
        return cls
