import pytest

from skin_layout.components import (
    Cell,
    Component,
    Container,
    Grid,
    Modification,
    Row,
    Silent,
    Sticky,
    Structure,
    default_registry,
)
from skin_layout.core.exceptions import RegistrationError, StructureError
from skin_layout.core.registry import ComponentRegistry, TypeRegistry


class Widget(Component):
    def get_html(self):
        return "<widget/>"


class Blink(Modification):
    pass


class NotAComponent:
    pass


@pytest.fixture
def registry():
    """A registry with its own tables, isolated from the built-in ones."""
    components = TypeRegistry("Components", Component)
    modifications = TypeRegistry("Components.Modifications", Modification, strict=True)
    components.add(Container)
    components.add(Widget)
    modifications.add(Blink)
    return ComponentRegistry(components, modifications)


class TestResolveClassName:

    @pytest.mark.parametrize("element_name,expected", [
        ("structure", "Components.Structure"),
        ("grid", "Components.Grid"),
        ("row", "Components.Row"),
        ("cell", "Components.Cell"),
        ("GRID", "Components.Grid"),
        ("Cell", "Components.Cell"),
    ])
    def test_structural_elements(self, element_name, expected):
        assert default_registry.resolve_class_name(element_name) == expected

    def test_structural_elements_ignore_type(self):
        assert default_registry.resolve_class_name("grid", "Foo") == "Components.Grid"

    def test_component_with_type(self):
        assert default_registry.resolve_class_name("component", "Foo") == "Components.Foo"

    def test_component_without_type_defaults_to_container(self):
        assert default_registry.resolve_class_name("component") == "Components.Container"

    def test_empty_type_is_not_defaulted(self):
        assert default_registry.resolve_class_name("component", "") == "Components."

    def test_modification_is_silent(self):
        assert default_registry.resolve_class_name("modification", "Sticky") == "Components.Silent"

    def test_disallowed_element(self):
        with pytest.raises(StructureError) as excinfo:
            default_registry.resolve_class_name("banana", line=7, layout_file="page.xml")

        error = excinfo.value
        assert error.element_name == "banana"
        assert error.line == 7
        assert str(error) == "page.xml (line 7): XML element not allowed here: banana."


class TestResolveComponentClass:

    @pytest.mark.parametrize("element_name,type_attribute,expected", [
        ("structure", None, Structure),
        ("grid", None, Grid),
        ("row", None, Row),
        ("cell", None, Cell),
        ("component", None, Container),
        ("component", "Container", Container),
        ("modification", None, Silent),
    ])
    def test_builtin_types(self, element_name, type_attribute, expected):
        assert default_registry.resolve_component_class(element_name, type_attribute) is expected

    def test_registered_type(self, registry):
        assert registry.resolve_component_class("component", "Widget") is Widget

    def test_unknown_type(self, registry):
        with pytest.raises(StructureError) as excinfo:
            registry.resolve_component_class("component", "Gadget", line=3, layout_file="page.xml")

        error = excinfo.value
        assert error.type_name == "Gadget"
        assert str(error) == "page.xml (line 3): Invalid component type: Gadget."

    def test_empty_type(self):
        with pytest.raises(StructureError) as excinfo:
            default_registry.resolve_component_class("component", "")

        assert excinfo.value.type_name == ""
        assert str(excinfo.value) == "Invalid component type: ."

    def test_builtin_missing_from_custom_table(self, registry):
        with pytest.raises(StructureError) as excinfo:
            registry.resolve_component_class("grid")
        assert excinfo.value.type_name == "Grid"


class TestResolveModificationClass:

    def test_builtin_modification(self):
        assert default_registry.resolve_modification_class("Sticky") is Sticky

    def test_registered_modification(self, registry):
        assert registry.resolve_modification_class("Blink") is Blink

    @pytest.mark.parametrize("type_name", ["Modification", "Widget", "NotAModification"])
    def test_invalid_modification(self, registry, type_name):
        with pytest.raises(StructureError) as excinfo:
            registry.resolve_modification_class(type_name, line=4, layout_file="page.xml")

        assert excinfo.value.type_name == type_name
        assert str(excinfo.value) == f"page.xml (line 4): Invalid modification type: {type_name}."


class TestTypeRegistry:

    def test_register_decorator_uses_class_name(self):
        types = TypeRegistry("Components", Component)

        @types.register()
        class Footer(Widget):
            pass

        assert types.get("Footer") is Footer
        assert "Footer" in types

    def test_register_under_explicit_name(self):
        types = TypeRegistry("Components", Component)
        types.register("Banner")(Widget)
        assert types.get("Banner") is Widget
        assert types.get("Widget") is None

    def test_rejects_non_component(self):
        types = TypeRegistry("Components", Component)

        with pytest.raises(RegistrationError) as excinfo:
            types.add(NotAComponent)

        assert excinfo.value.type_name == "NotAComponent"
        assert excinfo.value.namespace == "Components"

    def test_strict_registry_rejects_base_class(self):
        types = TypeRegistry("Components.Modifications", Modification, strict=True)

        with pytest.raises(RegistrationError):
            types.add(Modification)

    def test_rejects_duplicate_names(self):
        types = TypeRegistry("Components", Component)
        types.add(Widget)
        types.add(Widget)  # same class again is fine

        with pytest.raises(RegistrationError):
            types.add(Container, "Widget")

    def test_unregister(self):
        types = TypeRegistry("Components", Component)
        types.add(Widget)

        assert types.unregister("Widget") is True
        assert types.unregister("Widget") is False
        assert types.get("Widget") is None

    def test_names_are_sorted(self):
        types = TypeRegistry("Components", Component)
        types.add(Widget)
        types.add(Container)
        assert types.names() == ["Container", "Widget"]

    def test_builtin_tables(self):
        assert {"Cell", "Container", "Grid", "Html", "Row", "Silent", "Structure"} <= set(
            default_registry.component_types.names()
        )
        assert default_registry.modification_types.names() == ["HideFor", "ShowOnlyFor", "Sticky"]
