"""Unit tests for the standard attributes/slots -> props strategy."""

import pytest

from hyperscriptify.generator import Fragment, h
from hyperscriptify.source import ElementNode
from hyperscriptify.transformer import (
    PropNameMappings,
    PropsifyContext,
    create_propsify,
    decode_value,
    hyperscriptify,
    propsify,
)

from conftest import WidgetComponent


def _component_context(tag="my-widget"):
    return PropsifyContext(tag_name=tag, component=WidgetComponent, element=None)


def _element_context(tag="div"):
    return PropsifyContext(tag_name=tag, component=None, element=None)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("42", 42),
        ("-1.5", -1.5),
        ("true", True),
        ("null", None),
        ('"quoted"', "quoted"),
        ("[1, 2]", [1, 2]),
        ('{"a": {"b": 1}}', {"a": {"b": 1}}),
        ("not json", "not json"),
        ("", ""),
        ("NaN", "NaN"),
        ("Infinity", "Infinity"),
        ("1e400", "1e400"),
        ("[1, -1e400]", "[1, -1e400]"),
        ("1e300", 1e300),
    ],
)
def test_decode_value(value, expected):
    """JSON values are decoded and anything else stays a string."""
    assert decode_value(value) == expected


def test_component_attribute_names_are_camel_cased():
    """Kebab and snake case attribute names become camelCase props."""
    props = propsify({"data-user-id": "u1", "max_items": "3", "title": "x"}, {}, _component_context())
    assert props == {"dataUserId": "u1", "maxItems": 3, "title": "x"}


def test_component_prop_name_overrides_win_over_camel_case():
    """Explicit renames replace the camelCase conversion."""
    props = propsify(
        {"class": "card", "aria-label": "Close"},
        {},
        _component_context(),
        component_prop_names={"class": "className"},
    )
    assert props == {"className": "card", "ariaLabel": "Close"}


def test_component_slots_use_deep_paths():
    """Dotted slot names create nested dicts without clobbering siblings."""
    b, c, top = h("b", {}), h("i", {}), h("p", {})
    props = propsify({}, {"a.b": b, "a.c": c, "top": top}, _component_context())
    assert props == {"a": {"b": b, "c": c}, "top": top}


def test_component_slot_replaces_scalar_attribute_on_the_path():
    """A decoded attribute in the way of a slot path is replaced by a dict."""
    child = h("span", {})
    props = propsify({"header": "5"}, {"header.title": child}, _component_context())
    assert props == {"header": {"title": child}}


def test_intrinsic_element_attributes_pass_through():
    """No camelCase, no decoding, no slots for intrinsic elements."""
    props = propsify({"data-count": "42", "class": "x"}, {"s": h("b", {})}, _element_context())
    assert props == {"data-count": "42", "class": "x"}


def test_intrinsic_element_prop_name_overrides():
    """Intrinsic renames come from their own table."""
    props = propsify(
        {"class": "x", "for": "id1"},
        {},
        _element_context("label"),
        element_prop_names=PropNameMappings.REACT_ELEMENT_PROP_NAMES,
        component_prop_names={"for": "unused"},
    )
    assert props == {"className": "x", "htmlFor": "id1"}


def test_helpers_can_be_replaced():
    """Callers may supply their own key and path helpers."""
    assigned = []

    def record_set(target, path, value):
        assigned.append(path)
        target[path] = value
        return target

    props = propsify(
        {"my-attr": "1"},
        {"a.b": "slot"},
        _component_context(),
        camel_case=str.upper,
        set_path=record_set,
    )
    assert props == {"MY-ATTR": 1, "a.b": "slot"}
    assert assigned == ["a.b"]


def test_create_propsify_binds_tables():
    """create_propsify returns a three-argument strategy."""
    strategy = create_propsify(component_prop_names={"class": "className"}, element_prop_names={"for": "htmlFor"})
    assert strategy({"class": "c", "n": "1"}, {}, _component_context()) == {"className": "c", "n": 1}
    assert strategy({"for": "f"}, {}, _element_context("label")) == {"htmlFor": "f"}


def test_prop_name_mappings_lookups():
    """Lookups fall back to the attribute name for elements and None for components."""
    mappings = PropNameMappings()
    assert mappings.get_element_prop_name("tabindex") == "tabIndex"
    assert mappings.get_element_prop_name("href") == "href"
    assert mappings.get_component_prop_name("class") == "className"
    assert mappings.get_component_prop_name("title") is None


def test_prop_name_mappings_accept_custom_tables():
    """Custom tables replace the React defaults."""
    mappings = PropNameMappings(element_prop_names={}, component_prop_names={"x": "y"})
    assert mappings.get_element_prop_name("class") == "class"
    assert mappings.get_component_prop_name("x") == "y"


def test_decode_value_keeps_deeply_nested_values_as_strings():
    """Values nested too deeply for the JSON decoder stay strings."""
    value = "[" * 100000
    assert decode_value(value) == value


def test_deeply_nested_attribute_does_not_break_conversion():
    """A component attribute the decoder cannot handle is passed through as a string."""
    value = "[" * 100000
    node = ElementNode("my-widget", {"data": value, "count": "2"})
    result = hyperscriptify(node, h, Fragment, {"my-widget": WidgetComponent}, propsify)
    assert result.props == {"data": value, "count": 2}


def test_non_ascii_attribute_names_are_not_truncated():
    """Attribute names that differ only in non-ASCII letters stay distinct props."""
    props = propsify({"caf": "1", "café": "2", "data-naïve": "3"}, {}, _component_context())
    assert props == {"caf": 1, "café": 2, "dataNaïve": 3}
