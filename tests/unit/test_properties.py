"""Property metadata tests."""

import pytest

from pagecraft.document import (
    ELEMENT_PROPERTIES,
    PROPERTY_GROUPS,
    generate_css_from_properties,
    is_known_property,
    unknown_properties,
)


@pytest.mark.unit
def test_every_grouped_property_is_described():
    grouped = [name for _, names in PROPERTY_GROUPS for name in names]
    assert sorted(grouped) == sorted(ELEMENT_PROPERTIES)


@pytest.mark.unit
def test_entry_shape():
    color = ELEMENT_PROPERTIES["backgroundColor"]
    assert color.label == "Background Color"
    assert color.type == "color"
    assert "transparent" in color.options
    assert ELEMENT_PROPERTIES["margin"].type is None


@pytest.mark.unit
def test_known_and_unknown():
    assert is_known_property("fontSize")
    assert not is_known_property("font-size")
    assert unknown_properties({"color": "red", "gridTemplateColumns": "1fr"}) == ["gridTemplateColumns"]


@pytest.mark.unit
def test_generate_css_skips_unknown_and_empty():
    css = generate_css_from_properties({"color": "red", "padding": "", "made-up": "1"})
    assert css == "color: red;\n"
