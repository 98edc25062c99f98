"""Validation tests."""

import pytest
from hypothesis import given, strategies as st
from returns.pipeline import is_successful

from pagecraft.core import (
    DocumentPayloadValidator,
    JSONParseError,
    TemplateNameRequest,
    ValidationError,
    validate_json_depth,
    validate_json_size,
    validate_template_name,
)


@pytest.mark.unit
def test_template_name_request_strips():
    req = TemplateNameRequest(name="  Landing  ")
    assert req.name == "Landing"


@pytest.mark.unit
def test_template_name_request_whitespace():
    with pytest.raises(Exception):
        TemplateNameRequest(name="   ")


@pytest.mark.unit
def test_template_name_request_strict():
    with pytest.raises(Exception):
        TemplateNameRequest(name=42)


@pytest.mark.unit
def test_validate_template_name_result():
    assert validate_template_name(" ok ").unwrap() == "ok"
    failure = validate_template_name("")
    assert not is_successful(failure)
    assert failure.failure().field == "name"


@pytest.mark.unit
def test_validate_json_size():
    validate_json_size('{"test": "data"}', 1000)

    with pytest.raises(JSONParseError):
        validate_json_size("x" * 1_000_000, 1000)


@pytest.mark.unit
def test_validate_json_depth():
    validate_json_depth({"a": {"b": {"c": 1}}}, max_depth=5)

    deep = {"a": {"b": {"c": {"d": {"e": {"f": 1}}}}}}
    with pytest.raises(JSONParseError):
        validate_json_depth(deep, max_depth=3)


@pytest.mark.unit
class TestDocumentPayloadValidator:
    """Test decoded payload checks."""

    def test_accepts_array_of_objects(self):
        data = [{"id": "a", "type": "header"}]
        assert DocumentPayloadValidator.validate(data, 64) is data

    @pytest.mark.parametrize("data,name", [({}, "dict"), ("x", "str"), (None, "NoneType"), (3, "int")])
    def test_rejects_non_array(self, data, name):
        with pytest.raises(ValidationError, match=f"got {name}"):
            DocumentPayloadValidator.validate(data, 64)

    def test_rejects_non_object_element(self):
        with pytest.raises(ValidationError, match="index 1"):
            DocumentPayloadValidator.validate([{}, []], 64)

    def test_rejects_large_text(self):
        with pytest.raises(ValidationError):
            DocumentPayloadValidator.validate_text("[]" * 1000, 100)


@pytest.mark.property
@given(st.text(min_size=1, max_size=200).filter(lambda s: s.strip()))
def test_valid_names_round_trip(name):
    """Any non-blank name is accepted and stripped."""
    assert validate_template_name(name).unwrap() == name.strip()
