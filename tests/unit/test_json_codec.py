"""JSON import/export tests."""

import json

import pytest
from hypothesis import given, settings as hypothesis_settings, strategies as st
from returns.pipeline import is_successful

from pagecraft.document import ComponentNode, dump_document
from pagecraft.export import export_to_json, parse_document


@pytest.mark.unit
def test_export_is_indented(nested_document):
    text = export_to_json(nested_document)

    assert text.startswith("[\n  {")
    assert json.loads(text) == dump_document(nested_document)


@pytest.mark.unit
def test_export_keeps_non_ascii():
    text = export_to_json([ComponentNode(id="a", type="header", content="Chào bạn ★")])
    assert "Chào bạn ★" in text


@pytest.mark.unit
def test_export_compact():
    text = export_to_json([ComponentNode(id="a", type="header")], indent=0)
    assert text == '[{"id":"a","type":"header"}]'


@pytest.mark.unit
def test_round_trip(nested_document):
    parsed = parse_document(export_to_json(nested_document))

    assert is_successful(parsed)
    assert dump_document(parsed.unwrap()) == dump_document(nested_document)


@pytest.mark.unit
def test_round_trip_keeps_empty_children_and_nulls():
    document = [
        ComponentNode(id="a", type="container", children=[]),
        ComponentNode(id="b", type="image", src=None),
    ]
    parsed = parse_document(export_to_json(document)).unwrap()

    assert parsed[0].to_dict() == {"id": "a", "type": "container", "children": []}
    assert parsed[1].to_dict() == {"id": "b", "type": "image", "src": None}


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,reason",
    [
        ("{}", "Invalid JSON format"),
        ('"text"', "Invalid JSON format"),
        ("42", "Invalid JSON format"),
        ("[1, 2]", "Component at index 0 must be an object"),
        ('[{"id": "x"}]', "Invalid component"),
        ("not json", "Failed to parse JSON"),
        ("[{]", "Failed to parse JSON"),
        ("", "Failed to parse JSON"),
        ('[{"id": "x", "type": "a"}, {"id": "x", "type": "b"}]', "Duplicate component ids: x"),
    ],
)
def test_rejections(text, reason):
    result = parse_document(text)

    assert not is_successful(result)
    assert reason in result.failure()


@pytest.mark.unit
def test_size_limit():
    result = parse_document("[]" + " " * 2000, max_size=100)
    assert "exceeds maximum" in result.failure()


@pytest.mark.unit
def test_depth_limit():
    nested = {"id": "root", "type": "container"}
    node = nested
    for i in range(10):
        child = {"id": f"n{i}", "type": "container"}
        node["children"] = [child]
        node = child

    assert is_successful(parse_document(json.dumps([nested]), max_depth=64))
    assert "depth" in parse_document(json.dumps([nested]), max_depth=5).failure()


# ============================================================================
# Property tests
# ============================================================================

_text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)), max_size=20)
_styles = st.dictionaries(st.sampled_from(["color", "padding", "fontSize", "gap"]), _text, max_size=3)


@st.composite
def documents(draw):
    ids = draw(st.lists(st.text(alphabet="abcdefghij0123456789-", min_size=1, max_size=8), unique=True, max_size=6))
    nodes = [
        ComponentNode(
            id=node_id,
            type=draw(st.sampled_from(["header", "paragraph", "hero", "grid", "mystery"])),
            content=draw(st.one_of(st.none(), _text)),
            customStyles=draw(_styles),
        )
        for node_id in ids
    ]
    # nest the tail under the first node
    if len(nodes) > 2 and draw(st.booleans()):
        nodes[0].children = nodes[2:]
        nodes = nodes[:2]
    return nodes


@pytest.mark.property
@given(documents())
@hypothesis_settings(max_examples=50)
def test_round_trip_property(document):
    parsed = parse_document(export_to_json(document))
    assert dump_document(parsed.unwrap()) == dump_document(document)
