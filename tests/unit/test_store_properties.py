"""Property-based tests of the document store."""

import pytest
from hypothesis import given, settings as hypothesis_settings, strategies as st

from pagecraft.core import Settings
from pagecraft.document import collect_ids
from pagecraft.editor import DocumentStore

_ids = st.text(alphabet="abcdef", min_size=1, max_size=3)
_kinds = st.sampled_from(["header", "paragraph", "container", "grid", "section"])

_additions = st.lists(
    st.tuples(st.booleans(), _ids, _kinds, st.integers(min_value=0, max_value=20)),
    max_size=25,
)


def _store():
    return DocumentStore(settings=Settings(enable_cache=False))


def _apply_additions(store, additions):
    for as_child, node_id, kind, pick in additions:
        node = {"id": node_id, "type": kind}
        existing = collect_ids(store.components)
        if as_child and existing:
            store.add_child_to_container(existing[pick % len(existing)], node)
        else:
            store.add_component(node)


@pytest.mark.property
@given(_additions)
@hypothesis_settings(max_examples=60)
def test_ids_stay_unique(additions):
    """No sequence of insertions produces a repeated id."""
    store = _store()
    _apply_additions(store, additions)

    ids = collect_ids(store.components)
    assert len(ids) == len(set(ids))


@st.composite
def mutations(draw):
    kind = draw(st.sampled_from(["update", "styles", "remove", "move", "add", "add_child", "clear"]))
    return kind, draw(st.sampled_from(["a", "b", "c", "d", "zz"])), draw(st.integers(min_value=-1, max_value=4))


def _mutate(store, mutation):
    kind, node_id, index = mutation
    if kind == "update":
        return store.update_component(node_id, {"content": f"v{index}"})
    if kind == "styles":
        return store.update_component_styles(node_id, {"color": f"#00000{index}"})
    if kind == "remove":
        return store.remove_component(node_id)
    if kind == "move":
        return store.move_component(index, 0)
    if kind == "add":
        return store.add_component({"id": f"new-{index}", "type": "paragraph"})
    if kind == "add_child":
        return store.add_child_to_container(node_id, {"id": f"kid-{index}", "type": "link"})
    return store.clear_canvas()


@pytest.mark.property
@given(st.lists(mutations(), max_size=8), mutations())
@hypothesis_settings(max_examples=80)
def test_undo_redo_inverse(history, mutation):
    """Undo right after a change restores the prior document; redo brings the change back."""
    store = _store()
    for node_id in "abc":
        store.add_component({"id": node_id, "type": "container"})
    store.add_child_to_container("a", {"id": "d", "type": "paragraph"})
    for step in history:
        _mutate(store, step)

    before = store.snapshot()
    depth = store.history.undo_depth
    result = _mutate(store, mutation)
    after = store.snapshot()

    if store.history.undo_depth == depth:
        # rejected or no-op: nothing changed, nothing recorded
        assert not result.value_or(None)
        assert after == before
        return

    store.undo()
    assert store.snapshot() == before
    store.redo()
    assert store.snapshot() == after


@pytest.mark.property
@given(st.lists(st.dictionaries(st.sampled_from(["color", "margin", "gap", "fontSize"]), _ids, min_size=1), max_size=6))
@hypothesis_settings(max_examples=50)
def test_style_updates_merge(patches):
    """The resulting styles equal the left-to-right merge of every patch."""
    store = _store()
    store.add_component({"id": "x", "type": "header"})

    expected = {}
    for patch in patches:
        store.update_component_styles("x", patch)
        expected.update(patch)

    assert store.find_component_by_id("x").custom_styles == expected
