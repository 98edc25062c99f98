"""Tests for hash module."""

import pytest
from hypothesis import given, strategies as st

from pagecraft.core.hash import Algorithm, create_hasher, hash_json, hash_string


@pytest.mark.unit
def test_hash_string_xxhash():
    """Test xxhash string hashing."""
    result = hash_string("test", Algorithm.XXHASH64)
    assert len(result) == 16  # xxhash64 produces 16 hex chars
    assert hash_string("test", Algorithm.XXHASH64) == result


@pytest.mark.unit
def test_hash_string_sha256():
    result = hash_string("test", Algorithm.SHA256)
    assert len(result) == 64


@pytest.mark.unit
def test_hash_string_truncate():
    full = hash_string("test", Algorithm.SHA256)
    truncated = hash_string("test", Algorithm.SHA256, truncate=16)

    assert len(truncated) == 16
    assert full.startswith(truncated)


@pytest.mark.unit
def test_hash_json_ignores_key_order():
    assert hash_json({"a": 1, "b": [1, 2]}) == hash_json({"b": [1, 2], "a": 1})
    assert hash_json([{"id": "a"}]) != hash_json([{"id": "b"}])


@pytest.mark.unit
def test_hash_json_unsorted_keeps_key_order():
    first = hash_json({"color": "red", "padding": "1px"}, sort_keys=False)
    second = hash_json({"padding": "1px", "color": "red"}, sort_keys=False)

    assert first != second
    assert first == hash_json({"color": "red", "padding": "1px"}, sort_keys=False)


@pytest.mark.unit
def test_hash_json_list_order_matters():
    assert hash_json([1, 2]) != hash_json([2, 1])


@pytest.mark.unit
def test_create_hasher():
    assert create_hasher(Algorithm.XXHASH64).digest(b"x") == hash_string("x")


@pytest.mark.property
@given(st.text())
def test_hash_deterministic(text):
    """Same input always gives same hash."""
    assert hash_string(text) == hash_string(text)
