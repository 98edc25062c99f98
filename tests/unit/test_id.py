"""Tests for ID generation system."""

import time
from datetime import datetime

import pytest

from pagecraft.core.id import (
    Prefix,
    extract_prefix,
    extract_timestamp,
    is_template_id,
    is_valid,
    new_component_id,
    new_template_id,
)


@pytest.mark.unit
class TestGeneration:
    """Test basic ID generation."""

    def test_unique(self):
        """IDs should be unique."""
        ids = {new_component_id("header") for _ in range(100)}
        assert len(ids) == 100

    def test_timestamps_increase(self):
        ids = []
        for _ in range(3):
            ids.append(new_component_id())
            time.sleep(0.002)

        timestamps = [extract_timestamp(id_str) for id_str in ids]
        assert all(isinstance(ts, datetime) for ts in timestamps)
        assert timestamps == sorted(timestamps)


@pytest.mark.unit
class TestTypedGeneration:
    """Test kind- and template-prefixed ids."""

    @pytest.mark.parametrize(
        "kind,prefix",
        [("hero", "hero"), ("Hero Section", "hero-section"), (None, Prefix.COMPONENT), ("", Prefix.COMPONENT), ("__", Prefix.COMPONENT)],
    )
    def test_component_prefix(self, kind, prefix):
        id_str = new_component_id(kind)
        assert extract_prefix(id_str) == prefix
        assert is_valid(id_str)

    def test_template_id(self):
        id_str = new_template_id()
        assert id_str.startswith("template_")
        assert is_template_id(id_str)
        assert not is_template_id(new_component_id("template-ish"))


@pytest.mark.unit
class TestParsing:
    """Test parsing of foreign ids."""

    @pytest.mark.parametrize("id_str", ["header-1", "template-2", "x", ""])
    def test_foreign_ids(self, id_str):
        assert not is_valid(id_str)
        assert extract_timestamp(id_str) is None

    def test_seed_template_ids_are_not_generated(self):
        assert not is_template_id("template-1")

    def test_unprefixed(self):
        assert extract_prefix("header-1") is None
