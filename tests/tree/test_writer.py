"""Tests for set_value_at_path (copy-on-write tree writes).

Covers:
- Root replacement for the empty path
- Round trip: reading back a written path yields the written value
- Non-aliasing: the input root is never mutated, containers on the written
  path are fresh copies, untouched siblings are shared
- Materializing missing intermediate containers (list vs dict by next segment)
- Lazily establishing a non-container root
- List padding past the end
- PathTypeError on container kind mismatches
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from json_node_editor.errors import InvalidPathError, PathTypeError
from json_node_editor.tree.accessor import get_value_at_path
from json_node_editor.tree.writer import set_value_at_path


@pytest.fixture
def doc() -> dict[str, Any]:
    return {
        "user": {"name": "Ann", "age": 30, "address": {"city": "Oslo"}},
        "tags": ["a", "b", {"label": "c"}],
        "meta": {"version": 1},
    }


# ---------------------------------------------------------------------------
# Root replacement
# ---------------------------------------------------------------------------


class TestRootReplacement:
    """Tests for writes at the empty path."""

    @pytest.mark.parametrize("value", [None, 1, "x", [1, 2], {"k": "v"}, True])
    def test_empty_path_returns_value_itself(
        self, doc: dict[str, Any], value: Any
    ) -> None:
        """The empty path returns the new value unchanged."""
        assert set_value_at_path(doc, (), value) is value

    def test_none_path_replaces_root(self, doc: dict[str, Any]) -> None:
        """A None path replaces the root."""
        value = {"new": True}
        assert set_value_at_path(doc, None, value) is value

    def test_root_replacement_does_not_touch_old_root(
        self, doc: dict[str, Any]
    ) -> None:
        """Replacing the root leaves the old root intact."""
        before = copy.deepcopy(doc)
        set_value_at_path(doc, [], 5)
        assert doc == before


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


class TestRoundTrip:
    """Tests that a written value reads back at its path."""

    @pytest.mark.parametrize(
        "path",
        [
            ("user",),
            ("user", "name"),
            ("user", "address", "city"),
            ("tags", 0),
            ("tags", 2, "label"),
            ("meta",),
        ],
    )
    def test_written_value_is_read_back(
        self, doc: dict[str, Any], path: tuple[str | int, ...]
    ) -> None:
        """get_value_at_path returns exactly the written value."""
        value = {"written": list(path)}
        new_root = set_value_at_path(doc, path, value)
        assert get_value_at_path(new_root, path) is value

    def test_overwrite_scalar(self, doc: dict[str, Any]) -> None:
        """Overwriting a scalar keeps its siblings."""
        new_root = set_value_at_path(doc, ["user", "age"], 31)
        assert new_root["user"] == {
            "name": "Ann",
            "age": 31,
            "address": {"city": "Oslo"},
        }

    def test_key_order_preserved(self, doc: dict[str, Any]) -> None:
        """Copied objects keep their key order."""
        new_root = set_value_at_path(doc, ["user", "name"], "Bob")
        assert list(new_root) == ["user", "tags", "meta"]
        assert list(new_root["user"]) == ["name", "age", "address"]

    def test_new_key_appended(self, doc: dict[str, Any]) -> None:
        """A new key goes after the existing ones."""
        new_root = set_value_at_path(doc, ["user", "email"], "ann@example.com")
        assert list(new_root["user"])[-1] == "email"


# ---------------------------------------------------------------------------
# Non-aliasing
# ---------------------------------------------------------------------------


class TestNonAliasing:
    """Tests that writes copy the path and share the rest."""

    def test_input_root_never_mutated(self, doc: dict[str, Any]) -> None:
        """The input root is never changed."""
        before = copy.deepcopy(doc)
        set_value_at_path(doc, ["user", "address", "city"], "Bergen")
        set_value_at_path(doc, ["tags", 5], "z")
        set_value_at_path(doc, ["new", 0, "deep"], 1)
        assert doc == before

    def test_containers_on_path_are_fresh(self, doc: dict[str, Any]) -> None:
        """Every container on the path is a new object."""
        new_root = set_value_at_path(doc, ["user", "address", "city"], "Bergen")
        assert new_root is not doc
        assert new_root["user"] is not doc["user"]
        assert new_root["user"]["address"] is not doc["user"]["address"]

    def test_untouched_siblings_are_shared(self, doc: dict[str, Any]) -> None:
        """Containers off the path are reused as-is."""
        new_root = set_value_at_path(doc, ["user", "address", "city"], "Bergen")
        assert new_root["tags"] is doc["tags"]
        assert new_root["meta"] is doc["meta"]

    def test_mutating_new_root_leaves_old_root_alone(
        self, doc: dict[str, Any]
    ) -> None:
        """Changing the copied path never reaches the old root."""
        before = copy.deepcopy(doc)
        new_root = set_value_at_path(doc, ["user", "address", "city"], "Bergen")

        new_root["meta"] = "replaced"
        new_root["user"]["name"] = "Zed"
        new_root["user"]["address"]["zip"] = "0150"
        del new_root["tags"]

        assert doc == before

    def test_array_on_path_is_fresh(self, doc: dict[str, Any]) -> None:
        """Arrays on the path are copied too."""
        new_root = set_value_at_path(doc, ["tags", 2, "label"], "C")
        assert new_root["tags"] is not doc["tags"]
        assert new_root["tags"][2] is not doc["tags"][2]
        new_root["tags"].append("extra")
        assert doc["tags"] == ["a", "b", {"label": "c"}]

    def test_array_root(self) -> None:
        """An array root is copied on write."""
        root = [{"a": 1}, {"b": 2}]
        new_root = set_value_at_path(root, [0, "a"], 10)
        assert new_root == [{"a": 10}, {"b": 2}]
        assert root == [{"a": 1}, {"b": 2}]
        assert new_root[1] is root[1]

    def test_successive_writes_keep_every_version(self) -> None:
        """Each write leaves earlier versions readable."""
        v0: dict[str, Any] = {"n": 0}
        v1 = set_value_at_path(v0, ["n"], 1)
        v2 = set_value_at_path(v1, ["n"], 2)
        assert (v0["n"], v1["n"], v2["n"]) == (0, 1, 2)


# ---------------------------------------------------------------------------
# Materializing missing structure
# ---------------------------------------------------------------------------


class TestMissingIntermediates:
    """Tests for creating missing containers."""

    def test_missing_key_followed_by_string_creates_object(self) -> None:
        """A string segment creates an object."""
        assert set_value_at_path({}, ["a", "b"], 1) == {"a": {"b": 1}}

    def test_missing_key_followed_by_index_creates_array(self) -> None:
        """An int segment creates an array."""
        assert set_value_at_path({}, ["items", 0], "x") == {"items": ["x"]}

    def test_null_intermediate_is_replaced(self) -> None:
        """A null on the path becomes a container."""
        root = {"a": None}
        assert set_value_at_path(root, ["a", "b"], 1) == {"a": {"b": 1}}
        assert root == {"a": None}

    def test_scalar_intermediate_is_replaced(self) -> None:
        """A scalar on the path becomes a container."""
        assert set_value_at_path({"a": 5}, ["a", 0], True) == {"a": [True]}

    def test_deep_mixed_chain(self) -> None:
        """Mixed key and index chains are created level by level."""
        new_root = set_value_at_path({}, ["a", 0, "b", 1], "v")
        assert new_root == {"a": [{"b": [None, "v"]}]}


class TestNonContainerRoot:
    """Tests for writes below a scalar or null root."""

    def test_null_root_with_key_becomes_object(self) -> None:
        """A null root with a key becomes an object."""
        assert set_value_at_path(None, ["a"], 1) == {"a": 1}

    def test_null_root_with_index_becomes_array(self) -> None:
        """A null root with an index becomes an array."""
        assert set_value_at_path(None, [0], 1) == [1]

    def test_scalar_root_is_replaced_by_container(self) -> None:
        """A scalar root is replaced by a container."""
        assert set_value_at_path("text", ["k"], 1) == {"k": 1}


class TestListPadding:
    """Tests for writes at or past the end of an array."""

    def test_append_at_length(self) -> None:
        """Writing at the length appends."""
        assert set_value_at_path([1, 2], [2], 3) == [1, 2, 3]

    def test_write_past_end_pads_with_null(self) -> None:
        """The gap past the end is filled with None."""
        assert set_value_at_path([1], [3], 4) == [1, None, None, 4]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestKindMismatch:
    """Tests for segments that do not fit an existing container."""

    def test_string_key_on_array_raises(self) -> None:
        """A string key under an array raises PathTypeError."""
        with pytest.raises(PathTypeError, match="cannot key array"):
            set_value_at_path({"tags": ["a"]}, ["tags", "x"], 1)

    def test_index_on_object_raises(self) -> None:
        """An index under an object raises PathTypeError."""
        with pytest.raises(PathTypeError, match="cannot index object"):
            set_value_at_path({"user": {}}, ["user", 0], 1)

    def test_mismatch_at_root(self) -> None:
        """The root container is checked too."""
        with pytest.raises(PathTypeError):
            set_value_at_path([1, 2], ["a"], 1)

    def test_path_type_error_is_type_error(self) -> None:
        """PathTypeError is a TypeError."""
        with pytest.raises(TypeError):
            set_value_at_path({}, [0], 1)

    def test_negative_index_rejected(self) -> None:
        """Negative indices are rejected before writing."""
        with pytest.raises(InvalidPathError):
            set_value_at_path([1], [-1], 0)
