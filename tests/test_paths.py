"""Dot-notation path tests."""

from pymetafield._paths import resolve_path, split_path
from pymetafield.node import MISSING, JsonNode


class TestSplitPath:
    def test_single_segment(self):
        assert split_path("flag") == ["flag"]

    def test_nested(self):
        assert split_path("content.header") == ["content", "header"]

    def test_empty_path(self):
        assert split_path("") == []

    def test_empty_segment_kept(self):
        assert split_path("a..b") == ["a", "", "b"]


class TestResolvePath:
    def test_nested_field(self, payload):
        assert resolve_path(payload, "content.header") == JsonNode("hello")

    def test_top_level_field(self, payload):
        assert resolve_path(payload, "flag") == JsonNode(True)

    def test_empty_path_returns_root(self, payload):
        node = resolve_path(payload, "")
        assert node.value is payload

    def test_missing_first_segment(self):
        assert resolve_path({}, "a.b.c") is MISSING

    def test_missing_leaf(self, payload):
        assert resolve_path(payload, "content.footer") is MISSING

    def test_descend_through_scalar(self, payload):
        assert resolve_path(payload, "content.header.length") is MISSING

    def test_descend_through_null(self, payload):
        assert resolve_path(payload, "nothing.inner") is MISSING

    def test_no_array_indexing(self, payload):
        assert resolve_path(payload, "tags.0") is MISSING

    def test_root_missing(self):
        assert resolve_path(MISSING, "a") is MISSING

    def test_root_already_node(self, payload):
        root = JsonNode(payload)
        assert resolve_path(root, "content.body") == JsonNode("world")

    def test_deep_missing_path(self):
        path = ".".join(f"level{i}" for i in range(200))
        assert resolve_path({"level0": {}}, path) is MISSING

    def test_does_not_mutate_document(self, payload):
        before = repr(payload)
        resolve_path(payload, "content.missing.deeper")
        assert repr(payload) == before
