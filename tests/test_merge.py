"""Tests for artifact parsing and key merging."""

import pytest

from langmerge.kernel.merge import (
    ArtifactParseError,
    KeyCollision,
    LangMerger,
    add_properties,
    parse_artifact,
)


class TestParseArtifact:

    def test_flat_object(self):
        document = parse_artifact(b'{"hello": "Hello", "bye": "Bye"}')
        assert document.mapping == {"hello": "Hello", "bye": "Bye"}
        assert document.duplicate_keys == []

    def test_nested_values_kept(self):
        document = parse_artifact(b'{"group": {"a": "A"}}')
        assert document.mapping == {"group": {"a": "A"}}

    def test_duplicate_key_last_wins(self):
        document = parse_artifact(b'{"a": "first", "b": "x", "a": "second"}')
        assert document.mapping == {"a": "second", "b": "x"}
        assert document.duplicate_keys == ["a"]

    def test_nested_duplicates_not_reported(self):
        document = parse_artifact(b'{"group": {"a": "1", "a": "2"}}')
        assert document.duplicate_keys == []
        assert document.mapping == {"group": {"a": "2"}}

    def test_utf8_bom_accepted(self):
        document = parse_artifact(b'\xef\xbb\xbf{"a": "\xc3\xa9"}')
        assert document.mapping == {"a": "é"}

    def test_invalid_json(self):
        with pytest.raises(ArtifactParseError):
            parse_artifact(b'{"a": "missing brace"')

    def test_invalid_utf8(self):
        with pytest.raises(ArtifactParseError, match="UTF-8"):
            parse_artifact(b'{"a": "\xff\xfe"}')

    @pytest.mark.parametrize("content", [b'["a", "b"]', b'"text"', b"42", b"null"])
    def test_non_object_rejected(self, content):
        with pytest.raises(ArtifactParseError, match="must be an object"):
            parse_artifact(content)

    def test_nan_rejected(self):
        with pytest.raises(ArtifactParseError):
            parse_artifact(b'{"a": NaN}')


class TestAddProperties:

    def test_prefixes_every_key(self):
        target = {}
        add_properties(target, {"a": "A", "b": "B"}, "core.")
        assert target == {"core.a": "A", "core.b": "B"}

    def test_overwrites_silently(self):
        target = {"core.a": "old", "core.keep": "K"}
        result = add_properties(target, {"a": "new"}, "core.")
        assert result is None
        assert target == {"core.a": "new", "core.keep": "K"}


class TestLangMerger:

    def test_union_of_prefixed_keys(self):
        merger = LangMerger()
        merger.merge({"a": "1"}, "core.", origin="core/lang.json")
        merger.merge({"a": "2"}, "addon.notes.", origin="addons/notes/lang.json")
        assert merger.merged == {"core.a": "1", "addon.notes.a": "2"}
        assert merger.artifact_count == 2

    def test_later_artifact_wins(self):
        merger = LangMerger()
        assert merger.merge({"a": "first"}, "core.", origin="core/lang.json") == []
        collisions = merger.merge({"a": "second"}, "core.", origin="core/components/lang.json")
        assert merger.merged["core.a"] == "second"
        assert collisions == [
            KeyCollision(key="core.a", origin="core/components/lang.json", previous_origin="core/lang.json")
        ]

    def test_collision_tracks_latest_owner(self):
        merger = LangMerger()
        merger.merge({"a": "1"}, "core.", origin="one")
        merger.merge({"a": "2"}, "core.", origin="two")
        collisions = merger.merge({"a": "3"}, "core.", origin="three")
        assert collisions[0].previous_origin == "two"
        assert merger.merged == {"core.a": "3"}

    def test_empty_source(self):
        merger = LangMerger()
        assert merger.merge({}, "core.", origin="core/lang.json") == []
        assert merger.merged == {}
        assert merger.artifact_count == 1
