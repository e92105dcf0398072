"""Tests for merging, stripping, writing and updating tags."""

import pytest

from id3_tag_manager.assembler import create
from id3_tag_manager.decoder import read
from id3_tag_manager.errors import InvalidSizeError
from id3_tag_manager.mutator import merge, remove, strip_tag, update, write
from id3_tag_manager.structures import Chapter, PrivateFrame, UserDefinedText

MALFORMED_TAG = b"ID3\x03\x00\x00\x00\x00\x00\x80"


class TestRemove:
    """Test stripping the leading tag."""

    def test_remove(self, audio_bytes):
        assert remove(create({"title": "Hi"}) + audio_bytes) == audio_bytes

    def test_no_tag(self, audio_bytes):
        assert remove(audio_bytes) == audio_bytes

    def test_prefix_removed_with_tag(self, audio_bytes):
        assert remove(b"\x00\x00" + create({"title": "Hi"}) + audio_bytes) == audio_bytes

    def test_padding_removed(self, tag_builder, audio_bytes):
        assert remove(tag_builder(3, [], padding=100) + audio_bytes) == audio_bytes

    def test_malformed_size(self, audio_bytes):
        with pytest.raises(InvalidSizeError):
            remove(MALFORMED_TAG + audio_bytes)


class TestWrite:
    """Test replacing the tag of a buffer."""

    def test_replaces_existing_tag(self, audio_bytes):
        old = create({"title": "Old", "artist": "Band"}) + audio_bytes
        new = write({"title": "New"}, old)

        assert read(new) == {"title": "New"}
        assert new.endswith(audio_bytes)
        assert new.count(b"ID3") == 1

    def test_untagged_buffer(self, audio_bytes):
        data = write({"title": "Hi"}, audio_bytes)
        assert data == create({"title": "Hi"}) + audio_bytes

    def test_replaces_other_versions(self, tag_builder, frame_builder, audio_bytes):
        old = tag_builder(4, [frame_builder(4, "TIT2", b"\x03Old")], padding=20)
        new = write({"album": "LP"}, old + audio_bytes)

        assert new[3] == 3
        assert read(new) == {"album": "LP"}
        assert new.endswith(audio_bytes)

    def test_malformed_existing_tag_kept(self, audio_bytes):
        original = MALFORMED_TAG + audio_bytes
        data = write({"title": "Hi"}, original)

        assert data == create({"title": "Hi"}) + original


class TestUpdate:
    """Test merging into the existing tag of a buffer."""

    def test_keeps_other_fields(self, audio_bytes):
        data = create({"title": "Old", "artist": "Band"}) + audio_bytes
        tag = read(update({"title": "New"}, data))

        assert tag["title"] == "New"
        assert tag["artist"] == "Band"

    def test_user_defined_text_upserted(self):
        data = create({"user_defined_text": [UserDefinedText("A", "1"), UserDefinedText("B", "2")]})
        incoming = {"user_defined_text": [UserDefinedText("B", "3"), UserDefinedText("C", "4")]}

        assert read(update(incoming, data))["user_defined_text"] == [
            UserDefinedText("A", "1"),
            UserDefinedText("B", "3"),
            UserDefinedText("C", "4"),
        ]

    def test_chapters_upserted(self):
        data = create({"chapter": [Chapter("c1", 0, 10), Chapter("c2", 10, 20)]})
        incoming = {"chapter": {"element_id": "c1", "start_time_ms": 0, "end_time_ms": 5}}

        chapters = read(update(incoming, data))["chapter"]
        assert [(c.element_id, c.end_time_ms) for c in chapters] == [("c1", 5), ("c2", 20)]

    def test_private_replaced(self):
        data = create({"private": [PrivateFrame("a", b"1"), PrivateFrame("b", b"2")]})
        tag = read(update({"private": [PrivateFrame("c", b"3")]}, data))
        assert tag["private"] == [PrivateFrame("c", b"3")]

    def test_untagged_buffer(self, audio_bytes):
        data = update({"title": "Hi"}, audio_bytes)
        assert read(data) == {"title": "Hi"}
        assert data.endswith(audio_bytes)

    def test_unknown_frames_survive(self, tag_builder, frame_builder):
        data = tag_builder(3, [
            frame_builder(3, "GEOB", b"\x00object"),
            frame_builder(3, "TIT2", b"\x00Old"),
        ])
        tag = read(update({"title": "New"}, data))

        assert tag.raw["GEOB"] == b"\x00object"
        assert tag["title"] == "New"

    def test_v22_tag_upgraded(self, tag_builder, frame_builder):
        data = tag_builder(2, [frame_builder(2, "TT2", b"\x00Song"), frame_builder(2, "TAL", b"\x00LP")])
        updated = update({"artist": "Band"}, data)
        tag = read(updated)

        assert updated[3] == 3
        assert tag == {"title": "Song", "album": "LP", "artist": "Band"}
        assert "TT2" not in tag.raw


class TestMerge:
    """Test merging decoded frames with new fields."""

    def test_returns_frame_ids(self):
        merged = merge({"TIT2": "Old"}, {"title": "New", "album": "LP"})
        assert merged == {"TIT2": "New", "TALB": "LP"}

    def test_does_not_modify_arguments(self):
        existing = {"TXXX": [UserDefinedText("A", "1")]}
        incoming = {"user_defined_text": [UserDefinedText("A", "2")]}
        merge(existing, incoming)

        assert existing == {"TXXX": [UserDefinedText("A", "1")]}
        assert incoming == {"user_defined_text": [UserDefinedText("A", "2")]}

    def test_repeated_keys_in_incoming(self):
        merged = merge({}, {"user_defined_text": [UserDefinedText("A", "1"), UserDefinedText("A", "2")]})
        assert merged["TXXX"] == [UserDefinedText("A", "1"), UserDefinedText("A", "2")]

    def test_upsert_with_duplicates_appended_earlier(self):
        merged = merge(
            {"TXXX": [UserDefinedText("A", "1")]},
            {"user_defined_text": [UserDefinedText("B", "2"), UserDefinedText("B", "3")]},
        )
        assert merged["TXXX"] == [UserDefinedText("A", "1"), UserDefinedText("B", "3")]


class TestStripTag:
    """Test stripping without raising."""

    def test_strip(self, audio_bytes):
        assert strip_tag(create({"title": "Hi"}) + audio_bytes) == audio_bytes

    def test_no_tag(self, audio_bytes):
        assert strip_tag(audio_bytes) == audio_bytes

    def test_unmodifiable(self, audio_bytes):
        assert strip_tag(MALFORMED_TAG + audio_bytes) is None
