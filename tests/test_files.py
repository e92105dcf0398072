"""Tests for the file helpers."""

import pytest

from id3_tag_manager.assembler import create
from id3_tag_manager.errors import InvalidSizeError, TagNotFoundError
from id3_tag_manager.files import (
    read_file,
    remove_tags_from_file,
    scan_file,
    update_file,
    write_file,
)


class TestFileHelpers:
    """Test reading and rewriting files on disk."""

    def test_write_and_read(self, audio_file, audio_bytes):
        write_file({"title": "Hi", "artist": "Band"}, audio_file)

        assert read_file(audio_file) == {"title": "Hi", "artist": "Band"}
        assert audio_file.read_bytes().endswith(audio_bytes)

    def test_string_path(self, audio_file):
        write_file({"title": "Hi"}, str(audio_file))
        assert read_file(str(audio_file))["title"] == "Hi"

    def test_update(self, audio_file):
        write_file({"title": "Hi", "artist": "Band"}, audio_file)
        update_file({"title": "New"}, audio_file)

        assert read_file(audio_file) == {"title": "New", "artist": "Band"}

    def test_read_untagged(self, audio_file):
        with pytest.raises(TagNotFoundError):
            read_file(audio_file)

    def test_remove(self, audio_file, audio_bytes):
        write_file({"title": "Hi"}, audio_file)

        assert remove_tags_from_file(audio_file) is True
        assert audio_file.read_bytes() == audio_bytes

    def test_remove_untagged(self, audio_file, audio_bytes):
        assert remove_tags_from_file(audio_file) is False
        assert audio_file.read_bytes() == audio_bytes

    def test_remove_malformed_leaves_file(self, audio_file, audio_bytes):
        original = b"ID3\x03\x00\x00\x00\x00\x00\x80" + audio_bytes
        audio_file.write_bytes(original)

        with pytest.raises(InvalidSizeError):
            remove_tags_from_file(audio_file)
        assert audio_file.read_bytes() == original

    def test_scan(self, audio_file, audio_bytes):
        first = create({"title": "One"})
        second = create({"title": "Two"})
        audio_file.write_bytes(first + second + audio_bytes)

        assert scan_file(audio_file) == [
            (0, len(first)),
            (len(first), len(first) + len(second)),
        ]

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.mp3"
        with pytest.raises(FileNotFoundError, match="missing.mp3"):
            read_file(missing)
        with pytest.raises(FileNotFoundError):
            write_file({"title": "Hi"}, missing)
        assert not missing.exists()
