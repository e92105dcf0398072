"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from id3_tag_manager.utils import encode_synchsafe  # noqa: E402


def build_frame(version, frame_id, body):
    """Frame header + body in the layout of the given major version."""
    if version == 2:
        return frame_id.encode("latin-1") + len(body).to_bytes(3, "big") + body
    if version == 4:
        size = encode_synchsafe(len(body))
    else:
        size = len(body).to_bytes(4, "big")
    return frame_id.encode("latin-1") + size + b"\x00\x00" + body


def build_tag(version, frames, flags=0, padding=0):
    """Complete tag with the given frames (already encoded)."""
    body = b"".join(frames) + bytes(padding)
    return b"ID3" + bytes([version, 0, flags]) + encode_synchsafe(len(body)) + body


@pytest.fixture
def frame_builder():
    return build_frame


@pytest.fixture
def tag_builder():
    return build_tag


@pytest.fixture
def jpeg_bytes():
    """A few bytes that start like a JFIF image."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + bytes(range(32))


@pytest.fixture
def png_bytes():
    return b"\x89PNG\r\n\x1a\n" + bytes(range(24))


@pytest.fixture
def audio_bytes():
    """Stand-in for MPEG audio: a frame sync followed by silence."""
    return b"\xff\xfb\x90\x64" + bytes(256)


@pytest.fixture
def audio_file(tmp_path, audio_bytes):
    """An untagged audio file."""
    path = tmp_path / "track.mp3"
    path.write_bytes(audio_bytes)
    return path
