"""Test suite for filesystem entry classification."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from tree_size.core.filesystem.classifier import EntryKind, classify_mode, classify_type_code


@pytest.mark.unit
class TestClassifyMode:
    """Test classification from stat mode bits."""

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            (stat.S_IFREG | 0o644, EntryKind.FILE),
            (stat.S_IFDIR | 0o755, EntryKind.DIRECTORY),
            (stat.S_IFLNK | 0o777, EntryKind.SYMBOLIC_LINK),
            (stat.S_IFBLK | 0o660, EntryKind.DEVICE),
            (stat.S_IFCHR | 0o666, EntryKind.DEVICE),
            (stat.S_IFIFO | 0o644, EntryKind.UNKNOWN),
            (stat.S_IFSOCK | 0o755, EntryKind.UNKNOWN),
            (0, EntryKind.UNKNOWN),
        ],
    )
    def test_mode_mapping(self, mode: int, expected: EntryKind) -> None:
        """Each OS file type maps to its logical kind."""
        assert classify_mode(mode) is expected

    def test_real_regular_file(self, tmp_path: Path) -> None:
        """A regular file on disk classifies as a file."""
        target = tmp_path / "data.bin"
        _ = target.write_bytes(b"abc")

        assert classify_mode(target.lstat().st_mode) is EntryKind.FILE

    def test_real_directory(self, tmp_path: Path) -> None:
        """A directory on disk classifies as a directory."""
        assert classify_mode(tmp_path.lstat().st_mode) is EntryKind.DIRECTORY

    def test_real_symlink(self, tmp_path: Path) -> None:
        """A symlink classifies as a link, not as its target."""
        target = tmp_path / "target.txt"
        _ = target.write_text("x")
        link = tmp_path / "link"
        link.symlink_to(target)

        assert classify_mode(link.lstat().st_mode) is EntryKind.SYMBOLIC_LINK

    @pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not supported")
    def test_real_named_pipe(self, tmp_path: Path) -> None:
        """A named pipe classifies as unknown."""
        fifo = tmp_path / "pipe"
        os.mkfifo(fifo)

        assert classify_mode(fifo.lstat().st_mode) is EntryKind.UNKNOWN

    @pytest.mark.skipif(not Path("/dev/null").exists(), reason="/dev/null not available")
    def test_real_character_device(self) -> None:
        """/dev/null is a character device."""
        assert classify_mode(Path("/dev/null").lstat().st_mode) is EntryKind.DEVICE

    @given(st.integers(min_value=0, max_value=0o177777))
    def test_never_raises(self, mode: int) -> None:
        """Any 16-bit mode value yields some kind without raising."""
        assert isinstance(classify_mode(mode), EntryKind)


@pytest.mark.unit
class TestClassifyTypeCode:
    """Test classification from textual type indicators."""

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("-", EntryKind.FILE),
            ("d", EntryKind.DIRECTORY),
            ("l", EntryKind.SYMBOLIC_LINK),
            ("b", EntryKind.DEVICE),
            ("c", EntryKind.DEVICE),
            ("p", EntryKind.UNKNOWN),
            ("s", EntryKind.UNKNOWN),
            ("?", EntryKind.UNKNOWN),
        ],
    )
    def test_filemode_characters(self, code: str, expected: EntryKind) -> None:
        """Single ``stat.filemode`` type characters are recognized."""
        assert classify_type_code(code) is expected

    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("regular", EntryKind.FILE),
            ("Directory", EntryKind.DIRECTORY),
            ("SYMLINK", EntryKind.SYMBOLIC_LINK),
            ("symbolic_link", EntryKind.SYMBOLIC_LINK),
            ("block", EntryKind.DEVICE),
            ("character", EntryKind.DEVICE),
            ("fifo", EntryKind.UNKNOWN),
            (" socket ", EntryKind.UNKNOWN),
        ],
    )
    def test_long_names(self, code: str, expected: EntryKind) -> None:
        """Long type names match case-insensitively."""
        assert classify_type_code(code) is expected

    def test_filemode_character_matches_mode(self, tmp_path: Path) -> None:
        """The first character of ``stat.filemode`` classifies like the mode itself."""
        _ = (tmp_path / "f").write_text("x")
        for path in (tmp_path, tmp_path / "f"):
            mode = path.lstat().st_mode
            assert classify_type_code(stat.filemode(mode)[0]) is classify_mode(mode)

    @given(st.text())
    def test_unrecognized_input_degrades_to_unknown(self, code: str) -> None:
        """Arbitrary text never raises."""
        assert isinstance(classify_type_code(code), EntryKind)

    def test_empty_string_is_unknown(self) -> None:
        """An empty indicator is unknown."""
        assert classify_type_code("") is EntryKind.UNKNOWN
