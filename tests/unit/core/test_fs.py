"""Unit tests for core/utils/fs.py"""

from pathlib import Path

import pytest

from md2html.core.utils.fs import derive_output_path, file_exists, read_text, write_text
from md2html.errors import FileAccessError, NotFoundError, PermissionDeniedError


# --- derive_output_path ---

@pytest.mark.parametrize("src,expected", [
    ("docs/readme.md", "docs/readme.html"),
    ("README.MD", "README.html"),
    ("notes.txt", "notes.txt.html"),
    ("notes", "notes.html"),
    ("archive.md.bak", "archive.md.bak.html"),
])
def test_derive_output_path(src, expected):
    """A trailing .md (any case) is swapped for .html; otherwise .html is appended."""
    assert derive_output_path(Path(src)) == Path(expected)


def test_derive_output_path_output_dir():
    """output_dir relocates the derived name without renaming it."""
    assert derive_output_path(Path("docs/readme.md"), Path("site")) == Path("site/readme.html")


# --- read_text ---

def test_read_text_utf8(tmp_path):
    f = tmp_path / "doc.md"
    f.write_text("héllo", encoding="utf-8")
    assert read_text(f) == "héllo"


def test_read_text_missing(tmp_path):
    """A missing file raises NotFoundError carrying the path."""
    missing = tmp_path / "nope.md"
    with pytest.raises(NotFoundError) as exc:
        read_text(missing)
    assert exc.value.path == missing
    assert "File not found" in str(exc.value)


def test_read_text_permission_denied(tmp_path, monkeypatch):
    """PermissionError from the OS maps to PermissionDeniedError."""
    f = tmp_path / "locked.md"
    f.write_text("x")

    def _deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "read_text", _deny)
    with pytest.raises(PermissionDeniedError):
        read_text(f)


def test_read_text_directory(tmp_path):
    """Reading a directory is a generic FileAccessError, not NotFound."""
    with pytest.raises(FileAccessError) as exc:
        read_text(tmp_path)
    assert not isinstance(exc.value, NotFoundError)


def test_read_text_not_utf8(tmp_path):
    """Undecodable bytes raise FileAccessError."""
    f = tmp_path / "bin.md"
    f.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(FileAccessError, match="Failed to read"):
        read_text(f)


# --- write_text ---

def test_write_text_creates_parents(tmp_path):
    """Intermediate directories are created."""
    out = tmp_path / "a" / "b" / "page.html"
    write_text(out, "<p>x</p>")
    assert out.read_text(encoding="utf-8") == "<p>x</p>"


def test_write_text_permission_denied(tmp_path, monkeypatch):
    def _deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(Path, "write_text", _deny)
    with pytest.raises(PermissionDeniedError, match="Permission denied writing"):
        write_text(tmp_path / "out.html", "x")


def test_write_text_parent_is_file(tmp_path):
    """A file in place of a parent directory raises FileAccessError."""
    (tmp_path / "blocker").write_text("x")
    with pytest.raises(FileAccessError, match="Failed to write"):
        write_text(tmp_path / "blocker" / "out.html", "x")


# --- file_exists ---

def test_file_exists(tmp_path):
    f = tmp_path / "doc.md"
    f.write_text("x")
    assert file_exists(f)
    assert not file_exists(tmp_path / "missing.md")
    assert not file_exists(tmp_path)
