"""Tests for path normalization and archive entry naming."""

import os
from unittest.mock import patch

import pytest

from dir2zip.paths import archive_entry_name, normalize_relative_path, resolve_path, to_posix


@pytest.mark.parametrize(
    "path,expected",
    [
        ("a.txt", "a.txt"),
        ("./a.txt", "a.txt"),
        ("sub//b.txt", "sub/b.txt"),
        ("sub/./b.txt", "sub/b.txt"),
        ("sub/", "sub"),
        ("sub/x/../b.txt", "sub/b.txt"),
        ("../outside", "../outside"),
        ("", "."),
    ],
)
def test_normalize_relative_path(path, expected):
    assert normalize_relative_path(path) == expected


def test_to_posix_converts_host_separator():
    with patch("dir2zip.paths.os.sep", "\\"), patch("dir2zip.paths.os.altsep", "/"):
        assert to_posix("sub\\dir\\b.txt") == "sub/dir/b.txt"


def test_to_posix_leaves_forward_slashes():
    assert to_posix("sub/dir/b.txt") == "sub/dir/b.txt"


def test_resolve_path_is_absolute_and_normalized(tmp_path):
    resolved = resolve_path(tmp_path / "a" / ".." / "b")
    assert os.path.isabs(resolved)
    assert resolved == os.path.join(str(tmp_path), "b")


def test_resolve_relative_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_path("project") == os.path.join(os.getcwd(), "project")


@pytest.mark.parametrize(
    "relative_path,base,expected",
    [
        ("a.txt", "", "a.txt"),
        ("sub/b.txt", "", "sub/b.txt"),
        ("a.txt", "project", "project/a.txt"),
        ("sub/b.txt", "project", "project/sub/b.txt"),
    ],
)
def test_archive_entry_name(relative_path, base, expected):
    assert archive_entry_name(relative_path, base) == expected
