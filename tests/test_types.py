"""Tests for the archive job and result types."""

import os
from dataclasses import FrozenInstanceError

import pytest

from dir2zip.types import ArchiveJob, ArchiveResult, EntryKind, TraversalEntry


def test_archive_job_resolves_paths(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    job = ArchiveJob.create("project/", "dist/../out.zip")
    assert job.source_root == os.path.join(os.getcwd(), "project")
    assert job.destination_path == os.path.join(os.getcwd(), "out.zip")
    assert job.include_base_directory is False
    assert job.excluded_paths == frozenset()
    assert job.follow_symlinks is False
    assert job.ignore_patterns == ()


def test_archive_job_normalizes_exclusions(tmp_path):
    job = ArchiveJob.create(tmp_path, tmp_path / "out.zip", True, ["./sub/", "sub//c.txt", ""])
    assert job.excluded_paths == frozenset({"sub", "sub/c.txt"})


def test_archive_job_base_directory(tmp_path):
    job = ArchiveJob.create(tmp_path / "project", tmp_path / "out.zip", True)
    assert job.base_directory == "project"


def test_archive_job_is_immutable(tmp_path):
    job = ArchiveJob.create(tmp_path, tmp_path / "out.zip")
    with pytest.raises(FrozenInstanceError):
        job.include_base_directory = True


def test_archive_job_keeps_ignore_patterns(tmp_path):
    job = ArchiveJob.create(tmp_path, tmp_path / "out.zip", ignore_patterns=["*.pyc"], follow_symlinks=True)
    assert job.ignore_patterns == ("*.pyc",)
    assert job.follow_symlinks is True


def test_archive_job_resolves_ignore_files(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    job = ArchiveJob.create(".", "out.zip", ignore_files=["conf/../.gitignore"])
    assert job.ignore_files == (os.path.join(os.getcwd(), ".gitignore"),)


def test_archive_result_human_size():
    result = ArchiveResult("/tmp/out.zip", 1500, 2)
    assert result.human_size == "1.5 KB"
    assert result.entry_count == 2


def test_traversal_entry_fields():
    entry = TraversalEntry("/src/a.txt", "a.txt", EntryKind.FILE)
    assert entry.kind is EntryKind.FILE
    assert entry.relative_path == "a.txt"
