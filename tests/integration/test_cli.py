"""Integration tests for the command-line interface.

These tests run the installed ``dir2zip`` entry point in a subprocess. They are slow
and only run when pytest is given ``--run-cli-tests``.
"""

import os
import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "project"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "node_modules").mkdir()
    (base_dir / "src" / "main.py").write_text("def main():\n    print('Hello')\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("def helper():\n    pass\n")
    (base_dir / "src" / "main.pyc").write_bytes(b"compiled python")
    (base_dir / "node_modules" / "module.js").write_text("export default {}\n")
    (base_dir / "README.md").write_text("# Test Project\n")
    return base_dir


def run_cli(*args, cwd=None):
    return subprocess.run(
        [sys.executable, "-m", "dir2zip.cli.main", *map(str, args)],
        capture_output=True,
        text=True,
        cwd=cwd,
    )


def names(path: Path):
    with zipfile.ZipFile(path) as zf:
        return zf.namelist()


def test_basic_archive(temp_project, tmp_path):
    destination = tmp_path / "dist" / "project.zip"
    result = run_cli(temp_project, destination)
    assert result.returncode == 0, result.stderr
    assert "Created" in result.stdout
    assert names(destination) == [
        "README.md",
        "node_modules/module.js",
        "src/main.py",
        "src/main.pyc",
        "src/utils/helpers.py",
    ]


def test_base_directory_and_exclusions(temp_project, tmp_path):
    destination = tmp_path / "project.zip"
    result = run_cli("-b", "-x", "node_modules", "-i", "*.pyc", temp_project, destination)
    assert result.returncode == 0, result.stderr
    assert names(destination) == [
        "project/README.md",
        "project/src/main.py",
        "project/src/utils/helpers.py",
    ]


def test_verbose_logs_to_stderr(temp_project, tmp_path):
    result = run_cli("-vv", temp_project, tmp_path / "project.zip")
    assert result.returncode == 0
    assert "Added" in result.stderr


def test_invalid_source_exit_code(tmp_path):
    result = run_cli(tmp_path / "missing", tmp_path / "out.zip")
    assert result.returncode == 1
    assert "Error:" in result.stderr


def test_usage_error_exit_code(tmp_path):
    result = run_cli(tmp_path)
    assert result.returncode == 2


@pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="Requires POSIX permissions as non-root")
def test_permission_denied_exit_code(temp_project, tmp_path):
    locked = temp_project / "src" / "utils"
    locked.chmod(0)
    try:
        result = run_cli(temp_project, tmp_path / "out.zip")
    finally:
        locked.chmod(0o755)
    assert result.returncode == 126
    assert not (tmp_path / "out.zip").exists()
