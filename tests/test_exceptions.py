"""Tests for custom exceptions."""

import errno

import pytest

from dir2zip.exceptions import ArchiveWarning, ArchiveWriterError, InvalidSourceError


class TestArchiveWarning:
    """Test ArchiveWarning exception."""

    def test_missing_file_warning(self):
        warning = ArchiveWarning(errno.ENOENT, "No such file or directory", "/src/gone.txt")
        assert warning.is_missing_file
        assert warning.code_name == "ENOENT"
        assert warning.path == "/src/gone.txt"
        assert str(warning) == "No such file or directory: /src/gone.txt"

    def test_other_warning_is_not_missing_file(self):
        warning = ArchiveWarning(errno.EACCES, "Permission denied")
        assert not warning.is_missing_file
        assert warning.code_name == "EACCES"
        assert str(warning) == "Permission denied"

    def test_from_os_error(self):
        error = PermissionError(errno.EACCES, "Permission denied", "/src/secret.txt")
        warning = ArchiveWarning.from_os_error(error)
        assert warning.code == errno.EACCES
        assert warning.path == "/src/secret.txt"
        assert warning.__cause__ is error

    def test_from_os_error_without_errno(self):
        warning = ArchiveWarning.from_os_error(OSError("boom"), "/src/a.txt")
        assert warning.code == errno.EIO
        assert warning.path == "/src/a.txt"

    @pytest.mark.parametrize(
        "code,expected", [(errno.EACCES, True), (errno.EPERM, True), (errno.ENOENT, False), (errno.EIO, False)]
    )
    def test_is_permission_denied(self, code, expected):
        assert ArchiveWarning(code, "x").is_permission_denied is expected

    def test_unknown_code_name(self):
        assert ArchiveWarning(99999, "odd").code_name == "99999"


class TestArchiveWriterError:
    def test_attributes(self):
        error = ArchiveWriterError("Failed to finalize", "/dest/out.zip")
        assert error.path == "/dest/out.zip"
        assert str(error) == "Failed to finalize"
        assert isinstance(error, Exception)


class TestInvalidSourceError:
    def test_is_value_error(self):
        error = InvalidSourceError("/missing")
        assert isinstance(error, ValueError)
        assert error.path == "/missing"
        assert "is not a valid directory" in str(error)
