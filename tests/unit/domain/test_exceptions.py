"""Tests for domain/exceptions.py."""

from pathlib import Path

import pytest

from exportcheck.domain.exceptions import (
    ConfigLoadError,
    ExportCheckError,
    ManifestParseError,
    UnknownPackageManagerError,
)


class TestManifestParseError:
    """Tests for ManifestParseError exception."""

    def test_is_export_check_error(self) -> None:
        assert issubclass(ManifestParseError, ExportCheckError)

    def test_is_value_error(self) -> None:
        assert issubclass(ManifestParseError, ValueError)

    def test_attributes(self) -> None:
        err = ManifestParseError(path=Path("package.json"), reason="Expecting value")
        assert err.path == Path("package.json")
        assert err.reason == "Expecting value"

    def test_message_format(self) -> None:
        err = ManifestParseError(path=Path("libs/a/package.json"), reason="Expecting value")
        assert "Failed to parse" in str(err)
        assert "package.json" in str(err)
        assert "Expecting value" in str(err)


class TestConfigLoadError:
    """Tests for ConfigLoadError exception."""

    def test_message_format(self) -> None:
        err = ConfigLoadError(path=Path("tsconfig.json"), reason="file not found")
        assert str(err) == "Cannot load tsconfig.json: file not found"

    def test_can_catch_as_export_check_error(self) -> None:
        with pytest.raises(ExportCheckError):
            raise ConfigLoadError(path=Path("tsconfig.json"), reason="x")


class TestUnknownPackageManagerError:
    """Tests for UnknownPackageManagerError exception."""

    def test_has_name(self) -> None:
        err = UnknownPackageManagerError("pip")
        assert err.name == "pip"
        assert "'pip'" in str(err)
