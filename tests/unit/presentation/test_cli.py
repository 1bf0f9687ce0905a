"""Tests for presentation/cli.py."""

import json
from pathlib import Path

import pytest

from exportcheck.presentation.cli import EXIT_ERROR, EXIT_INVALID, EXIT_OK, main
from tests.factories import make_package, write_json


def run(workspace: Path, *args: str) -> int:
    return main(["--workspace-root", str(workspace), *args])


class TestCheckCommand:
    """Tests for `exportcheck check`."""

    def test_valid_project(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        make_package(tmp_path, {"exports": "./dist/index.js"}, project="libs/a")

        assert run(tmp_path, "check", "libs/a") == EXIT_OK
        assert "libs/a" in capsys.readouterr().out

    def test_invalid_project(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        make_package(tmp_path, {"exports": "./dist/index.js"}, project="libs/a")
        make_package(tmp_path, {"main": "./src/index.ts"}, project="libs/b")

        assert run(tmp_path, "check", "libs/a", "libs/b") == EXIT_INVALID
        assert "./src/index.ts" in capsys.readouterr().out

    def test_uses_tsconfig_include(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        project_dir = make_package(tmp_path, {"exports": "./dist/index.ts"}, project="libs/a")
        write_json(project_dir / "tsconfig.lib.json", {"include": ["src/**/*.ts"]})

        assert run(tmp_path, "check", "libs/a", "--tsconfig", "tsconfig.lib.json") == EXIT_OK
        assert run(tmp_path, "check", "libs/a") == EXIT_INVALID

    def test_json_format(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        make_package(tmp_path, {"main": "./src/index.ts"}, project="libs/a")

        code = run(tmp_path, "check", "libs/a", "--format", "json")

        data = json.loads(capsys.readouterr().out)
        assert code == EXIT_INVALID
        assert data["passed"] is False
        assert data["results"][0]["findings"][0]["kind"] == "source"

    def test_missing_manifest_is_ok(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(tmp_path, "check", "libs/none") == EXIT_OK

    def test_malformed_manifest(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        project_dir = make_package(tmp_path, project="libs/a")
        (project_dir / "package.json").write_text("{", encoding="utf-8")

        assert run(tmp_path, "check", "libs/a") == EXIT_ERROR
        assert "Failed to parse" in capsys.readouterr().err


class TestTargetsCommand:
    """Tests for `exportcheck targets`."""

    def test_prints_targets(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        make_package(tmp_path, {"name": "pkg"}, project="libs/a")
        (tmp_path / "pnpm-lock.yaml").write_text("")

        assert run(tmp_path, "targets", "libs/a") == EXIT_OK

        data = json.loads(capsys.readouterr().out)
        assert data["build-deps"] == {"dependsOn": ["^build"]}
        assert data["watch-deps"]["command"].startswith("pnpm exec nx watch --projects pkg")

    def test_explicit_package_manager_and_names(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        make_package(tmp_path, {"name": "pkg"}, project="libs/a")

        code = run(
            tmp_path,
            "targets",
            "libs/a",
            "--package-manager",
            "yarn",
            "--build-deps-target-name",
            "deps",
        )

        data = json.loads(capsys.readouterr().out)
        assert code == EXIT_OK
        assert set(data) == {"deps", "watch-deps"}
        assert data["watch-deps"]["command"].endswith("-- yarn nx deps pkg")

    def test_no_name_prints_empty(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(tmp_path, "targets", "libs/none") == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {}

    def test_same_target_names_rejected(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(
                tmp_path,
                "targets",
                "libs/a",
                "--build-deps-target-name",
                "x",
                "--watch-deps-target-name",
                "x",
            )

        assert exc_info.value.code == EXIT_ERROR
        assert "must differ" in capsys.readouterr().err

    def test_build_name_colliding_with_default_watch_rejected(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(tmp_path, "targets", "libs/a", "--build-deps-target-name", "watch-deps")

        assert exc_info.value.code == EXIT_ERROR
        assert "'watch-deps'" in capsys.readouterr().err

    def test_empty_target_name_rejected(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(tmp_path, "targets", "libs/a", "--watch-deps-target-name", "")

        assert exc_info.value.code == EXIT_ERROR
        assert "must not be empty" in capsys.readouterr().err

