"""Tests for local package entry point resolution."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from mcp_installer.errors import (
    DependencyInstallError,
    InvalidManifestError,
    ManifestNotFoundError,
)
from mcp_installer.installer.local import entry_points_from_manifest, resolve_entry_points


def _write_manifest(directory: Path, manifest: object) -> None:
    (directory / "package.json").write_text(json.dumps(manifest))


class TestEntryPointsFromManifest:
    def test_bin_mapping(self, tmp_path: Path):
        entries = entry_points_from_manifest(
            {"name": "foo", "bin": {"foo-cli": "./bin/cli.js", "foo-admin": "admin.js"}},
            tmp_path,
        )
        assert entries == {
            "foo-cli": str((tmp_path / "bin" / "cli.js").resolve()),
            "foo-admin": str((tmp_path / "admin.js").resolve()),
        }

    def test_bin_string_keyed_by_package_name(self, tmp_path: Path):
        entries = entry_points_from_manifest({"name": "foo", "bin": "cli.js"}, tmp_path)
        assert entries == {"foo": str((tmp_path / "cli.js").resolve())}

    def test_main_keyed_by_package_name(self, tmp_path: Path):
        entries = entry_points_from_manifest({"name": "@me/srv", "main": "dist/index.js"}, tmp_path)
        assert entries == {"@me/srv": str((tmp_path / "dist" / "index.js").resolve())}

    def test_bin_wins_over_main(self, tmp_path: Path):
        entries = entry_points_from_manifest(
            {"name": "foo", "main": "index.js", "bin": {"foo": "cli.js"}}, tmp_path
        )
        assert list(entries) == ["foo"]
        assert entries["foo"].endswith("cli.js")

    def test_non_string_bin_values_skipped(self, tmp_path: Path):
        entries = entry_points_from_manifest(
            {"name": "foo", "bin": {"x": None, "y": 3, "z": "z.js"}}, tmp_path
        )
        assert entries == {"z": str((tmp_path / "z.js").resolve())}

    def test_bin_without_usable_paths_falls_back_to_main(self, tmp_path: Path):
        entries = entry_points_from_manifest(
            {"name": "foo", "bin": {"x": None}, "main": "index.js"}, tmp_path
        )
        assert entries == {"foo": str((tmp_path / "index.js").resolve())}

    def test_nothing_runnable(self, tmp_path: Path):
        assert entry_points_from_manifest({"name": "foo", "bin": {}}, tmp_path) == {}

    def test_missing_name_uses_directory(self, tmp_path: Path):
        entries = entry_points_from_manifest({"main": "index.js"}, tmp_path)
        assert list(entries) == [tmp_path.name]


class TestResolveEntryPoints:
    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_runs_npm_install_then_reads_bin(self, mock_run, tmp_path: Path):
        mock_run.return_value = (0, "added 12 packages", "")
        _write_manifest(tmp_path, {"name": "foo", "bin": {"foo-cli": "./bin/cli.js"}})

        entries = await resolve_entry_points(tmp_path)

        assert entries == {"foo-cli": str(tmp_path.resolve() / "bin" / "cli.js")}
        mock_run.assert_awaited_once_with(["npm", "install"], cwd=tmp_path.resolve())

    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_missing_manifest(self, mock_run, tmp_path: Path):
        with pytest.raises(ManifestNotFoundError, match="No package.json"):
            await resolve_entry_points(tmp_path)
        mock_run.assert_not_awaited()

    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_python_project_reported(self, mock_run, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")

        with pytest.raises(ManifestNotFoundError, match="Python project"):
            await resolve_entry_points(tmp_path)
        mock_run.assert_not_awaited()

    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_npm_install_failure(self, mock_run, tmp_path: Path):
        mock_run.return_value = (1, "", "ERESOLVE unable to resolve dependency tree")
        _write_manifest(tmp_path, {"name": "foo", "main": "index.js"})

        with pytest.raises(DependencyInstallError, match="ERESOLVE"):
            await resolve_entry_points(tmp_path)

    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_npm_missing(self, mock_run, tmp_path: Path):
        mock_run.side_effect = FileNotFoundError("npm")
        _write_manifest(tmp_path, {"name": "foo", "main": "index.js"})

        with pytest.raises(DependencyInstallError, match="Is npm installed"):
            await resolve_entry_points(tmp_path)

    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_invalid_manifest(self, mock_run, tmp_path: Path):
        mock_run.return_value = (0, "", "")
        (tmp_path / "package.json").write_text("{ not json")

        with pytest.raises(InvalidManifestError):
            await resolve_entry_points(tmp_path)

    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_non_object_manifest(self, mock_run, tmp_path: Path):
        mock_run.return_value = (0, "", "")
        _write_manifest(tmp_path, ["not", "an", "object"])

        with pytest.raises(InvalidManifestError, match="JSON object"):
            await resolve_entry_points(tmp_path)

    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_notify_called_before_npm_install(self, mock_run, tmp_path: Path):
        mock_run.return_value = (0, "", "")
        _write_manifest(tmp_path, {"name": "foo", "main": "index.js"})
        notify = AsyncMock()

        await resolve_entry_points(tmp_path, notify=notify)

        notify.assert_awaited_once_with(f"Running npm install in {tmp_path.resolve()}...")

    @patch("mcp_installer.installer.local.run_command", new_callable=AsyncMock)
    async def test_notify_not_called_without_manifest(self, mock_run, tmp_path: Path):
        notify = AsyncMock()

        with pytest.raises(ManifestNotFoundError):
            await resolve_entry_points(tmp_path, notify=notify)

        notify.assert_not_awaited()
