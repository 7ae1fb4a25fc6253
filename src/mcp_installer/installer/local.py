"""Discover runnable entry points in a locally-cloned Node.js MCP server."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path

from mcp_installer.errors import (
    DependencyInstallError,
    InvalidManifestError,
    ManifestNotFoundError,
)
from mcp_installer.installer.subprocess import run_command

logger = logging.getLogger(__name__)

_MANIFEST = "package.json"


async def resolve_entry_points(
    directory: Path | str,
    *,
    notify: Callable[[str], Awaitable[None]] | None = None,
) -> dict[str, str]:
    """Install a project's dependencies and map each entry point name to its absolute path.

    Declared ``bin`` entries win; a lone ``main`` module is keyed by the
    package name. An empty mapping means the manifest declares nothing
    runnable. *notify*, when given, receives a progress line just before the
    dependency install starts.

    Raises:
        ManifestNotFoundError: No ``package.json`` in *directory*.
        DependencyInstallError: ``npm install`` could not run or exited non-zero.
        InvalidManifestError: ``package.json`` is not a JSON object.
    """
    root = Path(directory).resolve()
    manifest_path = root / _MANIFEST

    if not manifest_path.is_file():
        if (root / "pyproject.toml").is_file():
            raise ManifestNotFoundError(
                f"{root} is a Python project. Installing local Python MCP servers "
                "is not supported yet; only Node.js projects with a package.json are."
            )
        raise ManifestNotFoundError(
            f"No package.json found in {root}. Only local Node.js MCP servers can be installed."
        )

    if notify is not None:
        await notify(f"Running npm install in {root}...")
    await _npm_install(root)

    manifest = await asyncio.to_thread(_read_manifest, manifest_path)
    return entry_points_from_manifest(manifest, root)


def entry_points_from_manifest(manifest: dict[str, object], root: Path) -> dict[str, str]:
    """Pure half of resolution: manifest fields -> {name: absolute path}."""
    package_name = str(manifest.get("name", "") or root.name)
    bin_field = manifest.get("bin")

    if isinstance(bin_field, dict):
        binaries = {
            str(name): _absolute(root, rel)
            for name, rel in bin_field.items()
            if isinstance(rel, str) and rel
        }
        if binaries:
            return binaries
    if isinstance(bin_field, str) and bin_field:
        return {package_name: _absolute(root, bin_field)}

    main = manifest.get("main")
    if isinstance(main, str) and main:
        return {package_name: _absolute(root, main)}

    return {}


async def _npm_install(root: Path) -> None:
    logger.info("Running npm install in %s", root)
    try:
        returncode, stdout, stderr = await run_command(["npm", "install"], cwd=root)
    except OSError as exc:
        raise DependencyInstallError(
            f"Could not run npm install in {root}: {exc}. Is npm installed?"
        ) from exc

    if returncode != 0:
        raise DependencyInstallError(
            f"npm install failed in {root} (exit {returncode}): {stderr or stdout}"
        )


def _read_manifest(manifest_path: Path) -> dict[str, object]:
    try:
        data = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise InvalidManifestError(f"Could not parse {manifest_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidManifestError(f"{manifest_path} must contain a JSON object.")
    return data


def _absolute(root: Path, relative: object) -> str:
    return str((root / str(relative)).resolve())
