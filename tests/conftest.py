"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_installer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment overrides from leaking into tests."""
    for var in (
        "MCP_INSTALLER_STRATEGY",
        "MCP_INSTALLER_CLAUDE_BIN",
        "MCP_INSTALLER_DESKTOP_CONFIG",
        "NPM_CONFIG_REGISTRY",
    ):
        monkeypatch.delenv(var, raising=False)
