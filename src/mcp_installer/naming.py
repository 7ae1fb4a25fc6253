"""Derive short server names from package identifiers."""

from __future__ import annotations

import re

_SCOPED_PACKAGE = re.compile(r"^@[^/]+/(.+)$")


def normalize_server_name(name: str) -> str:
    """Strip an npm scope: ``@scope/rest`` becomes ``rest``, anything else is returned as-is."""
    match = _SCOPED_PACKAGE.match(name)
    if match:
        return match.group(1)
    return name
