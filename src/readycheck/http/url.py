# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Target URL helpers."""

from __future__ import annotations

from urllib.parse import urlsplit

ALLOWED_SCHEMES = frozenset({"http", "https"})


def is_valid_target(target: object) -> bool:
    """Return True when `target` is an absolute http(s) URL with a host."""
    if not isinstance(target, str) or not target.strip():
        return False
    if any(ch.isspace() for ch in target.strip()):
        return False
    try:
        parts = urlsplit(target.strip())
        # Accessing .port raises ValueError for malformed ports.
        parts.port  # noqa: B018
    except ValueError:
        return False
    return parts.scheme.lower() in ALLOWED_SCHEMES and bool(parts.hostname)


def redact_target(target: str) -> str:
    """Strip userinfo, query and fragment so targets are safe to log."""
    try:
        parts = urlsplit(str(target or ""))
    except ValueError:
        return str(target or "")[:200]
    host = parts.hostname or ""
    if parts.port:
        host = f"{host}:{parts.port}"
    return parts._replace(netloc=host, query="", fragment="").geturl()


__all__ = ["ALLOWED_SCHEMES", "is_valid_target", "redact_target"]
