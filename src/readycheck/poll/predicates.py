# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Stock success predicates for ProbeRequest.success_predicate."""

from __future__ import annotations

from ..errors import InvalidConfiguration
from ..models import ProbeFailure, SuccessPredicate


def expect_status(expected: int) -> SuccessPredicate:
    """Healthy only when the response status equals `expected` (the default rule)."""

    def predicate(status_code: int, error: ProbeFailure | None = None) -> bool:  # noqa: ARG001
        return status_code == expected

    return predicate


def status_in_range(low: int = 200, high: int = 399) -> SuccessPredicate:
    """Healthy when `low <= status <= high`; 200..399 treats redirects as reachable."""
    if low > high:
        raise InvalidConfiguration(f"status range is empty: {low}-{high}")

    def predicate(status_code: int, error: ProbeFailure | None = None) -> bool:  # noqa: ARG001
        return low <= status_code <= high

    return predicate


def any_status(*codes: int) -> SuccessPredicate:
    """Healthy when the status is one of `codes`."""
    if not codes:
        raise InvalidConfiguration("any_status() needs at least one status code")
    accepted = frozenset(codes)

    def predicate(status_code: int, error: ProbeFailure | None = None) -> bool:  # noqa: ARG001
        return status_code in accepted

    return predicate


def parse_status_range(value: str) -> tuple[int, int]:
    """Parse `LOW-HIGH` (or a single code) into an inclusive range."""
    raw = str(value or "").strip()
    low_text, sep, high_text = raw.partition("-")
    try:
        low = int(low_text)
        high = int(high_text) if sep else low
    except ValueError as exc:
        raise InvalidConfiguration(f"invalid status range {value!r}; expected LOW-HIGH") from exc
    if low > high:
        raise InvalidConfiguration(f"status range is empty: {value!r}")
    return low, high


__all__ = ["any_status", "expect_status", "parse_status_range", "status_in_range"]
