# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Cooperative cancellation for polling sessions."""

from __future__ import annotations

import threading


class CancellationToken:
    """
    Thread-safe flag checked by the poller before each probe dispatch and before
    each sleep. Setting it never interrupts a probe already in flight.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self.reason = ""

    def cancel(self, reason: str = "cancelled by caller") -> None:
        self.reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


__all__ = ["CancellationToken"]
