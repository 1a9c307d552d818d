# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Health poller exports."""

from .async_poller import AsyncHealthPoller, apoll
from .cancel import CancellationToken
from .poller import HealthPoller, poll
from .predicates import any_status, expect_status, parse_status_range, status_in_range
from .runner import apoll_many, poll_many

__all__ = [
    "AsyncHealthPoller",
    "CancellationToken",
    "HealthPoller",
    "any_status",
    "apoll",
    "apoll_many",
    "expect_status",
    "parse_status_range",
    "poll",
    "poll_many",
    "status_in_range",
]
