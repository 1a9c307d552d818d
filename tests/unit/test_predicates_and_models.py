# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from readycheck.config import PollSettings
from readycheck.errors import ErrorCategory, InvalidConfiguration
from readycheck.models import AttemptKind, AttemptResult, FailureKind, ProbeFailure, ProbeOutcome, ProbeRequest
from readycheck.poll.predicates import any_status, expect_status, parse_status_range, status_in_range


def test_expect_status():
    predicate = expect_status(200)
    assert predicate(200, None) is True
    assert predicate(201, None) is False


def test_status_in_range_bounds_are_inclusive():
    predicate = status_in_range(200, 399)
    assert predicate(200, None)
    assert predicate(399, None)
    assert not predicate(400, None)
    assert not predicate(199, None)
    with pytest.raises(InvalidConfiguration):
        status_in_range(500, 200)


def test_any_status():
    predicate = any_status(200, 204)
    assert predicate(204, None)
    assert not predicate(302, None)
    with pytest.raises(InvalidConfiguration):
        any_status()


@pytest.mark.parametrize(
    ("value", "expected"),
    [("200-399", (200, 399)), (" 200 - 204 ", (200, 204)), ("204", (204, 204))],
)
def test_parse_status_range(value, expected):
    assert parse_status_range(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "300-200", "200-"])
def test_parse_status_range_rejects_garbage(value):
    with pytest.raises(InvalidConfiguration):
        parse_status_range(value)


def test_default_predicate_uses_expected_status():
    assert ProbeRequest("https://x.test/").is_healthy(200)
    assert not ProbeRequest("https://x.test/").is_healthy(204)
    assert ProbeRequest("https://x.test/", expected_status=204).is_healthy(204)


def test_probe_request_is_immutable():
    request = ProbeRequest("https://x.test/")
    with pytest.raises(AttributeError):
        request.max_attempts = 5  # type: ignore[misc]


def test_probe_request_from_settings_applies_overrides():
    settings = PollSettings(max_attempts=7, interval_ms=100, probe_timeout_ms=900, backoff_factor=1.0, expected_status=204)
    request = ProbeRequest.from_settings("https://x.test/", settings, interval_ms=50, max_attempts=None)
    assert request.max_attempts == 7
    assert request.interval_ms == 50
    assert request.probe_timeout_ms == 900
    assert request.expected_status == 204


def test_interval_before_follows_backoff():
    constant = ProbeRequest("https://x.test/", interval_ms=2000)
    assert [constant.interval_before(n) for n in (2, 3, 4)] == [2.0, 2.0, 2.0]
    growing = ProbeRequest("https://x.test/", interval_ms=100, backoff_factor=3.0)
    assert [growing.interval_before(n) for n in (2, 3, 4)] == pytest.approx([0.1, 0.3, 0.9])


def test_outcome_reason_and_last_status():
    attempts = (
        AttemptResult(attempt=1, kind=AttemptKind.RESPONDED, status_code=502, reason="HTTP 502"),
        AttemptResult(attempt=2, kind=AttemptKind.NETWORK_ERROR, reason="refused", category=ErrorCategory.CONNECTION_ERROR),
    )
    outcome = ProbeOutcome(
        success=False,
        attempts_used=2,
        elapsed_ms=1000,
        last_error=attempts[1].as_failure(),
        target="https://x.test/",
        attempts=attempts,
    )
    assert outcome.reason == "refused"
    assert outcome.last_status_code == 502
    assert outcome.last_error == ProbeFailure(FailureKind.NETWORK_ERROR, reason="refused", category=ErrorCategory.CONNECTION_ERROR)
    assert outcome.to_dict()["last_error"]["kind"] == "NETWORK_ERROR"

    ok = ProbeOutcome(success=True, attempts_used=1, elapsed_ms=0)
    assert ok.reason == "healthy after 1 attempt(s)"
    assert ok.last_status_code is None


def test_responded_attempt_has_no_standalone_failure():
    attempt = AttemptResult(attempt=1, kind=AttemptKind.RESPONDED, status_code=503)
    assert attempt.as_failure() is None
