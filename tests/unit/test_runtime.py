# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import os
import unittest
from unittest.mock import patch

from readycheck.http import HttpResponse
from readycheck.http.adapters import StubHttpClient
from readycheck.models import FailureKind
from readycheck.runtime import ReadyCheck


class TestReadyCheckRuntime(unittest.TestCase):
    def test_poll_reuses_injected_client_and_closes(self):
        client = StubHttpClient(
            {
                "https://app.example.test/": [HttpResponse(ok=True, status_code=503), HttpResponse(ok=True, status_code=200)],
            }
        )

        with patch("time.sleep", return_value=None), ReadyCheck(http_client=client) as checker:
            outcome = checker.poll("https://app.example.test/", max_attempts=3, interval_ms=10)
            self.assertTrue(outcome.success)
            self.assertEqual(outcome.attempts_used, 2)
            self.assertFalse(client.closed)

        self.assertTrue(client.closed)

    def test_poll_defaults_come_from_environment(self):
        client = StubHttpClient({"https://app.example.test/": [HttpResponse(ok=True, status_code=204)]})
        env = {"READYCHECK_MAX_ATTEMPTS": "2", "READYCHECK_INTERVAL_MS": "0", "READYCHECK_EXPECTED_STATUS": "204"}
        with patch.dict(os.environ, env):
            checker = ReadyCheck(http_client=client)
        request = checker.build_request("https://app.example.test/")
        self.assertEqual(request.max_attempts, 2)
        self.assertEqual(request.expected_status, 204)
        self.assertTrue(checker.poll("https://app.example.test/").success)

    def test_poll_many_reports_each_target(self):
        client = StubHttpClient(
            {
                "https://a.example.test/": [HttpResponse(ok=True, status_code=200)],
                "https://b.example.test/": [HttpResponse(ok=False, error_message="refused")],
            }
        )
        with ReadyCheck(http_client=client) as checker:
            outcomes = checker.poll_many(["https://a.example.test/", "https://b.example.test/"], max_attempts=1)
        self.assertEqual([o.success for o in outcomes], [True, False])
        self.assertEqual(outcomes[1].last_error.kind, FailureKind.NETWORK_ERROR)


if __name__ == "__main__":
    unittest.main()
