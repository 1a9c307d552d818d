# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""readycheck CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import HttpSettings, load_http_settings, load_poll_settings
from ..errors import InvalidConfiguration
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import ProbeOutcome
from ..poll.predicates import parse_status_range, status_in_range
from ..runtime import ReadyCheck

EXIT_READY = 0
EXIT_NOT_READY = 1
EXIT_INVALID_CONFIGURATION = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Poll deployment URLs until they report healthy")
    parser.add_argument(
        "urls",
        nargs="*",
        metavar="URL",
        help="Target URL(s) to poll (defaults to $READYCHECK_BASE_URL)",
    )
    parser.add_argument("--max-attempts", type=int, default=None, help="Probe budget per target")
    parser.add_argument("--interval-ms", type=int, default=None, help="Delay between attempts in milliseconds")
    parser.add_argument("--probe-timeout-ms", type=int, default=None, help="Per-attempt timeout in milliseconds")
    parser.add_argument("--backoff", type=float, default=None, help="Interval multiplier applied after each retry (1.0 = constant)")
    parser.add_argument("--expect-status", type=int, default=None, help="Exact status code that counts as healthy")
    parser.add_argument(
        "--accept-range",
        default=None,
        metavar="LOW-HIGH",
        help="Inclusive status range that counts as healthy (e.g. 200-399); overrides --expect-status",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output JSON instead of human-friendly summary",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $READYCHECK_LOG_LEVEL or WARNING)")
    return parser


def _request_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {
        "max_attempts": args.max_attempts,
        "interval_ms": args.interval_ms,
        "probe_timeout_ms": args.probe_timeout_ms,
        "backoff_factor": args.backoff,
        "expected_status": args.expect_status,
    }
    if args.accept_range:
        low, high = parse_status_range(args.accept_range)
        overrides["success_predicate"] = status_in_range(low, high)
    return {key: value for key, value in overrides.items() if value is not None}


def _print_json(outcomes: list[ProbeOutcome]) -> None:
    payload = {
        "ready": all(outcome.success for outcome in outcomes),
        "targets": [outcome.to_dict() for outcome in outcomes],
    }
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print(outcomes: list[ProbeOutcome]) -> None:
    for outcome in outcomes:
        if outcome.success:
            print(f"[readycheck] READY {outcome.target} ({outcome.attempts_used} attempt(s), {outcome.elapsed_ms} ms)")
            continue
        state = "CANCELLED" if outcome.cancelled else "NOT READY"
        print(f"[readycheck] {state} {outcome.target} ({outcome.attempts_used} attempt(s), {outcome.elapsed_ms} ms)")
        if outcome.last_error is not None:
            print(f"  Last error: {outcome.last_error.kind.value}: {outcome.reason}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    urls = list(args.urls)
    if not urls:
        base_url = load_poll_settings().base_url
        urls = [base_url] if base_url else []
    if not urls:
        parser.error("no URL given and READYCHECK_BASE_URL is not set")

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False

    try:
        overrides = _request_overrides(args)
        with ReadyCheck(http_client=create_default_http_client(settings)) as checker:
            if len(urls) == 1:
                outcomes = [checker.poll(urls[0], **overrides)]
            else:
                outcomes = checker.poll_many(urls, **overrides)
    except InvalidConfiguration as exc:
        print(f"readycheck: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_INVALID_CONFIGURATION

    if args.json:
        _print_json(outcomes)
    else:
        _pretty_print(outcomes)

    return EXIT_READY if all(outcome.success for outcome in outcomes) else EXIT_NOT_READY


if __name__ == "__main__":
    raise SystemExit(main())
