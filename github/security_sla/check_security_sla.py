#!/usr/bin/env python3
#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Security SLA check for pull requests.

Reads the repository's open code scanning, Dependabot and secret scanning
alerts and reports a "Security SLA" check run on the pull request head commit:
success when no alert is older than the configured thresholds, failure
otherwise. With ``--review`` the same decision is also submitted as a pull
request review (approve / request changes).

Triggered by ``pull_request`` or ``pull_request_target`` events.

Requirements:
- token with ``checks:write`` and ``security-events:read``
  (plus ``pull-requests:write`` for ``--review``)

Usage:
    python3 -m security_sla.check_security_sla --critical-threshold 7 --high-threshold 30 \\
        --medium-threshold 90 --low-threshold 180

Draft / debug (no writes):
    python3 -m security_sla.check_security_sla --dry-run --verbose
"""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import asdict

from github import Auth, Github

from shared.common import parse_runner_debug, set_verbose_enabled, utc_now, vprint
from shared.github_checks import check_run_output, create_check_run, create_pull_request_review
from security_sla.utils.alert_fetcher import fetch_repo_alerts
from security_sla.utils.check_output import CHECK_RUN_NAME, build_check_output, build_review_decision, format_days
from security_sla.utils.event import load_event, resolve_pull_request
from security_sla.utils.models import SlaResult, Thresholds
from security_sla.utils.sla import evaluate_alerts

DEFAULT_CRITICAL_DAYS = 7
DEFAULT_HIGH_DAYS = 30
DEFAULT_MEDIUM_DAYS = 90
DEFAULT_LOW_DAYS = 180


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer number of days, got {raw!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError(f"threshold must not be negative, got {value}")
    return value


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Report a Security SLA check run for the open security alerts of a repository",
    )
    p.add_argument(
        "--token",
        default=os.environ.get("GITHUB_TOKEN"),
        help="GitHub token (default: $GITHUB_TOKEN)",
    )
    p.add_argument(
        "--critical-threshold",
        type=_non_negative_int,
        default=os.environ.get("SLA_CRITICAL_DAYS") or str(DEFAULT_CRITICAL_DAYS),
        help=f"Max age in days for critical alerts (default: $SLA_CRITICAL_DAYS or {DEFAULT_CRITICAL_DAYS})",
    )
    p.add_argument(
        "--high-threshold",
        type=_non_negative_int,
        default=os.environ.get("SLA_HIGH_DAYS") or str(DEFAULT_HIGH_DAYS),
        help=f"Max age in days for high alerts (default: $SLA_HIGH_DAYS or {DEFAULT_HIGH_DAYS})",
    )
    p.add_argument(
        "--medium-threshold",
        type=_non_negative_int,
        default=os.environ.get("SLA_MEDIUM_DAYS") or str(DEFAULT_MEDIUM_DAYS),
        help=f"Max age in days for medium alerts (default: $SLA_MEDIUM_DAYS or {DEFAULT_MEDIUM_DAYS})",
    )
    p.add_argument(
        "--low-threshold",
        type=_non_negative_int,
        default=os.environ.get("SLA_LOW_DAYS") or str(DEFAULT_LOW_DAYS),
        help=f"Max age in days for low alerts (default: $SLA_LOW_DAYS or {DEFAULT_LOW_DAYS})",
    )
    p.add_argument(
        "--repo",
        default=os.environ.get("GITHUB_REPOSITORY"),
        help="Repository in owner/repo format (default: $GITHUB_REPOSITORY)",
    )
    p.add_argument(
        "--event-name",
        default=os.environ.get("GITHUB_EVENT_NAME"),
        help="Triggering event name (default: $GITHUB_EVENT_NAME)",
    )
    p.add_argument(
        "--event-path",
        default=os.environ.get("GITHUB_EVENT_PATH"),
        help="Path to the event payload JSON (default: $GITHUB_EVENT_PATH)",
    )
    p.add_argument(
        "--review",
        action="store_true",
        help="Also submit a pull request review (approve / request changes)",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Do not create the check run or review; print the payloads instead",
    )
    p.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logs (also enabled when RUNNER_DEBUG=1)",
    )
    return p.parse_args(argv)


def run(args: argparse.Namespace) -> SlaResult:
    if not args.token:
        raise SystemExit("ERROR: no GitHub token provided. Set GITHUB_TOKEN or pass --token.")
    if not args.repo:
        raise SystemExit("ERROR: no repository provided. Set GITHUB_REPOSITORY or pass --repo.")

    started_at = utc_now()

    try:
        thresholds = Thresholds.from_days(
            args.critical_threshold,
            args.high_threshold,
            args.medium_threshold,
            args.low_threshold,
        )
    except ValueError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc
    vprint(
        "Configuration: "
        + ", ".join(f"{name}={format_days(limit)}" for name, limit in thresholds.as_dict().items())
    )

    pr = resolve_pull_request(args.event_name, load_event(args.event_path))
    vprint(f"Pull request #{pr.number} head={pr.head_sha}")

    gh = Github(auth=Auth.Token(args.token))

    alerts = fetch_repo_alerts(gh, args.repo)
    now = utc_now()
    result = evaluate_alerts(alerts, thresholds, now=now)
    print(f"Alerts found: total={len(result.alerts)} breached={len(result.breached)}")

    output = build_check_output(result, thresholds, now=now)
    decision = build_review_decision(output) if args.review else None

    if args.dry_run:
        payload = {
            "check_run": {
                "name": CHECK_RUN_NAME,
                "head_sha": pr.head_sha,
                "conclusion": output.conclusion,
                "output": check_run_output(output.title, output.summary, output.text),
            },
        }
        if decision:
            payload["review"] = {"pull_request": pr.number, **asdict(decision)}
        print("DRY-RUN: would publish:")
        print(json.dumps(payload, indent=2))
        return result

    repo = gh.get_repo(args.repo)
    create_check_run(
        repo,
        name=CHECK_RUN_NAME,
        head_sha=pr.head_sha,
        conclusion=output.conclusion,
        output=check_run_output(output.title, output.summary, output.text),
        started_at=started_at,
        completed_at=utc_now(),
    )
    if decision:
        create_pull_request_review(repo, pr.number, event=decision.event, body=decision.body)

    return result


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    set_verbose_enabled(bool(args.verbose) or parse_runner_debug())
    run(args)


if __name__ == "__main__":
    main()
