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

"""Open security alert collection – reads the first page of open alerts from
the code scanning, Dependabot and secret scanning REST endpoints and
normalises them into ``Alert`` objects.

A source whose feature is disabled on the repository answers with an error
mentioning "disabled"; that source is logged and counted as zero alerts.
Any other API error propagates.
"""

from __future__ import annotations

from typing import Any, Callable

from github import Github, GithubException

from shared.common import parse_iso_datetime, vprint, warn

from .models import Alert, AlertKind

ALERTS_PER_PAGE = 100

SECRET_SCANNING_SEVERITY = "critical"


def alert_from_code_scanning(raw: dict[str, Any]) -> Alert:
    rule = raw.get("rule") or {}
    return Alert(
        kind=AlertKind.CODE_SCANNING,
        severity=str(rule.get("severity") or ""),
        link=str(raw.get("html_url") or ""),
        created_at=parse_iso_datetime(raw.get("created_at")),
    )


def alert_from_dependabot(raw: dict[str, Any]) -> Alert:
    advisory = raw.get("security_advisory") or {}
    return Alert(
        kind=AlertKind.DEPENDABOT,
        severity=str(advisory.get("severity") or ""),
        link=str(raw.get("html_url") or ""),
        created_at=parse_iso_datetime(raw.get("created_at")),
    )


def alert_from_secret_scanning(raw: dict[str, Any]) -> Alert:
    # Secret scanning alerts carry no severity; a leaked secret is always critical.
    return Alert(
        kind=AlertKind.SECRET_SCANNING,
        severity=SECRET_SCANNING_SEVERITY,
        link=str(raw.get("html_url") or ""),
        created_at=parse_iso_datetime(raw.get("created_at")),
    )


# (endpoint suffix, converter) in fetch order.
ALERT_SOURCES: list[tuple[str, Callable[[dict[str, Any]], Alert]]] = [
    ("code-scanning/alerts", alert_from_code_scanning),
    ("dependabot/alerts", alert_from_dependabot),
    ("secret-scanning/alerts", alert_from_secret_scanning),
]


def _error_message(exc: GithubException) -> str:
    data = exc.data
    if isinstance(data, dict):
        return str(data.get("message") or "")
    return str(data or "")


def is_disabled_error(exc: GithubException) -> bool:
    """Return True (and log a warning) when *exc* reports a disabled security feature."""
    message = _error_message(exc)
    if "disabled" in message:
        warn(f"Security feature disabled: {message}")
        return True
    return False


def list_open_alerts(gh: Github, repo_full: str, endpoint: str) -> list[dict[str, Any]]:
    """GET one page of open alerts from ``repos/{repo_full}/{endpoint}``."""
    _, data = gh.requester.requestJsonAndCheck(
        "GET",
        f"/repos/{repo_full}/{endpoint}",
        parameters={"state": "open", "per_page": ALERTS_PER_PAGE},
    )
    return list(data or [])


def fetch_repo_alerts(gh: Github, repo_full: str) -> list[Alert]:
    alerts: list[Alert] = []
    for endpoint, convert in ALERT_SOURCES:
        try:
            items = list_open_alerts(gh, repo_full, endpoint)
        except GithubException as exc:
            if not is_disabled_error(exc):
                raise
            items = []
        vprint(f"Fetched {len(items)} open alert(s) from {endpoint}")
        alerts.extend(convert(item) for item in items)
    return alerts
