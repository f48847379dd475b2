"""Pytest configuration and fixtures."""

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable

import pytest

from security_sla.utils.models import Alert, AlertKind, Thresholds


NOW = datetime(2026, 10, 1, 12, 0, tzinfo=timezone.utc)


def iso(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def thresholds() -> Thresholds:
    """Critical 7d, high 30d, medium 90d, low 180d."""
    return Thresholds.from_days(7, 30, 90, 180)


@pytest.fixture
def make_alert() -> Callable[..., Alert]:
    """Build an alert created *age_days* before ``NOW``."""
    def _make(
        age_days: float,
        *,
        kind: AlertKind = AlertKind.DEPENDABOT,
        severity: str = "high",
        number: int = 1,
    ) -> Alert:
        return Alert(
            kind=kind,
            severity=severity,
            link=f"https://github.com/org/repo/security/alerts/{number}",
            created_at=NOW - timedelta(days=age_days),
        )

    return _make


@pytest.fixture
def pr_event() -> dict[str, Any]:
    return {
        "action": "synchronize",
        "number": 42,
        "pull_request": {
            "number": 42,
            "head": {"sha": "0123456789abcdef0123456789abcdef01234567", "ref": "feature"},
        },
        "repository": {"full_name": "org/repo"},
    }


@pytest.fixture
def event_file(tmp_path: Path, pr_event: dict[str, Any]) -> Path:
    path = tmp_path / "event.json"
    path.write_text(json.dumps(pr_event))
    return path


@pytest.fixture
def raw_alerts() -> dict[str, list[dict[str, Any]]]:
    """REST payloads keyed by endpoint suffix, one alert per source."""
    return {
        "code-scanning/alerts": [
            {
                "number": 3,
                "state": "open",
                "created_at": iso(NOW - timedelta(days=2)),
                "html_url": "https://github.com/org/repo/security/code-scanning/3",
                "rule": {"id": "py/sql-injection", "severity": "error", "security_severity_level": "high"},
            },
        ],
        "dependabot/alerts": [
            {
                "number": 5,
                "state": "open",
                "created_at": iso(NOW - timedelta(days=40)),
                "html_url": "https://github.com/org/repo/security/dependabot/5",
                "security_advisory": {"ghsa_id": "GHSA-xxxx-yyyy-zzzz", "severity": "medium"},
            },
        ],
        "secret-scanning/alerts": [
            {
                "number": 1,
                "state": "open",
                "created_at": iso(NOW - timedelta(days=1)),
                "html_url": "https://github.com/org/repo/security/secret-scanning/1",
                "secret_type": "github_personal_access_token",
            },
        ],
    }
