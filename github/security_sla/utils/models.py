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

"""Security SLA data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import StrEnum


class AlertKind(StrEnum):
    """Alert source, named after the GitHub security feature that raised it."""
    CODE_SCANNING = "CodeScanning"
    DEPENDABOT = "Dependabot"
    SECRET_SCANNING = "SecretScanning"


@dataclass(frozen=True)
class Alert:
    kind: AlertKind
    severity: str
    link: str
    created_at: datetime

    def age(self, now: datetime) -> timedelta:
        return now - self.created_at


@dataclass(frozen=True)
class Thresholds:
    """Maximum acceptable alert age per severity tier."""
    critical: timedelta
    high: timedelta
    medium: timedelta
    low: timedelta

    @classmethod
    def from_days(cls, critical: int, high: int, medium: int, low: int) -> Thresholds:
        days = {"critical": critical, "high": high, "medium": medium, "low": low}
        for name, value in days.items():
            if value < 0:
                raise ValueError(f"{name} threshold must be a non-negative number of days, got {value}")
        return cls(**{name: timedelta(days=value) for name, value in days.items()})

    def as_dict(self) -> dict[str, timedelta]:
        return {
            "critical": self.critical,
            "high": self.high,
            "medium": self.medium,
            "low": self.low,
        }


@dataclass
class SlaResult:
    """Outcome of one evaluation run."""
    alerts: list[Alert]
    breached: list[Alert] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.breached

    @property
    def conclusion(self) -> str:
        return "success" if self.passed else "failure"


@dataclass
class CheckOutput:
    """Check-run payload derived from an ``SlaResult``."""
    conclusion: str
    title: str
    summary: str
    text: str = ""


@dataclass
class ReviewDecision:
    event: str          # "APPROVE" or "REQUEST_CHANGES"
    body: str


@dataclass
class PullRequestRef:
    number: int
    head_sha: str
