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

"""Check-run output and review decision built from an ``SlaResult``."""

from __future__ import annotations

from datetime import datetime, timedelta

from shared.common import utc_now
from shared.templates import render_markdown_template

from .models import CheckOutput, ReviewDecision, SlaResult, Thresholds

CHECK_RUN_NAME = "Security SLA"
CHECK_RUN_SUCCESS_TITLE = "No security SLA breaches found"
CHECK_RUN_SUCCESS_TEXT = "All security alerts are within the security SLA."
CHECK_RUN_FAILURE_TITLE = "Found {breached} security SLA breaches"
CHECK_RUN_FAILURE_TEXT = "Found {breached} out of {total} security alerts breaching security SLA."

REVIEW_APPROVE = "APPROVE"
REVIEW_REQUEST_CHANGES = "REQUEST_CHANGES"


BREACH_DETAILS_TEMPLATE = """## Security SLA thresholds

| Severity | Max age |
| --- | --- |
{{ threshold_rows }}

## Alerts breaching SLA

| Kind | Severity | Age | Link |
| --- | --- | --- | --- |
{{ breached_rows }}
"""


def format_days(delta: timedelta) -> str:
    days = delta.days
    return f"{days} day" if days == 1 else f"{days} days"


def _breach_details(result: SlaResult, thresholds: Thresholds, now: datetime) -> str:
    threshold_rows = [f"| {name} | {format_days(limit)} |" for name, limit in thresholds.as_dict().items()]
    breached_rows = [
        f"| {a.kind} | {a.severity or 'unknown'} | {format_days(a.age(now))} | {a.link} |"
        for a in result.breached
    ]
    return render_markdown_template(
        BREACH_DETAILS_TEMPLATE,
        {"threshold_rows": threshold_rows, "breached_rows": breached_rows},
    )


def build_check_output(
    result: SlaResult,
    thresholds: Thresholds,
    *,
    now: datetime | None = None,
) -> CheckOutput:
    if result.passed:
        return CheckOutput(
            conclusion=result.conclusion,
            title=CHECK_RUN_SUCCESS_TITLE,
            summary=CHECK_RUN_SUCCESS_TEXT,
        )

    breached, total = len(result.breached), len(result.alerts)
    return CheckOutput(
        conclusion=result.conclusion,
        title=CHECK_RUN_FAILURE_TITLE.format(breached=breached),
        summary=CHECK_RUN_FAILURE_TEXT.format(breached=breached, total=total),
        text=_breach_details(result, thresholds, now or utc_now()),
    )


def build_review_decision(output: CheckOutput) -> ReviewDecision:
    """Approve a clean pull request, request changes when any alert breaches SLA."""
    event = REVIEW_APPROVE if output.conclusion == "success" else REVIEW_REQUEST_CHANGES
    return ReviewDecision(event=event, body=f"**{output.title}**\n\n{output.summary}")
