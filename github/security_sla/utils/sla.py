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

"""SLA breach evaluation – decides which open alerts are older than the
configured age thresholds.
"""

from __future__ import annotations

from datetime import datetime

from shared.common import utc_now

from .models import Alert, SlaResult, Thresholds


def is_breached(alert: Alert, thresholds: Thresholds, now: datetime) -> bool:
    age = alert.age(now)
    # NOTE: the alert's severity does not pick its tier; exceeding any of the
    # four thresholds is a breach, so the smallest threshold decides.
    return any(age > limit for limit in thresholds.as_dict().values())


def filter_breached_alerts(
    alerts: list[Alert],
    thresholds: Thresholds,
    *,
    now: datetime | None = None,
) -> list[Alert]:
    """Return the alerts (in input order) whose age exceeds a threshold."""
    now = now or utc_now()
    return [a for a in alerts if is_breached(a, thresholds, now)]


def evaluate_alerts(
    alerts: list[Alert],
    thresholds: Thresholds,
    *,
    now: datetime | None = None,
) -> SlaResult:
    if not alerts:
        return SlaResult(alerts=[])
    return SlaResult(alerts=list(alerts), breached=filter_breached_alerts(alerts, thresholds, now=now))
