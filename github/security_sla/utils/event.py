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

"""Workflow event payload loading and pull-request resolution."""

from __future__ import annotations

import json
import os
from typing import Any

from .models import PullRequestRef

PULL_REQUEST_EVENTS = {"pull_request", "pull_request_target"}


def load_event(path: str | None) -> dict[str, Any]:
    if not path:
        raise SystemExit("ERROR: event payload path not set. Pass --event-path or set GITHUB_EVENT_PATH.")
    if not os.path.exists(path):
        raise SystemExit(f"ERROR: event payload not found: {path}")

    with open(path, "r", encoding="utf-8") as fh:
        try:
            event = json.load(fh)
        except json.JSONDecodeError as exc:
            raise SystemExit(f"ERROR: failed to parse event payload {path}: {exc}") from exc

    if not isinstance(event, dict):
        raise SystemExit(f"ERROR: event payload is not a JSON object: {path}")
    return event


def resolve_pull_request(event_name: str | None, event: dict[str, Any]) -> PullRequestRef:
    """Return the pull request (number + head SHA) the check run belongs to.

    Only ``pull_request`` and ``pull_request_target`` events carry a head
    commit to attach the check run to; anything else fails the run.
    """
    if event_name not in PULL_REQUEST_EVENTS:
        raise SystemExit(f"ERROR: unexpected event type: {event_name}")

    pr = event.get("pull_request") or {}
    head_sha = str((pr.get("head") or {}).get("sha") or "")
    if not head_sha:
        raise SystemExit("ERROR: pull_request.head.sha missing from event payload")

    try:
        number = int(pr.get("number") or event.get("number"))
    except (TypeError, ValueError) as exc:
        raise SystemExit("ERROR: pull request number missing from event payload") from exc

    return PullRequestRef(number=number, head_sha=head_sha)
