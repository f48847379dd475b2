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

"""GitHub Checks / Pull Request review operations via PyGithub – publish a
completed check run on a commit and submit a review on a pull request.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from github.CheckRun import CheckRun
from github.PullRequestReview import PullRequestReview
from github.Repository import Repository


def check_run_output(title: str, summary: str, text: str = "") -> dict[str, str]:
    output = {"title": title, "summary": summary}
    if text:
        output["text"] = text
    return output


def create_check_run(
    repo: Repository,
    *,
    name: str,
    head_sha: str,
    conclusion: str,
    output: dict[str, Any],
    started_at: datetime,
    completed_at: datetime,
) -> CheckRun:
    check_run = repo.create_check_run(
        name=name,
        head_sha=head_sha,
        status="completed",
        started_at=started_at,
        completed_at=completed_at,
        conclusion=conclusion,
        output=output,
    )
    print(f"Created check run {name!r} on {head_sha[:12]} (conclusion={conclusion})")
    return check_run


def create_pull_request_review(
    repo: Repository,
    number: int,
    *,
    event: str,
    body: str,
) -> PullRequestReview:
    review = repo.get_pull(number).create_review(body=body, event=event)
    print(f"Submitted {event} review on pull request #{number}")
    return review
