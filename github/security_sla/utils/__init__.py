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


"""Security SLA check utilities.

Modules
-------
models          Core dataclass definitions (Alert, Thresholds, SlaResult, CheckOutput).
sla             SLA breach evaluation over a list of alerts.
alert_fetcher   Open alert collection from code scanning, Dependabot and secret scanning.
event           Workflow event payload loading and pull-request resolution.
check_output    Check-run title / summary / text and review decision construction.
"""
