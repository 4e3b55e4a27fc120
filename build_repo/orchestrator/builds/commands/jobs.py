# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
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

"""Job lookup command DTOs.

The optional log_offset trims the returned job log to the suffix starting
at that position, so pollers can fetch only new output.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LookupJobCommand:
    """Command to fetch a job by id."""

    job_id: int
    log_offset: Optional[int] = None


@dataclass(frozen=True)
class LookupCommitJobCommand:
    """Command to fetch the active commit job of a build."""

    build_id: int
    log_offset: Optional[int] = None


@dataclass(frozen=True)
class LookupPublishJobCommand:
    """Command to fetch the active publish job of a build."""

    build_id: int
    log_offset: Optional[int] = None


@dataclass(frozen=True)
class ListJobsCommand:
    """Command to list pending and running jobs in creation order."""
