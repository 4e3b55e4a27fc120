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

"""Build state transition command DTOs."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StartCommitJobCommand:
    """Command to start verifying and committing an uploaded build.

    Attributes:
        build_id: Build to commit.
        endoflife: Optional end-of-life message for the committed refs.
        endoflife_rebase: Optional end-of-life rebase target.
        token_type: Optional token type for the commit metadata.
    """

    build_id: int
    endoflife: Optional[str] = None
    endoflife_rebase: Optional[str] = None
    token_type: Optional[int] = None


@dataclass(frozen=True)
class StartPublishJobCommand:
    """Command to start publishing a committed build.

    Attributes:
        build_id: Build to publish.
        repo: Repository to publish into.
    """

    build_id: int
    repo: str


@dataclass(frozen=True)
class InitPurgeCommand:
    """Command to mark a build as being purged."""

    build_id: int


@dataclass(frozen=True)
class FinishPurgeCommand:
    """Command to complete a purge.

    Attributes:
        build_id: Build being purged.
        error: Failure reported by the purger, None on success.
    """

    build_id: int
    error: Optional[str] = None
