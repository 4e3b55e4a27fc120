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

"""Job entity and kind-specific job payloads."""

import json
from dataclasses import asdict, dataclass, replace
from datetime import datetime
from typing import Optional, Union

from ..value_objects import JobKind, JobStatus


@dataclass(frozen=True)
class CommitJobPayload:
    """Contents of a commit job.

    Attributes:
        build: Build to commit.
        endoflife: End-of-life message applied to the committed refs.
        endoflife_rebase: Ref the committed refs are rebased to at end of life.
        token_type: Token type stamped into the commit metadata.
    """

    build: int
    endoflife: Optional[str] = None
    endoflife_rebase: Optional[str] = None
    token_type: Optional[int] = None

    def to_json(self) -> str:
        return json.dumps(asdict(self))


@dataclass(frozen=True)
class PublishJobPayload:
    """Contents of a publish job."""

    build: int

    def to_json(self) -> str:
        return json.dumps(asdict(self))


JobPayload = Union[CommitJobPayload, PublishJobPayload]

_PAYLOAD_TYPES = {
    JobKind.COMMIT: CommitJobPayload,
    JobKind.PUBLISH: PublishJobPayload,
}


@dataclass
class Job:
    """Asynchronous work item.

    Jobs are created by build transitions and executed by an external
    worker, which alone advances the status and appends to the log.

    Attributes:
        kind: Kind of work.
        contents: JSON serialized kind-specific payload.
        id: Store generated identifier, None until persisted.
        status: Lifecycle status.
        start_after: Earliest time the worker may start the job.
        repo: Target repository name, used by publish jobs.
        results: JSON results written by the worker.
        log: Worker output.
    """

    kind: JobKind
    contents: str
    id: Optional[int] = None
    status: JobStatus = JobStatus.NEW
    start_after: Optional[datetime] = None
    repo: Optional[str] = None
    results: Optional[str] = None
    log: str = ""

    def payload(self) -> JobPayload:
        """Parse contents into the payload type of this job's kind."""
        return _PAYLOAD_TYPES[self.kind](**json.loads(self.contents))

    def with_log_offset(self, log_offset: Optional[int]) -> "Job":
        """Return a copy holding only the log suffix starting at log_offset.

        An offset past the end of the log yields an empty log, no offset
        keeps the full log.

        Raises:
            ValueError: If log_offset is negative.
        """
        if log_offset is None:
            return self
        if log_offset < 0:
            raise ValueError(f"Log offset cannot be negative, got {log_offset}")
        return replace(self, log=self.log[log_offset:])

    def is_pending(self) -> bool:
        """Check if job is still waiting for or held by the worker."""
        return self.status.is_pending()


def create_job(
    kind: JobKind,
    contents: JobPayload,
    start_after: Optional[datetime] = None,
    repo: Optional[str] = None,
) -> Job:
    """Assemble a new pending job.

    Args:
        kind: Kind of work.
        contents: Payload matching kind.
        start_after: Optional delayed start.
        repo: Optional target repository name.

    Returns:
        Job in NEW status with an empty log.

    Raises:
        TypeError: If the payload does not match the job kind.
    """
    if not isinstance(contents, _PAYLOAD_TYPES[kind]):
        raise TypeError(
            f"{type(contents).__name__} is not a valid payload for {kind.name} jobs"
        )
    return Job(
        kind=kind,
        contents=contents.to_json(),
        start_after=start_after,
        repo=repo,
    )
