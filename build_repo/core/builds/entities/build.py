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

"""Build aggregate root entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..exceptions import (
    BadRequestError,
    WrongPublishedStateError,
    WrongRepoStateError,
)
from ..value_objects import (
    PublishedState,
    PublishedStateKind,
    RepoState,
    RepoStateKind,
)


@dataclass
class Build:
    """Build aggregate root.

    Tracks the repository and publication automatons of an uploaded build
    together with the currently active job of each kind. Guard methods
    raise before any attribute is touched, so a rejected transition leaves
    the entity unchanged.

    Attributes:
        id: Store generated identifier, None until persisted.
        repo: Name of the repository the build was uploaded to.
        repo_state: Repository automaton state.
        published_state: Publication automaton state.
        extra_ids: Additional app ids, ordered and without duplicates.
        commit_job_id: Currently active commit job.
        publish_job_id: Currently active publish job.
        created_at: Build creation timestamp.
    """

    repo: str
    id: Optional[int] = None
    repo_state: RepoState = field(default_factory=RepoState.uploading)
    published_state: PublishedState = field(default_factory=PublishedState.unpublished)
    extra_ids: List[str] = field(default_factory=list)
    commit_job_id: Optional[int] = None
    publish_job_id: Optional[int] = None
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.created_at is None:
            self.created_at = datetime.now(timezone.utc)

    def check_can_commit(self) -> None:
        """Verify the build can start a commit job.

        Raises:
            WrongRepoStateError: If repo state is not UPLOADING.
        """
        state = self.repo_state
        if state.kind == RepoStateKind.UPLOADING:
            return
        if state.kind == RepoStateKind.VERIFYING:
            message = "Build is currently being committed"
        elif state.kind == RepoStateKind.READY:
            message = "Build is already committed"
        elif state.kind == RepoStateKind.FAILED:
            message = f"Commit already failed: {state.reason}"
        else:
            message = "Build has been purged"
        raise WrongRepoStateError(
            message,
            expected=RepoStateKind.UPLOADING.value,
            actual=state.name,
        )

    def check_can_publish(self) -> None:
        """Verify the build can start a publish job.

        The published state is checked before the repo state.

        Raises:
            WrongPublishedStateError: If published state is not UNPUBLISHED.
            WrongRepoStateError: If repo state is not READY.
        """
        published = self.published_state
        if published.kind != PublishedStateKind.UNPUBLISHED:
            if published.kind == PublishedStateKind.PUBLISHING:
                message = "Build is currently being published"
            elif published.kind == PublishedStateKind.PUBLISHED:
                message = "Build has already been published"
            else:
                message = f"Previous publish failed: {published.reason}"
            raise WrongPublishedStateError(
                message,
                expected=PublishedStateKind.UNPUBLISHED.value,
                actual=published.name,
            )

        state = self.repo_state
        if state.kind == RepoStateKind.READY:
            return
        if state.kind in (RepoStateKind.UPLOADING, RepoStateKind.VERIFYING):
            message = "Build is not committed"
        elif state.kind == RepoStateKind.FAILED:
            message = f"Build failed: {state.reason}"
        else:
            message = "Build has been purged"
        raise WrongRepoStateError(
            message,
            expected=RepoStateKind.READY.value,
            actual=state.name,
        )

    def start_commit(self, job_id: int) -> None:
        """Record a new commit job and move to VERIFYING.

        Args:
            job_id: Identifier of the freshly created commit job.

        Raises:
            WrongRepoStateError: If repo state is not UPLOADING.
        """
        self.check_can_commit()
        self.commit_job_id = job_id
        self.repo_state = RepoState.verifying()

    def start_publish(self, job_id: int) -> None:
        """Record a new publish job and move to PUBLISHING.

        Args:
            job_id: Identifier of the freshly created publish job.

        Raises:
            WrongPublishedStateError: If published state is not UNPUBLISHED.
            WrongRepoStateError: If repo state is not READY.
        """
        self.check_can_publish()
        self.publish_job_id = job_id
        self.published_state = PublishedState.publishing()

    def is_in_use(self) -> bool:
        """Check if a job is currently working on the build repo."""
        return (
            self.repo_state.same_state_as(RepoState.verifying())
            or self.repo_state.same_state_as(RepoState.purging())
            or self.published_state.same_state_as(PublishedState.publishing())
        )

    def init_purge(self) -> None:
        """Move the build to PURGING.

        Raises:
            BadRequestError: If the build is being verified, purged or published.
        """
        if self.is_in_use():
            raise BadRequestError("Can't prune build while in use")
        self.repo_state = RepoState.purging()

    def finish_purge(self, error: Optional[str] = None) -> None:
        """Complete a purge started by init_purge.

        Args:
            error: Failure description reported by the purger, if any.

        Raises:
            BadRequestError: If the build is not PURGING.
        """
        if not self.repo_state.same_state_as(RepoState.purging()):
            raise BadRequestError("Unexpected repo state, was not purging")
        if error is None:
            self.repo_state = RepoState.purged()
        else:
            self.repo_state = RepoState.failed(f"Failed to Purge build: {error}")

    def add_extra_ids(self, ids: Iterable[str]) -> None:
        """Append ids not already present, keeping first-seen order."""
        for extra_id in ids:
            if extra_id not in self.extra_ids:
                self.extra_ids.append(extra_id)

    def is_purged(self) -> bool:
        """Check if the build reached the PURGED state."""
        return self.repo_state.kind == RepoStateKind.PURGED


@dataclass
class BuildRef:
    """Ref uploaded as part of a build.

    Attributes:
        build_id: Parent build identifier.
        ref_name: Full ref name, e.g. ``app/org.example.App/x86_64/stable``.
        commit: Commit checksum the ref points to.
        id: Store generated identifier, None until persisted.
    """

    build_id: int
    ref_name: str
    commit: str
    id: Optional[int] = None
