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

"""Read-only lookup and list use cases."""

from typing import List, Optional

from build_repo.core.builds.entities import Build, BuildRef, Job
from build_repo.core.builds.exceptions import (
    BadRequestError,
    BuildRefNotFoundError,
    JobNotFoundError,
)
from build_repo.core.builds.repositories import Store

from ..commands import (
    ListBuildsCommand,
    ListJobsCommand,
    LookupBuildCommand,
    LookupBuildRefCommand,
    LookupBuildRefsCommand,
    LookupCommitJobCommand,
    LookupJobCommand,
    LookupPublishJobCommand,
)
from .base import load_build


def _trim_log(job: Job, log_offset: Optional[int]) -> Job:
    """Apply a caller supplied log offset to a loaded job."""
    try:
        return job.with_log_offset(log_offset)
    except ValueError as exc:
        raise BadRequestError(str(exc)) from exc


class LookupBuildUseCase:
    """Use case for fetching a single build."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: LookupBuildCommand) -> Build:
        """Return the build.

        Raises:
            BuildNotFoundError: If the build does not exist.
        """
        with self._store.transaction() as uow:
            return load_build(uow, command.build_id)


class LookupBuildRefUseCase:
    """Use case for fetching a single ref of a build."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: LookupBuildRefCommand) -> BuildRef:
        """Return the ref.

        Raises:
            BuildRefNotFoundError: If the build has no such ref.
        """
        with self._store.transaction() as uow:
            build_ref = uow.build_refs.get(command.build_id, command.ref_id)
        if build_ref is None:
            raise BuildRefNotFoundError(command.build_id, command.ref_id)
        return build_ref


class LookupBuildRefsUseCase:
    """Use case for fetching all refs of a build."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: LookupBuildRefsCommand) -> List[BuildRef]:
        with self._store.transaction() as uow:
            return uow.build_refs.find_all_by_build(command.build_id)


class LookupJobUseCase:
    """Use case for fetching a job by id."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: LookupJobCommand) -> Job:
        """Return the job, its log trimmed to the requested offset.

        Raises:
            JobNotFoundError: If the job does not exist.
            BadRequestError: If the log offset is negative.
        """
        with self._store.transaction() as uow:
            job = uow.jobs.get(command.job_id)
        if job is None:
            raise JobNotFoundError(job_id=command.job_id)
        return _trim_log(job, command.log_offset)


class LookupCommitJobUseCase:
    """Use case for fetching the active commit job of a build."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: LookupCommitJobCommand) -> Job:
        """Return the commit job, its log trimmed to the requested offset.

        Raises:
            JobNotFoundError: If the build has no commit job.
            BadRequestError: If the log offset is negative.
        """
        with self._store.transaction() as uow:
            job = uow.jobs.find_commit_job(command.build_id)
        if job is None:
            raise JobNotFoundError(build_id=command.build_id, kind="commit")
        return _trim_log(job, command.log_offset)


class LookupPublishJobUseCase:
    """Use case for fetching the active publish job of a build."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: LookupPublishJobCommand) -> Job:
        """Return the publish job, its log trimmed to the requested offset.

        Raises:
            JobNotFoundError: If the build has no publish job.
            BadRequestError: If the log offset is negative.
        """
        with self._store.transaction() as uow:
            job = uow.jobs.find_publish_job(command.build_id)
        if job is None:
            raise JobNotFoundError(build_id=command.build_id, kind="publish")
        return _trim_log(job, command.log_offset)


class ListBuildsUseCase:
    """Use case for listing builds that have not been purged."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: ListBuildsCommand) -> List[Build]:
        with self._store.transaction() as uow:
            return uow.builds.list_not_purged()


class ListJobsUseCase:
    """Use case for listing the pending job queue, oldest first."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: ListJobsCommand) -> List[Job]:
        with self._store.transaction() as uow:
            return uow.jobs.list_pending()
