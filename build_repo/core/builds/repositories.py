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

"""Repository port interfaces (Protocols) for the Build domain.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
All repositories of one UnitOfWork share a single store transaction.
"""

from types import TracebackType
from typing import List, Optional, Protocol, Type

from .entities import Build, BuildRef, Job


class BuildRepository(Protocol):
    """Repository port for Build aggregate persistence."""

    def add(self, build: Build) -> Build:
        """Insert a new build.

        Args:
            build: Build entity without an id.

        Returns:
            The build with its store generated id.
        """
        ...

    def get(self, build_id: int, for_update: bool = False) -> Optional[Build]:
        """Retrieve a build by its identifier.

        Args:
            build_id: Unique build identifier.
            for_update: Lock the row until the transaction ends.

        Returns:
            Build entity if found, None otherwise.
        """
        ...

    def save(self, build: Build) -> Build:
        """Write back a modified build.

        Args:
            build: Previously loaded build entity.

        Returns:
            The build as stored.
        """
        ...

    def list_not_purged(self) -> List[Build]:
        """Retrieve all builds whose repo state is not PURGED, by id."""
        ...


class BuildRefRepository(Protocol):
    """Repository port for BuildRef persistence."""

    def add(self, build_ref: BuildRef) -> BuildRef:
        """Insert a new build ref and return it with its id."""
        ...

    def get(self, build_id: int, ref_id: int) -> Optional[BuildRef]:
        """Retrieve a ref of the given build.

        Args:
            build_id: Parent build identifier.
            ref_id: Ref identifier.

        Returns:
            BuildRef if found, None otherwise.
        """
        ...

    def find_all_by_build(self, build_id: int) -> List[BuildRef]:
        """Retrieve all refs of a build (may be empty), by id."""
        ...


class JobRepository(Protocol):
    """Repository port for Job persistence."""

    def add(self, job: Job) -> Job:
        """Insert a new job.

        Args:
            job: Job entity without an id.

        Returns:
            The job with its store generated id.
        """
        ...

    def get(self, job_id: int) -> Optional[Job]:
        """Retrieve a job by its identifier."""
        ...

    def find_commit_job(self, build_id: int) -> Optional[Job]:
        """Retrieve the job referenced by the build's commit_job_id."""
        ...

    def find_publish_job(self, build_id: int) -> Optional[Job]:
        """Retrieve the job referenced by the build's publish_job_id."""
        ...

    def list_pending(self) -> List[Job]:
        """Retrieve jobs with status up to STARTED, in creation order."""
        ...


class UnitOfWork(Protocol):
    """One atomic, isolated store transaction.

    Leaving the context without calling commit() rolls back every write
    made through its repositories.

    Raises:
        StoreFaultError: On any underlying store failure.
    """

    builds: BuildRepository
    build_refs: BuildRefRepository
    jobs: JobRepository

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> Optional[bool]:
        ...


class Store(Protocol):
    """Handle on the persistent store, shared by all use cases."""

    def transaction(self) -> UnitOfWork:
        """Open a new unit of work."""
        ...
