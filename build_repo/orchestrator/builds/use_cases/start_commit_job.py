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

"""StartCommitJob use case implementation."""

import logging

from build_repo.core.builds.entities import CommitJobPayload, Job, create_job
from build_repo.core.builds.exceptions import WrongRepoStateError
from build_repo.core.builds.repositories import Store
from build_repo.core.builds.value_objects import JobKind

from ..commands import StartCommitJobCommand
from .base import load_build

logger = logging.getLogger(__name__)


class StartCommitJobUseCase:
    """Use case for starting the commit job of an uploaded build.

    Guarantees:
    - Guard: the build must be UPLOADING
    - Atomicity: the commit job and the build update are written together
    - Isolation: the build row is locked, so concurrent callers serialize
      and the loser sees VERIFYING

    Attributes:
        store: Store handle used to open the transaction.
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: StartCommitJobCommand) -> Job:
        """Create a commit job and move the build to VERIFYING.

        Args:
            command: StartCommitJob command.

        Returns:
            The created commit job.

        Raises:
            BuildNotFoundError: If the build does not exist.
            WrongRepoStateError: If the build is not UPLOADING.
            StoreFaultError: On store failure.
        """
        with self._store.transaction() as uow:
            build = load_build(uow, command.build_id, for_update=True)
            try:
                build.check_can_commit()
            except WrongRepoStateError as exc:
                logger.warning(
                    "Rejected commit of build %d: %s", command.build_id, exc.message
                )
                raise

            job = uow.jobs.add(self._build_job(command))
            build.start_commit(job.id)
            uow.builds.save(build)
            uow.commit()

        logger.info("Started commit job %d for build %d", job.id, command.build_id)
        return job

    def _build_job(self, command: StartCommitJobCommand) -> Job:
        """Build the pending commit job for a request."""
        return create_job(
            JobKind.COMMIT,
            CommitJobPayload(
                build=command.build_id,
                endoflife=command.endoflife,
                endoflife_rebase=command.endoflife_rebase,
                token_type=command.token_type,
            ),
        )
