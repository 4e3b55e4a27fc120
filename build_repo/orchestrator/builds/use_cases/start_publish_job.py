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

"""StartPublishJob use case implementation."""

import logging

from build_repo.core.builds.entities import Job, PublishJobPayload, create_job
from build_repo.core.builds.exceptions import (
    WrongPublishedStateError,
    WrongRepoStateError,
)
from build_repo.core.builds.repositories import Store
from build_repo.core.builds.value_objects import JobKind

from ..commands import StartPublishJobCommand
from .base import load_build

logger = logging.getLogger(__name__)


class StartPublishJobUseCase:
    """Use case for starting the publish job of a committed build.

    The build must be UNPUBLISHED and READY. The publish job and the
    build update are written in one transaction.
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: StartPublishJobCommand) -> Job:
        """Create a publish job and move the build to PUBLISHING.

        Args:
            command: StartPublishJob command.

        Returns:
            The created publish job.

        Raises:
            BuildNotFoundError: If the build does not exist.
            WrongPublishedStateError: If the build is not UNPUBLISHED.
            WrongRepoStateError: If the build is not READY.
            StoreFaultError: On store failure.
        """
        with self._store.transaction() as uow:
            build = load_build(uow, command.build_id, for_update=True)
            try:
                build.check_can_publish()
            except (WrongPublishedStateError, WrongRepoStateError) as exc:
                logger.warning(
                    "Rejected publish of build %d: %s", command.build_id, exc.message
                )
                raise

            job = uow.jobs.add(
                create_job(
                    JobKind.PUBLISH,
                    PublishJobPayload(build=command.build_id),
                    repo=command.repo,
                )
            )
            build.start_publish(job.id)
            uow.builds.save(build)
            uow.commit()

        logger.info(
            "Started publish job %d for build %d to %s",
            job.id, command.build_id, command.repo,
        )
        return job
