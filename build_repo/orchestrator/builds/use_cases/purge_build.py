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

"""Purge use cases.

A purge is split in two: InitPurge marks the build as PURGING before the
repository tooling removes it, FinishPurge records the outcome.
"""

import logging

from build_repo.core.builds.entities import Build
from build_repo.core.builds.exceptions import BadRequestError
from build_repo.core.builds.repositories import Store

from ..commands import FinishPurgeCommand, InitPurgeCommand
from .base import load_build

logger = logging.getLogger(__name__)


class InitPurgeUseCase:
    """Use case for moving a build to PURGING."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: InitPurgeCommand) -> None:
        """Mark the build as PURGING unless a job is working on it.

        Raises:
            BuildNotFoundError: If the build does not exist.
            BadRequestError: If the build is VERIFYING, PURGING or PUBLISHING.
            StoreFaultError: On store failure.
        """
        with self._store.transaction() as uow:
            build = load_build(uow, command.build_id, for_update=True)
            try:
                build.init_purge()
            except BadRequestError as exc:
                logger.warning(
                    "Rejected purge of build %d: %s", command.build_id, exc.message
                )
                raise
            uow.builds.save(build)
            uow.commit()

        logger.info("Purging build %d", command.build_id)


class FinishPurgeUseCase:
    """Use case for recording the outcome of a purge."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: FinishPurgeCommand) -> Build:
        """Move a PURGING build to PURGED, or to FAILED on error.

        Args:
            command: FinishPurge command.

        Returns:
            The updated build.

        Raises:
            BuildNotFoundError: If the build does not exist.
            BadRequestError: If the build is not PURGING.
            StoreFaultError: On store failure.
        """
        with self._store.transaction() as uow:
            build = load_build(uow, command.build_id, for_update=True)
            try:
                build.finish_purge(command.error)
            except BadRequestError as exc:
                logger.warning(
                    "Rejected purge completion of build %d: %s",
                    command.build_id, exc.message,
                )
                raise
            build = uow.builds.save(build)
            uow.commit()

        if command.error is None:
            logger.info("Purged build %d", command.build_id)
        else:
            logger.warning("Purge of build %d failed: %s", command.build_id, command.error)
        return build
