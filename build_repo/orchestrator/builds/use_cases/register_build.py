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

"""Use cases that create builds and attach metadata to them.

These apply no lifecycle guard: refs and extra ids may be attached to a
build in any state.
"""

import logging

from build_repo.core.builds.entities import Build, BuildRef
from build_repo.core.builds.repositories import Store

from ..commands import AddExtraIdsCommand, NewBuildCommand, NewBuildRefCommand
from .base import load_build

logger = logging.getLogger(__name__)


class NewBuildUseCase:
    """Use case for registering a freshly uploaded build."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: NewBuildCommand) -> Build:
        """Insert a build in UPLOADING / UNPUBLISHED state.

        Raises:
            StoreFaultError: On store failure.
        """
        with self._store.transaction() as uow:
            build = uow.builds.add(Build(repo=command.repo))
            uow.commit()

        logger.info("Created build %d in repo %s", build.id, command.repo)
        return build


class NewBuildRefUseCase:
    """Use case for registering a ref uploaded as part of a build."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: NewBuildRefCommand) -> BuildRef:
        """Insert a ref for an existing build.

        Raises:
            BuildNotFoundError: If the build does not exist.
            StoreFaultError: On store failure.
        """
        with self._store.transaction() as uow:
            load_build(uow, command.build_id)
            build_ref = uow.build_refs.add(
                BuildRef(
                    build_id=command.build_id,
                    ref_name=command.ref_name,
                    commit=command.commit,
                )
            )
            uow.commit()

        logger.info(
            "Added ref %s to build %d", command.ref_name, command.build_id
        )
        return build_ref


class AddExtraIdsUseCase:
    """Use case for merging additional app ids into a build."""

    def __init__(self, store: Store) -> None:
        self._store = store

    def execute(self, command: AddExtraIdsCommand) -> Build:
        """Merge ids into the build's extra ids.

        Ids already present are skipped; new ids keep their first-seen
        order, so repeating the command is harmless.

        Raises:
            BuildNotFoundError: If the build does not exist.
            StoreFaultError: On store failure.
        """
        with self._store.transaction() as uow:
            build = load_build(uow, command.build_id, for_update=True)
            build.add_extra_ids(command.ids)
            build = uow.builds.save(build)
            uow.commit()

        logger.debug("Build %d extra ids: %s", command.build_id, build.extra_ids)
        return build
