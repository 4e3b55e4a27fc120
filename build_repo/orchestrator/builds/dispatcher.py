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

"""Command dispatcher for the build lifecycle core.

Every command class maps to exactly one use case, and therefore to exactly
one result type. The dispatcher holds no state besides that registry and
does no locking; concurrent submissions are serialized by the store.
"""

import logging
from typing import Any, Dict, Protocol, Type

from build_repo.core.builds.repositories import Store

from .commands import (
    AddExtraIdsCommand,
    FinishPurgeCommand,
    InitPurgeCommand,
    ListBuildsCommand,
    ListJobsCommand,
    LookupBuildCommand,
    LookupBuildRefCommand,
    LookupBuildRefsCommand,
    LookupCommitJobCommand,
    LookupJobCommand,
    LookupPublishJobCommand,
    NewBuildCommand,
    NewBuildRefCommand,
    StartCommitJobCommand,
    StartPublishJobCommand,
)
from .use_cases import (
    AddExtraIdsUseCase,
    FinishPurgeUseCase,
    InitPurgeUseCase,
    ListBuildsUseCase,
    ListJobsUseCase,
    LookupBuildRefsUseCase,
    LookupBuildRefUseCase,
    LookupBuildUseCase,
    LookupCommitJobUseCase,
    LookupJobUseCase,
    LookupPublishJobUseCase,
    NewBuildRefUseCase,
    NewBuildUseCase,
    StartCommitJobUseCase,
    StartPublishJobUseCase,
)

logger = logging.getLogger(__name__)


class UseCase(Protocol):
    """Anything that executes one command type."""

    def execute(self, command: Any) -> Any:
        ...


USE_CASES: Dict[Type[Any], Type[UseCase]] = {
    NewBuildCommand: NewBuildUseCase,
    NewBuildRefCommand: NewBuildRefUseCase,
    AddExtraIdsCommand: AddExtraIdsUseCase,
    LookupBuildCommand: LookupBuildUseCase,
    LookupBuildRefCommand: LookupBuildRefUseCase,
    LookupBuildRefsCommand: LookupBuildRefsUseCase,
    ListBuildsCommand: ListBuildsUseCase,
    LookupJobCommand: LookupJobUseCase,
    LookupCommitJobCommand: LookupCommitJobUseCase,
    LookupPublishJobCommand: LookupPublishJobUseCase,
    ListJobsCommand: ListJobsUseCase,
    StartCommitJobCommand: StartCommitJobUseCase,
    StartPublishJobCommand: StartPublishJobUseCase,
    InitPurgeCommand: InitPurgeUseCase,
    FinishPurgeCommand: FinishPurgeUseCase,
}


class CommandDispatcher:
    """Uniform entry point routing commands to their use cases.

    Attributes:
        store: Store handle passed to every use case.
    """

    def __init__(self, store: Store) -> None:
        """Build one use case instance per registered command.

        Args:
            store: Store handle the use cases open transactions on.
        """
        self._store = store
        self._use_cases: Dict[Type[Any], UseCase] = {
            command_type: use_case_type(store)
            for command_type, use_case_type in USE_CASES.items()
        }

    def submit(self, command: Any) -> Any:
        """Execute a command and return its typed result.

        Args:
            command: One of the registered command DTOs.

        Returns:
            The result of the command's use case.

        Raises:
            TypeError: If the command type is not registered.
            BuildDomainError: Domain error raised by the use case.
        """
        use_case = self._use_cases.get(type(command))
        if use_case is None:
            raise TypeError(f"Unsupported command: {type(command).__name__}")
        logger.debug("Dispatching %s", command)
        return use_case.execute(command)
