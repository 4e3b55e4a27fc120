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

"""Build use cases."""

from .lookup import (
    ListBuildsUseCase,
    ListJobsUseCase,
    LookupBuildRefsUseCase,
    LookupBuildRefUseCase,
    LookupBuildUseCase,
    LookupCommitJobUseCase,
    LookupJobUseCase,
    LookupPublishJobUseCase,
)
from .purge_build import FinishPurgeUseCase, InitPurgeUseCase
from .register_build import AddExtraIdsUseCase, NewBuildRefUseCase, NewBuildUseCase
from .start_commit_job import StartCommitJobUseCase
from .start_publish_job import StartPublishJobUseCase

__all__ = [
    "NewBuildUseCase",
    "NewBuildRefUseCase",
    "AddExtraIdsUseCase",
    "LookupBuildUseCase",
    "LookupBuildRefUseCase",
    "LookupBuildRefsUseCase",
    "LookupJobUseCase",
    "LookupCommitJobUseCase",
    "LookupPublishJobUseCase",
    "ListBuildsUseCase",
    "ListJobsUseCase",
    "StartCommitJobUseCase",
    "StartPublishJobUseCase",
    "InitPurgeUseCase",
    "FinishPurgeUseCase",
]
