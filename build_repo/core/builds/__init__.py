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

"""Build domain module for the build repository."""

from .entities import (
    Build,
    BuildRef,
    CommitJobPayload,
    Job,
    JobPayload,
    PublishJobPayload,
    create_job,
)
from .exceptions import (
    BadRequestError,
    BuildDomainError,
    BuildNotFoundError,
    BuildRefNotFoundError,
    JobNotFoundError,
    NotFoundError,
    StoreFaultError,
    WrongPublishedStateError,
    WrongRepoStateError,
)
from .repositories import (
    BuildRefRepository,
    BuildRepository,
    JobRepository,
    Store,
    UnitOfWork,
)
from .value_objects import (
    JobKind,
    JobStatus,
    PublishedState,
    PublishedStateKind,
    RepoState,
    RepoStateKind,
)

__all__ = [
    "Build",
    "BuildRef",
    "Job",
    "JobPayload",
    "CommitJobPayload",
    "PublishJobPayload",
    "create_job",
    "BuildDomainError",
    "NotFoundError",
    "BuildNotFoundError",
    "BuildRefNotFoundError",
    "JobNotFoundError",
    "WrongRepoStateError",
    "WrongPublishedStateError",
    "BadRequestError",
    "StoreFaultError",
    "BuildRepository",
    "BuildRefRepository",
    "JobRepository",
    "UnitOfWork",
    "Store",
    "RepoState",
    "RepoStateKind",
    "PublishedState",
    "PublishedStateKind",
    "JobKind",
    "JobStatus",
]
