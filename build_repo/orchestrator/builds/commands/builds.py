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

"""Build lookup and metadata command DTOs."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class NewBuildCommand:
    """Command to register a build whose upload has completed.

    Attributes:
        repo: Repository the build was uploaded to.
    """

    repo: str


@dataclass(frozen=True)
class NewBuildRefCommand:
    """Command to register a ref uploaded as part of a build.

    Attributes:
        build_id: Parent build.
        ref_name: Full ref name.
        commit: Commit checksum the ref points to.
    """

    build_id: int
    ref_name: str
    commit: str


@dataclass(frozen=True)
class AddExtraIdsCommand:
    """Command to attach additional app ids to a build.

    Attributes:
        build_id: Target build.
        ids: Ids to merge into the build's extra ids, in order.
    """

    build_id: int
    ids: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LookupBuildCommand:
    """Command to fetch a single build."""

    build_id: int


@dataclass(frozen=True)
class LookupBuildRefCommand:
    """Command to fetch a single ref of a build."""

    build_id: int
    ref_id: int


@dataclass(frozen=True)
class LookupBuildRefsCommand:
    """Command to fetch all refs of a build."""

    build_id: int


@dataclass(frozen=True)
class ListBuildsCommand:
    """Command to list all builds that have not been purged."""
