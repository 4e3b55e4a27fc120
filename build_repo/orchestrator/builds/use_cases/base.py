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

"""Helpers shared by build use cases."""

from build_repo.core.builds.entities import Build
from build_repo.core.builds.exceptions import BuildNotFoundError
from build_repo.core.builds.repositories import UnitOfWork


def load_build(uow: UnitOfWork, build_id: int, for_update: bool = False) -> Build:
    """Load a build inside an open unit of work.

    Args:
        uow: Open unit of work.
        build_id: Build to load.
        for_update: Lock the build row until the unit of work ends.

    Returns:
        The loaded build.

    Raises:
        BuildNotFoundError: If no such build exists.
    """
    build = uow.builds.get(build_id, for_update=for_update)
    if build is None:
        raise BuildNotFoundError(build_id)
    return build
