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

"""Shared fixtures for build use case tests."""

import pytest

from build_repo.core.builds.entities import Build
from build_repo.core.builds.value_objects import PublishedState, RepoState
from build_repo.orchestrator.builds import CommandDispatcher
from build_repo.tests.mocks.fake_store import FakeStore


@pytest.fixture
def store():
    """Provide an empty fake store."""
    return FakeStore()


@pytest.fixture
def dispatcher(store):  # noqa: W0621
    """Provide a dispatcher bound to the fake store."""
    return CommandDispatcher(store)


@pytest.fixture
def make_build(store):  # noqa: W0621
    """Seed a committed build in the given states."""

    def _make_build(
        repo_state: RepoState = None,
        published_state: PublishedState = None,
        repo: str = "stable",
    ) -> Build:
        build = Build(
            repo=repo,
            repo_state=repo_state or RepoState.uploading(),
            published_state=published_state or PublishedState.unpublished(),
        )
        return store.add_build(build)

    return _make_build
