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

"""Unit tests for CommandDispatcher."""

from dataclasses import dataclass

import pytest

from build_repo.core.builds.entities import Build, Job
from build_repo.core.builds.exceptions import WrongRepoStateError
from build_repo.core.builds.value_objects import (
    JobKind,
    JobStatus,
    PublishedState,
    RepoState,
)
from build_repo.orchestrator.builds.commands import (
    AddExtraIdsCommand,
    FinishPurgeCommand,
    InitPurgeCommand,
    ListBuildsCommand,
    ListJobsCommand,
    LookupBuildCommand,
    LookupBuildRefsCommand,
    LookupCommitJobCommand,
    LookupPublishJobCommand,
    NewBuildCommand,
    NewBuildRefCommand,
    StartCommitJobCommand,
    StartPublishJobCommand,
)
from build_repo.orchestrator.builds.dispatcher import USE_CASES


@dataclass(frozen=True)
class _UnknownCommand:
    build_id: int


@pytest.mark.unit
class TestCommandDispatcher:
    """Tests for CommandDispatcher."""

    def test_every_command_is_registered(self):
        """Each command class maps to exactly one use case."""
        assert len(USE_CASES) == 15
        assert len(set(USE_CASES.values())) == 15

    def test_unknown_command(self, dispatcher):
        """Unregistered command types are rejected."""
        with pytest.raises(TypeError, match="_UnknownCommand"):
            dispatcher.submit(_UnknownCommand(build_id=1))

    def test_domain_errors_propagate(self, dispatcher, make_build):
        """Guard failures reach the caller as typed errors."""
        build = make_build(repo_state=RepoState.ready())

        with pytest.raises(WrongRepoStateError):
            dispatcher.submit(StartCommitJobCommand(build_id=build.id))

    def test_full_lifecycle(self, dispatcher, store, ref_name, commit_checksum):
        """Upload, commit, publish and purge a build through the dispatcher."""
        build = dispatcher.submit(NewBuildCommand(repo="stable"))
        assert isinstance(build, Build)
        dispatcher.submit(
            NewBuildRefCommand(build_id=build.id, ref_name=ref_name, commit=commit_checksum)
        )
        assert len(dispatcher.submit(LookupBuildRefsCommand(build_id=build.id))) == 1

        commit_job = dispatcher.submit(StartCommitJobCommand(build_id=build.id))
        assert isinstance(commit_job, Job)
        assert dispatcher.submit(ListJobsCommand()) == [commit_job]

        # The worker finishes the commit job and marks the build ready.
        store.jobs[commit_job.id].status = JobStatus.ENDED
        store.builds[build.id].repo_state = RepoState.ready()
        assert dispatcher.submit(ListJobsCommand()) == []
        assert dispatcher.submit(LookupCommitJobCommand(build_id=build.id)).id == commit_job.id

        publish_job = dispatcher.submit(StartPublishJobCommand(build_id=build.id, repo="stable"))
        assert publish_job.kind == JobKind.PUBLISH
        assert dispatcher.submit(LookupPublishJobCommand(build_id=build.id)).repo == "stable"

        store.jobs[publish_job.id].status = JobStatus.ENDED
        store.builds[build.id].published_state = PublishedState.published()

        updated = dispatcher.submit(AddExtraIdsCommand(build_id=build.id, ids=("org.example.Extra",)))
        assert updated.extra_ids == ["org.example.Extra"]

        assert dispatcher.submit(InitPurgeCommand(build_id=build.id)) is None
        purged = dispatcher.submit(FinishPurgeCommand(build_id=build.id))
        assert purged.repo_state == RepoState.purged()
        assert dispatcher.submit(LookupBuildCommand(build_id=build.id)).is_purged()
        assert dispatcher.submit(ListBuildsCommand()) == []
