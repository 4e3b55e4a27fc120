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

"""Unit tests for lookup and list use cases."""

import pytest

from build_repo.core.builds.entities import BuildRef, CommitJobPayload, Job, create_job
from build_repo.core.builds.exceptions import (
    BadRequestError,
    BuildNotFoundError,
    BuildRefNotFoundError,
    JobNotFoundError,
)
from build_repo.core.builds.value_objects import JobKind, JobStatus, RepoState
from build_repo.orchestrator.builds.commands import (
    ListBuildsCommand,
    ListJobsCommand,
    LookupBuildCommand,
    LookupBuildRefCommand,
    LookupBuildRefsCommand,
    LookupCommitJobCommand,
    LookupJobCommand,
    LookupPublishJobCommand,
)
from build_repo.orchestrator.builds.use_cases import (
    ListBuildsUseCase,
    ListJobsUseCase,
    LookupBuildRefsUseCase,
    LookupBuildRefUseCase,
    LookupBuildUseCase,
    LookupCommitJobUseCase,
    LookupJobUseCase,
    LookupPublishJobUseCase,
)


def _commit_job(build_id: int, status: JobStatus = JobStatus.NEW, log: str = "") -> Job:
    job = create_job(JobKind.COMMIT, CommitJobPayload(build=build_id))
    job.status = status
    job.log = log
    return job


@pytest.mark.unit
class TestBuildLookups:
    """Tests for build and build ref lookups."""

    def test_lookup_build(self, store, make_build):
        """Existing build is returned."""
        build = make_build()

        result = LookupBuildUseCase(store).execute(LookupBuildCommand(build_id=build.id))

        assert result == build

    def test_lookup_build_not_found(self, store):
        """Missing build raises BuildNotFoundError."""
        with pytest.raises(BuildNotFoundError) as exc_info:
            LookupBuildUseCase(store).execute(LookupBuildCommand(build_id=12))
        assert exc_info.value.build_id == 12

    def test_lookup_build_refs(self, store, make_build, ref_name, commit_checksum):
        """Refs are filtered by build."""
        build = make_build()
        other = make_build()
        store.build_refs[1] = BuildRef(build_id=build.id, ref_name=ref_name, commit=commit_checksum, id=1)
        store.build_refs[2] = BuildRef(build_id=other.id, ref_name=ref_name, commit=commit_checksum, id=2)

        refs = LookupBuildRefsUseCase(store).execute(LookupBuildRefsCommand(build_id=build.id))
        ref = LookupBuildRefUseCase(store).execute(
            LookupBuildRefCommand(build_id=build.id, ref_id=1)
        )

        assert [r.id for r in refs] == [1]
        assert ref.ref_name == ref_name

    def test_lookup_build_ref_of_other_build(self, store, make_build, ref_name, commit_checksum):
        """A ref is not found through a build it does not belong to."""
        build = make_build()
        other = make_build()
        store.build_refs[1] = BuildRef(build_id=other.id, ref_name=ref_name, commit=commit_checksum, id=1)

        with pytest.raises(BuildRefNotFoundError):
            LookupBuildRefUseCase(store).execute(
                LookupBuildRefCommand(build_id=build.id, ref_id=1)
            )

    def test_list_builds_skips_purged(self, store, make_build):
        """Purged builds are not listed."""
        kept = make_build(repo_state=RepoState.ready())
        make_build(repo_state=RepoState.purged())
        failed = make_build(repo_state=RepoState.failed("Failed to Purge build: io"))

        builds = ListBuildsUseCase(store).execute(ListBuildsCommand())

        assert [b.id for b in builds] == [kept.id, failed.id]


@pytest.mark.unit
class TestJobLookups:
    """Tests for job lookups."""

    @pytest.mark.parametrize(
        "log_offset,expected",
        [(None, "abcdefgh"), (5, "fgh"), (8, ""), (100, "")],
    )
    def test_lookup_job_log_offset(self, store, log_offset, expected):
        """Log is trimmed to the suffix starting at the offset."""
        job = store.add_job(_commit_job(1, log="abcdefgh"))

        result = LookupJobUseCase(store).execute(
            LookupJobCommand(job_id=job.id, log_offset=log_offset)
        )

        assert result.log == expected
        assert store.jobs[job.id].log == "abcdefgh"

    def test_lookup_job_negative_offset(self, store):
        """Negative offsets are rejected."""
        job = store.add_job(_commit_job(1, log="abc"))

        with pytest.raises(BadRequestError):
            LookupJobUseCase(store).execute(LookupJobCommand(job_id=job.id, log_offset=-1))

    def test_lookup_job_not_found(self, store):
        """Missing job raises JobNotFoundError."""
        with pytest.raises(JobNotFoundError) as exc_info:
            LookupJobUseCase(store).execute(LookupJobCommand(job_id=99))
        assert exc_info.value.job_id == 99

    def test_lookup_commit_and_publish_job(self, store, make_build):
        """Active jobs are found through the build."""
        build = make_build(repo_state=RepoState.verifying())
        commit_job = store.add_job(_commit_job(build.id, log="pulling refs"))
        build.commit_job_id = commit_job.id
        store.builds[build.id] = build

        result = LookupCommitJobUseCase(store).execute(
            LookupCommitJobCommand(build_id=build.id, log_offset=8)
        )

        assert result.id == commit_job.id
        assert result.log == "refs"
        with pytest.raises(JobNotFoundError) as exc_info:
            LookupPublishJobUseCase(store).execute(LookupPublishJobCommand(build_id=build.id))
        assert exc_info.value.kind == "publish"
        assert exc_info.value.build_id == build.id

    def test_list_jobs_pending_in_order(self, store):
        """Only new and started jobs are listed, oldest first."""
        first = store.add_job(_commit_job(1, status=JobStatus.STARTED))
        store.add_job(_commit_job(2, status=JobStatus.ENDED))
        third = store.add_job(_commit_job(3, status=JobStatus.NEW))
        store.add_job(_commit_job(4, status=JobStatus.BROKEN))

        jobs = ListJobsUseCase(store).execute(ListJobsCommand())

        assert [job.id for job in jobs] == [first.id, third.id]
