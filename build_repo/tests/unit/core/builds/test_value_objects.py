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

"""Unit tests for Build domain value objects."""

import pytest

from build_repo.core.builds.value_objects import (
    JobKind,
    JobStatus,
    PublishedState,
    PublishedStateKind,
    RepoState,
    RepoStateKind,
)

ALL_REPO_STATES = [
    RepoState.uploading(),
    RepoState.verifying(),
    RepoState.ready(),
    RepoState.failed("Failed to Purge build: permission denied"),
    RepoState.failed(""),
    RepoState.failed(),
    RepoState.purging(),
    RepoState.purged(),
]

ALL_PUBLISHED_STATES = [
    PublishedState.unpublished(),
    PublishedState.publishing(),
    PublishedState.published(),
    PublishedState.failed("ostree summary update failed\nexit 1"),
    PublishedState.failed(),
]


class TestRepoState:
    """Tests for RepoState value object."""

    @pytest.mark.parametrize("state", ALL_REPO_STATES, ids=str)
    def test_encode_decode_round_trip(self, state):
        """Decoding an encoded state restores it, reason included."""
        decoded = RepoState.decode(*state.encode())
        assert decoded == state
        assert decoded.same_state_as(state)

    def test_codes(self):
        """Persisted codes are stable."""
        assert RepoState.uploading().encode() == (0, None)
        assert RepoState.verifying().encode() == (1, None)
        assert RepoState.ready().encode() == (2, None)
        assert RepoState.failed("why").encode() == (3, "why")
        assert RepoState.purging().encode() == (4, None)
        assert RepoState.purged().encode() == (5, None)

    def test_decode_ignores_reason_of_non_failed(self):
        """Stale reasons next to a non-failed code are dropped."""
        assert RepoState.decode(2, "leftover") == RepoState.ready()

    def test_decode_unknown_code(self):
        """Unknown codes are rejected."""
        with pytest.raises(ValueError, match="Unknown repo state code"):
            RepoState.decode(17)

    def test_same_state_ignores_reason(self):
        """Failed states compare equal for guards whatever the reason."""
        assert RepoState.failed("a").same_state_as(RepoState.failed("b"))
        assert RepoState.failed("a") != RepoState.failed("b")
        assert not RepoState.failed("a").same_state_as(RepoState.ready())

    def test_reason_only_on_failed(self):
        """Non-failed states cannot carry a reason."""
        with pytest.raises(ValueError):
            RepoState(RepoStateKind.READY, "nope")

    def test_name(self):
        """Name is the lower-case variant name."""
        assert RepoState.verifying().name == "verifying"
        assert RepoState.failed("x").name == "failed"
        assert str(RepoState.failed("x")) == "failed: x"


class TestPublishedState:
    """Tests for PublishedState value object."""

    @pytest.mark.parametrize("state", ALL_PUBLISHED_STATES, ids=str)
    def test_encode_decode_round_trip(self, state):
        """Decoding an encoded state restores it, reason included."""
        decoded = PublishedState.decode(*state.encode())
        assert decoded == state
        assert decoded.same_state_as(state)

    def test_codes(self):
        """Persisted codes are stable."""
        assert PublishedState.unpublished().encode() == (0, None)
        assert PublishedState.publishing().encode() == (1, None)
        assert PublishedState.published().encode() == (2, None)
        assert PublishedState.failed("why").encode() == (3, "why")

    def test_decode_unknown_code(self):
        """Unknown codes are rejected."""
        with pytest.raises(ValueError, match="Unknown published state code"):
            PublishedState.decode(4)

    def test_same_state_ignores_reason(self):
        """Failed states compare equal for guards whatever the reason."""
        assert PublishedState.failed("a").same_state_as(PublishedState.failed())
        assert not PublishedState.published().same_state_as(PublishedState.publishing())

    def test_reason_only_on_failed(self):
        """Non-failed states cannot carry a reason."""
        with pytest.raises(ValueError):
            PublishedState(PublishedStateKind.PUBLISHED, "nope")


class TestJobStatus:
    """Tests for JobStatus enum."""

    def test_pending_statuses(self):
        """NEW and STARTED are pending, ENDED and BROKEN terminal."""
        assert JobStatus.NEW.is_pending()
        assert JobStatus.STARTED.is_pending()
        assert JobStatus.ENDED.is_terminal()
        assert JobStatus.BROKEN.is_terminal()

    def test_kind_codes(self):
        """Job kinds persist as integers."""
        assert int(JobKind.COMMIT) == 0
        assert int(JobKind.PUBLISH) == 1
