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

"""Value objects for the Build domain.

All value objects are immutable and defined by their values, not identity.
The two build state automatons carry an optional reason that is only
meaningful for their FAILED variant and never takes part in guard checks.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Dict, Optional, Tuple


class RepoStateKind(str, Enum):
    """Discriminant of the repository state automaton."""

    UPLOADING = "uploading"
    VERIFYING = "verifying"
    READY = "ready"
    FAILED = "failed"
    PURGING = "purging"
    PURGED = "purged"


class PublishedStateKind(str, Enum):
    """Discriminant of the publication state automaton."""

    UNPUBLISHED = "unpublished"
    PUBLISHING = "publishing"
    PUBLISHED = "published"
    FAILED = "failed"


@dataclass(frozen=True)
class RepoState:
    """Repository state of a build.

    Attributes:
        kind: State discriminant.
        reason: Free-text explanation, kept only for FAILED.

    Raises:
        ValueError: If a reason is attached to a non-FAILED state.
    """

    kind: RepoStateKind
    reason: Optional[str] = None

    CODES: ClassVar[Dict[RepoStateKind, int]] = {
        RepoStateKind.UPLOADING: 0,
        RepoStateKind.VERIFYING: 1,
        RepoStateKind.READY: 2,
        RepoStateKind.FAILED: 3,
        RepoStateKind.PURGING: 4,
        RepoStateKind.PURGED: 5,
    }

    def __post_init__(self) -> None:
        """Reject reasons on variants that cannot carry one."""
        if self.reason is not None and self.kind != RepoStateKind.FAILED:
            raise ValueError(
                f"Only failed repo state can carry a reason, got {self.kind.value}"
            )

    @classmethod
    def uploading(cls) -> "RepoState":
        return cls(RepoStateKind.UPLOADING)

    @classmethod
    def verifying(cls) -> "RepoState":
        return cls(RepoStateKind.VERIFYING)

    @classmethod
    def ready(cls) -> "RepoState":
        return cls(RepoStateKind.READY)

    @classmethod
    def failed(cls, reason: Optional[str] = None) -> "RepoState":
        return cls(RepoStateKind.FAILED, reason)

    @classmethod
    def purging(cls) -> "RepoState":
        return cls(RepoStateKind.PURGING)

    @classmethod
    def purged(cls) -> "RepoState":
        return cls(RepoStateKind.PURGED)

    @property
    def name(self) -> str:
        """Lower-case variant name used in error reports."""
        return self.kind.value

    def encode(self) -> Tuple[int, Optional[str]]:
        """Encode state into its persisted (code, reason) pair.

        Returns:
            Integer code and the reason (None unless FAILED).
        """
        return self.CODES[self.kind], self.reason

    @classmethod
    def decode(cls, code: int, reason: Optional[str] = None) -> "RepoState":
        """Rebuild a state from its persisted (code, reason) pair.

        Args:
            code: Persisted integer code.
            reason: Persisted reason, ignored unless the code is FAILED.

        Returns:
            Decoded RepoState.

        Raises:
            ValueError: If the code is unknown.
        """
        for kind, kind_code in cls.CODES.items():
            if kind_code == code:
                if kind == RepoStateKind.FAILED:
                    return cls(kind, reason)
                return cls(kind)
        raise ValueError(f"Unknown repo state code: {code}")

    def same_state_as(self, other: "RepoState") -> bool:
        """Compare discriminants only, ignoring the reason."""
        return self.kind == other.kind

    def __str__(self) -> str:
        """Return string representation."""
        if self.reason is not None:
            return f"{self.kind.value}: {self.reason}"
        return self.kind.value


@dataclass(frozen=True)
class PublishedState:
    """Publication state of a build.

    Attributes:
        kind: State discriminant.
        reason: Free-text explanation, kept only for FAILED.

    Raises:
        ValueError: If a reason is attached to a non-FAILED state.
    """

    kind: PublishedStateKind
    reason: Optional[str] = None

    CODES: ClassVar[Dict[PublishedStateKind, int]] = {
        PublishedStateKind.UNPUBLISHED: 0,
        PublishedStateKind.PUBLISHING: 1,
        PublishedStateKind.PUBLISHED: 2,
        PublishedStateKind.FAILED: 3,
    }

    def __post_init__(self) -> None:
        """Reject reasons on variants that cannot carry one."""
        if self.reason is not None and self.kind != PublishedStateKind.FAILED:
            raise ValueError(
                f"Only failed published state can carry a reason, got {self.kind.value}"
            )

    @classmethod
    def unpublished(cls) -> "PublishedState":
        return cls(PublishedStateKind.UNPUBLISHED)

    @classmethod
    def publishing(cls) -> "PublishedState":
        return cls(PublishedStateKind.PUBLISHING)

    @classmethod
    def published(cls) -> "PublishedState":
        return cls(PublishedStateKind.PUBLISHED)

    @classmethod
    def failed(cls, reason: Optional[str] = None) -> "PublishedState":
        return cls(PublishedStateKind.FAILED, reason)

    @property
    def name(self) -> str:
        """Lower-case variant name used in error reports."""
        return self.kind.value

    def encode(self) -> Tuple[int, Optional[str]]:
        """Encode state into its persisted (code, reason) pair."""
        return self.CODES[self.kind], self.reason

    @classmethod
    def decode(cls, code: int, reason: Optional[str] = None) -> "PublishedState":
        """Rebuild a state from its persisted (code, reason) pair.

        Raises:
            ValueError: If the code is unknown.
        """
        for kind, kind_code in cls.CODES.items():
            if kind_code == code:
                if kind == PublishedStateKind.FAILED:
                    return cls(kind, reason)
                return cls(kind)
        raise ValueError(f"Unknown published state code: {code}")

    def same_state_as(self, other: "PublishedState") -> bool:
        """Compare discriminants only, ignoring the reason."""
        return self.kind == other.kind

    def __str__(self) -> str:
        """Return string representation."""
        if self.reason is not None:
            return f"{self.kind.value}: {self.reason}"
        return self.kind.value


class JobKind(IntEnum):
    """Kinds of asynchronous work items, persisted as their integer value."""

    COMMIT = 0
    PUBLISH = 1


class JobStatus(IntEnum):
    """Job lifecycle statuses, persisted as their integer value.

    Ordering matters: anything up to STARTED is still pending or running,
    ENDED and BROKEN are terminal.
    """

    NEW = 0
    STARTED = 1
    ENDED = 2
    BROKEN = 3

    def is_pending(self) -> bool:
        """Check if the job is still queued or running."""
        return self <= JobStatus.STARTED

    def is_terminal(self) -> bool:
        """Check if status is terminal (immutable)."""
        return not self.is_pending()
