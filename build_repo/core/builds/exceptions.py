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

"""Domain exceptions for the Build aggregate."""

from typing import Optional


class BuildDomainError(Exception):
    """Base exception for all build domain errors."""

    def __init__(self, message: str) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
        self.message = message


class NotFoundError(BuildDomainError):
    """An expected single row does not exist."""


class BuildNotFoundError(NotFoundError):
    """Build does not exist in the system."""

    def __init__(self, build_id: int) -> None:
        """Initialize build not found error.

        Args:
            build_id: The build ID that was not found.
        """
        super().__init__(f"Build not found: {build_id}")
        self.build_id = build_id


class BuildRefNotFoundError(NotFoundError):
    """Build ref does not exist for the given build."""

    def __init__(self, build_id: int, ref_id: int) -> None:
        """Initialize build ref not found error.

        Args:
            build_id: The parent build ID.
            ref_id: The ref ID that was not found.
        """
        super().__init__(f"Build ref {ref_id} not found for build {build_id}")
        self.build_id = build_id
        self.ref_id = ref_id


class JobNotFoundError(NotFoundError):
    """Job does not exist in the system."""

    def __init__(
        self,
        job_id: Optional[int] = None,
        build_id: Optional[int] = None,
        kind: Optional[str] = None,
    ) -> None:
        """Initialize job not found error.

        Args:
            job_id: The job ID that was not found, for direct lookups.
            build_id: The build whose active job was looked up.
            kind: Job kind looked up through the build (commit or publish).
        """
        if job_id is not None:
            message = f"Job not found: {job_id}"
        else:
            message = f"No {kind} job found for build {build_id}"
        super().__init__(message)
        self.job_id = job_id
        self.build_id = build_id
        self.kind = kind


class WrongRepoStateError(BuildDomainError):
    """Build repo state does not allow the requested transition."""

    def __init__(self, message: str, expected: str, actual: str) -> None:
        """Initialize wrong repo state error.

        Args:
            message: Human-readable error description.
            expected: Name of the state the transition requires.
            actual: Name of the current state.
        """
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class WrongPublishedStateError(BuildDomainError):
    """Build published state does not allow the requested transition."""

    def __init__(self, message: str, expected: str, actual: str) -> None:
        """Initialize wrong published state error.

        Args:
            message: Human-readable error description.
            expected: Name of the state the transition requires.
            actual: Name of the current state.
        """
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class BadRequestError(BuildDomainError):
    """Request rejected by a guard not tied to a single automaton."""


class StoreFaultError(BuildDomainError):
    """Unexpected failure of the underlying persistent store.

    The original store exception is chained as ``__cause__``.
    """
