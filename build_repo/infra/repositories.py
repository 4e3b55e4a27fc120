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

"""SQLAlchemy implementations of the build repository ports."""

import logging
from types import TracebackType
from typing import List, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from build_repo.core.builds.entities import Build, BuildRef, Job
from build_repo.core.builds.exceptions import BuildNotFoundError, StoreFaultError
from build_repo.core.builds.value_objects import (
    JobKind,
    JobStatus,
    PublishedState,
    RepoState,
)

from .models import BuildRefRow, BuildRow, JobRow

logger = logging.getLogger(__name__)


def _to_build(row: BuildRow) -> Build:
    return Build(
        id=row.id,
        repo=row.repo,
        repo_state=RepoState.decode(row.repo_state, row.repo_state_reason),
        published_state=PublishedState.decode(
            row.published_state, row.published_state_reason
        ),
        extra_ids=list(row.extra_ids or []),
        commit_job_id=row.commit_job_id,
        publish_job_id=row.publish_job_id,
        created_at=row.created,
    )


def _apply_build(build: Build, row: BuildRow) -> None:
    row.repo = build.repo
    row.repo_state, row.repo_state_reason = build.repo_state.encode()
    row.published_state, row.published_state_reason = build.published_state.encode()
    row.extra_ids = list(build.extra_ids)
    row.commit_job_id = build.commit_job_id
    row.publish_job_id = build.publish_job_id


def _to_build_ref(row: BuildRefRow) -> BuildRef:
    return BuildRef(
        id=row.id,
        build_id=row.build_id,
        ref_name=row.ref_name,
        commit=row.commit,
    )


def _to_job(row: JobRow) -> Job:
    return Job(
        id=row.id,
        kind=JobKind(row.kind),
        status=JobStatus(row.status),
        contents=row.contents,
        results=row.results,
        log=row.log or "",
        start_after=row.start_after,
        repo=row.repo,
    )


class SqlAlchemyBuildRepository:
    """Build persistence on a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, build: Build) -> Build:
        row = BuildRow(created=build.created_at)
        _apply_build(build, row)
        self._session.add(row)
        self._session.flush()
        return _to_build(row)

    def get(self, build_id: int, for_update: bool = False) -> Optional[Build]:
        stmt = select(BuildRow).where(BuildRow.id == build_id)
        if for_update:
            stmt = stmt.with_for_update()
        row = self._session.execute(stmt).scalar_one_or_none()
        return _to_build(row) if row is not None else None

    def save(self, build: Build) -> Build:
        row = self._session.get(BuildRow, build.id)
        if row is None:
            raise BuildNotFoundError(build.id)
        _apply_build(build, row)
        self._session.flush()
        return _to_build(row)

    def list_not_purged(self) -> List[Build]:
        purged_code, _ = RepoState.purged().encode()
        stmt = (
            select(BuildRow)
            .where(BuildRow.repo_state != purged_code)
            .order_by(BuildRow.id)
        )
        return [_to_build(row) for row in self._session.execute(stmt).scalars()]


class SqlAlchemyBuildRefRepository:
    """BuildRef persistence on a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, build_ref: BuildRef) -> BuildRef:
        row = BuildRefRow(
            build_id=build_ref.build_id,
            ref_name=build_ref.ref_name,
            commit=build_ref.commit,
        )
        self._session.add(row)
        self._session.flush()
        return _to_build_ref(row)

    def get(self, build_id: int, ref_id: int) -> Optional[BuildRef]:
        stmt = select(BuildRefRow).where(
            BuildRefRow.build_id == build_id, BuildRefRow.id == ref_id
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return _to_build_ref(row) if row is not None else None

    def find_all_by_build(self, build_id: int) -> List[BuildRef]:
        stmt = (
            select(BuildRefRow)
            .where(BuildRefRow.build_id == build_id)
            .order_by(BuildRefRow.id)
        )
        return [_to_build_ref(row) for row in self._session.execute(stmt).scalars()]


class SqlAlchemyJobRepository:
    """Job persistence on a SQLAlchemy session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, job: Job) -> Job:
        row = JobRow(
            kind=int(job.kind),
            status=int(job.status),
            contents=job.contents,
            results=job.results,
            log=job.log,
            start_after=job.start_after,
            repo=job.repo,
        )
        self._session.add(row)
        self._session.flush()
        return _to_job(row)

    def get(self, job_id: int) -> Optional[Job]:
        row = self._session.get(JobRow, job_id)
        return _to_job(row) if row is not None else None

    def _find_by_build_column(self, column, build_id: int) -> Optional[Job]:
        stmt = (
            select(JobRow)
            .join(BuildRow, column == JobRow.id)
            .where(BuildRow.id == build_id)
        )
        row = self._session.execute(stmt).scalar_one_or_none()
        return _to_job(row) if row is not None else None

    def find_commit_job(self, build_id: int) -> Optional[Job]:
        return self._find_by_build_column(BuildRow.commit_job_id, build_id)

    def find_publish_job(self, build_id: int) -> Optional[Job]:
        return self._find_by_build_column(BuildRow.publish_job_id, build_id)

    def list_pending(self) -> List[Job]:
        stmt = (
            select(JobRow)
            .where(JobRow.status <= int(JobStatus.STARTED))
            .order_by(JobRow.id)
        )
        return [_to_job(row) for row in self._session.execute(stmt).scalars()]


class SqlAlchemyUnitOfWork:
    """One session, one transaction.

    Every SQLAlchemyError raised inside the context, or by commit(), is
    re-raised as StoreFaultError. Exiting without commit() rolls back.
    """

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory
        self._session: Optional[Session] = None

    def __enter__(self) -> "SqlAlchemyUnitOfWork":
        self._session = self._session_factory()
        self.builds = SqlAlchemyBuildRepository(self._session)
        self.build_refs = SqlAlchemyBuildRefRepository(self._session)
        self.jobs = SqlAlchemyJobRepository(self._session)
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> Optional[bool]:
        try:
            self.rollback()
        finally:
            self._session.close()
        if isinstance(exc, SQLAlchemyError):
            logger.error("Store transaction failed: %s", exc)
            raise StoreFaultError(f"Store failure: {exc}") from exc
        return None

    def commit(self) -> None:
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            logger.error("Store commit failed: %s", exc)
            raise StoreFaultError(f"Store failure: {exc}") from exc

    def rollback(self) -> None:
        try:
            self._session.rollback()
        except SQLAlchemyError as exc:
            logger.error("Store rollback failed: %s", exc)
            raise StoreFaultError(f"Store failure: {exc}") from exc


class SqlAlchemyStore:
    """Store handle opening one unit of work per command."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def transaction(self) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(self._session_factory)
