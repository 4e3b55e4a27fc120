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

"""SQLAlchemy table mappings for builds, build refs and jobs.

States, job kinds and job statuses are stored as small integer codes;
see the value objects for the encodings.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, DateTime, ForeignKey, Integer, SmallInteger, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class JobRow(Base):
    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    kind: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    status: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0, index=True)
    contents: Mapped[str] = mapped_column(Text, nullable=False)
    results: Mapped[Optional[str]] = mapped_column(Text)
    log: Mapped[str] = mapped_column(Text, nullable=False, default="")
    start_after: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    repo: Mapped[Optional[str]] = mapped_column(String(255))


class BuildRow(Base):
    __tablename__ = "builds"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    repo: Mapped[str] = mapped_column(String(255), nullable=False)
    repo_state: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    repo_state_reason: Mapped[Optional[str]] = mapped_column(Text)
    published_state: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    published_state_reason: Mapped[Optional[str]] = mapped_column(Text)
    commit_job_id: Mapped[Optional[int]] = mapped_column(ForeignKey("jobs.id"))
    publish_job_id: Mapped[Optional[int]] = mapped_column(ForeignKey("jobs.id"))
    extra_ids: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)


class BuildRefRow(Base):
    __tablename__ = "build_refs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    build_id: Mapped[int] = mapped_column(ForeignKey("builds.id"), nullable=False, index=True)
    ref_name: Mapped[str] = mapped_column(Text, nullable=False)
    commit: Mapped[str] = mapped_column(String(128), nullable=False)
