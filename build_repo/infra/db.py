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

"""Engine and session setup for the SQLAlchemy store."""

import logging
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from .config import DatabaseConfig
from .models import Base
from .repositories import SqlAlchemyStore

logger = logging.getLogger(__name__)


def _begin_immediate(engine: Engine) -> None:
    """Make every SQLite transaction take the write lock up front.

    pysqlite defers BEGIN until the first write, so two transactions could
    both read a build before either writes it. BEGIN IMMEDIATE serializes
    them the way row locks do on PostgreSQL.
    """

    @event.listens_for(engine, "connect")
    def _disable_driver_begin(dbapi_connection, connection_record):  # noqa: ARG001
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(config: DatabaseConfig) -> Engine:
    """Create the engine described by config."""
    connect_args = {}
    if config.url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}
    engine = create_engine(
        config.url,
        echo=config.echo,
        pool_pre_ping=config.pool_pre_ping,
        connect_args=connect_args,
    )
    if engine.dialect.name == "sqlite":
        _begin_immediate(engine)
    return engine


def init_schema(engine: Engine) -> None:
    """Create missing tables."""
    Base.metadata.create_all(engine)


def make_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory used by the store."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def create_store(config: Optional[DatabaseConfig] = None) -> SqlAlchemyStore:
    """Create a store handle.

    Args:
        config: Database settings, loaded from the environment when omitted.

    Returns:
        SqlAlchemyStore bound to a new engine.

    Raises:
        RuntimeError: If no config is given and the environment has no URL.
    """
    config = config or DatabaseConfig.from_env()
    engine = build_engine(config)
    logger.info("Using %s database", engine.dialect.name)
    return SqlAlchemyStore(make_session_factory(engine))
