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

"""Fixtures for integration tests against a SQLite file store."""

import pytest

from build_repo.infra.config import DatabaseConfig
from build_repo.infra.db import build_engine, init_schema, make_session_factory
from build_repo.infra.repositories import SqlAlchemyStore
from build_repo.orchestrator.builds import CommandDispatcher


@pytest.fixture
def database_config(tmp_path):
    """SQLite database in a per-test directory."""
    return DatabaseConfig(url=f"sqlite:///{tmp_path / 'build-repo.db'}")


@pytest.fixture
def engine(database_config):  # noqa: W0621
    """Engine with the schema created."""
    engine = build_engine(database_config)
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine):  # noqa: W0621
    """SQLAlchemy store on the test database."""
    return SqlAlchemyStore(make_session_factory(engine))


@pytest.fixture
def dispatcher(store):  # noqa: W0621
    """Dispatcher bound to the SQLAlchemy store."""
    return CommandDispatcher(store)
