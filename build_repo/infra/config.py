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

"""Store configuration loaded from the environment."""

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def _normalize_url(url: str) -> str:
    """Select the psycopg driver for bare PostgreSQL URLs."""
    if url.startswith("postgres://"):
        return "postgresql+psycopg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    return url


@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings.

    Attributes:
        url: SQLAlchemy database URL.
        echo: Log every SQL statement.
        pool_pre_ping: Test pooled connections before use.
    """

    url: str
    echo: bool = False
    pool_pre_ping: bool = True

    @classmethod
    def from_env(cls) -> "DatabaseConfig":
        """Load settings from BUILD_REPO_DATABASE_* environment variables.

        Returns:
            DatabaseConfig with normalized URL.

        Raises:
            RuntimeError: If BUILD_REPO_DATABASE_URL is not set.
        """
        url = os.getenv("BUILD_REPO_DATABASE_URL", "").strip()
        if not url:
            raise RuntimeError("BUILD_REPO_DATABASE_URL is required")
        return cls(
            url=_normalize_url(url),
            echo=_env_flag("BUILD_REPO_DATABASE_ECHO", False),
            pool_pre_ping=_env_flag("BUILD_REPO_DATABASE_POOL_PRE_PING", True),
        )
