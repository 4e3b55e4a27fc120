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

"""Shared pytest fixtures for build repository tests.

Unit tests run use cases against the in-memory FakeStore; integration
tests (tests/integration/conftest.py) use a SQLite file store instead.
"""

import sys
from pathlib import Path

import pytest

# Add project root to Python path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from build_repo.tests.utils import (  # noqa: E402
    generate_commit_checksum,
    generate_ref_name,
)


@pytest.fixture
def ref_name():
    """Random app ref name."""
    return generate_ref_name()


@pytest.fixture
def commit_checksum():
    """Random commit checksum."""
    return generate_commit_checksum()
