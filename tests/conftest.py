# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""Pytest configuration and fixtures."""

import pytest

from interfax import InterFAX

BASE_URL = "https://rest.interfax.net"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def interfax() -> InterFAX:
    """Client with explicit credentials; tests enter it with ``async with``."""
    return InterFAX("user", "secret", base_url=BASE_URL)
