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

"""Client configuration.

Values passed explicitly take precedence over the environment:
- INTERFAX_USERNAME / INTERFAX_PASSWORD: API credentials (required)
- INTERFAX_BASE_URL: API root (default: https://rest.interfax.net)
- INTERFAX_TIMEOUT: Request timeout in seconds (default: 30)
"""

from __future__ import annotations

import os

import msgspec

from interfax.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://rest.interfax.net"
DEFAULT_TIMEOUT = 30.0


class ClientConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Connection settings for the InterFAX API."""

    username: str
    password: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(
        cls,
        *,
        username: str | None = None,
        password: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> ClientConfig:
        """Build a config from explicit values, falling back to INTERFAX_* vars.

        Raises:
            ConfigurationError: If credentials are missing or the timeout is invalid
        """
        username = username or os.environ.get("INTERFAX_USERNAME")
        password = password or os.environ.get("INTERFAX_PASSWORD")
        if not username:
            raise ConfigurationError(
                "No username given and INTERFAX_USERNAME is not set"
            )
        if not password:
            raise ConfigurationError(
                "No password given and INTERFAX_PASSWORD is not set"
            )

        base_url = base_url or os.environ.get("INTERFAX_BASE_URL") or DEFAULT_BASE_URL

        if timeout is None:
            timeout_str = os.environ.get("INTERFAX_TIMEOUT")
            if timeout_str:
                try:
                    timeout = float(timeout_str)
                except ValueError as e:
                    raise ConfigurationError(
                        f"INTERFAX_TIMEOUT must be a number, got {timeout_str!r}"
                    ) from e
            else:
                timeout = DEFAULT_TIMEOUT
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}")

        return cls(
            username=username,
            password=password,
            base_url=base_url.rstrip("/"),
            timeout=timeout,
        )
