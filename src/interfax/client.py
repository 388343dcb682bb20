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

"""Async client for the InterFAX REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from interfax.api import Account, Documents, Inbound, Outbound
from interfax.config import ClientConfig
from interfax.http import ResourceClient

logger = logging.getLogger(__name__)

USER_AGENT = "interfax-python/0.1.0"


class InterFAX:
    """Async client for the InterFAX REST API.

    Endpoints are grouped by resource: ``account``, ``outbound``, ``inbound``
    and ``documents``.

    Example:
        ```python
        async with InterFAX("user", "secret") as interfax:
            fax_id = await interfax.outbound.send_fax(
                "+11111111112", FaxDocument.from_file("letter.pdf")
            )
            fax = await interfax.outbound.get(fax_id)
        ```

    An ``httpx.AsyncClient`` may be passed in to share a connection pool or to
    customize transport behaviour. It must carry its own base URL and auth, and
    it is left open when this client closes.
    """

    def __init__(
        self,
        username: str | None = None,
        password: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        config: ClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            username: API username (default: INTERFAX_USERNAME)
            password: API password (default: INTERFAX_PASSWORD)
            base_url: API root (default: INTERFAX_BASE_URL or the public API)
            timeout: Request timeout in seconds (default: INTERFAX_TIMEOUT or 30)
            config: Complete configuration, used instead of the arguments above
            http_client: Transport to use instead of creating one

        Raises:
            ConfigurationError: If no transport is given and credentials are missing
        """
        if http_client is not None:
            self._config = config
            self._http = http_client
            self._owns_http = False
        else:
            self._config = config or ClientConfig.from_env(
                username=username,
                password=password,
                base_url=base_url,
                timeout=timeout,
            )
            self._http = self._create_http_client(self._config)
            self._owns_http = True

        self._resources = ResourceClient(self._http)
        self.account = Account(self._resources)
        self.outbound = Outbound(self._resources)
        self.inbound = Inbound(self._resources)
        self.documents = Documents(self._resources)

    @staticmethod
    def _create_http_client(config: ClientConfig) -> httpx.AsyncClient:
        client = httpx.AsyncClient(
            base_url=config.base_url,
            auth=httpx.BasicAuth(config.username, config.password),
            headers={"User-Agent": USER_AGENT},
            timeout=httpx.Timeout(config.timeout),
        )

        # Try to apply OpenTelemetry instrumentation
        try:
            from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor

            HTTPXClientInstrumentor().instrument_client(client)
        except ImportError:
            logger.debug("OpenTelemetry httpx instrumentation not available")

        return client

    @property
    def config(self) -> ClientConfig | None:
        return self._config

    @property
    def http_client(self) -> httpx.AsyncClient:
        """The underlying transport."""
        return self._http

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> InterFAX:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()
