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

"""Shared plumbing for the resource groups."""

from __future__ import annotations

import httpx

from interfax.exceptions import InterFAXError
from interfax.http import ResourceClient


class Resource:
    """A group of endpoints sharing one ``ResourceClient``."""

    def __init__(self, client: ResourceClient):
        self._client = client

    @staticmethod
    def _location(response: httpx.Response) -> str:
        """Return the ``Location`` header of a creation response."""
        location = response.headers.get("location")
        if not location:
            raise InterFAXError(
                f"Expected a Location header in response to "
                f"{response.request.method} {response.request.url.path}"
            )
        return location

    @classmethod
    def _location_id(cls, response: httpx.Response) -> str:
        """Return the last path segment of the ``Location`` header."""
        location = cls._location(response)
        resource_id = httpx.URL(location).path.rstrip("/").rsplit("/", 1)[-1]
        if not resource_id:
            raise InterFAXError(f"No resource id in Location header {location!r}")
        return resource_id

    @classmethod
    def _location_int_id(cls, response: httpx.Response) -> int:
        resource_id = cls._location_id(response)
        try:
            return int(resource_id)
        except ValueError:
            raise InterFAXError(
                f"Expected a numeric id in Location header, got {resource_id!r}"
            ) from None
