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

"""Request/response translation between resource calls and HTTP.

Every resource method funnels through ``ResourceClient``: it appends query
options to the path, issues one request on the injected ``httpx.AsyncClient``,
and either deserializes the body or raises ``ApiException`` with an ``Error``
built by ``to_error``. Transport errors from httpx propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import urlencode

import httpx
from pydantic import TypeAdapter, ValidationError

from interfax.exceptions import ApiException
from interfax.models import Error
from interfax.observability import request_context
from interfax.options import Options, format_params

logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_CONTENT_RETURNED = "No content returned"
OCTET_STREAM = "application/octet-stream"
MULTIPART_MIXED = "multipart/mixed"

QueryOptions = Options | Mapping[str, Any] | None


def add_options(request_uri: str, options: QueryOptions) -> str:
    """Append options to a request URI as a URL-encoded query string.

    Returns the URI unchanged when there are no options to add.
    """
    if options is None:
        return request_uri

    if isinstance(options, Options):
        params = options.to_dict()
    else:
        params = format_params(options)
    if not params:
        return request_uri

    return f"{request_uri}?{urlencode(params)}"


def _declared_empty(response: httpx.Response, content: bytes) -> bool:
    content_length = response.headers.get("content-length")
    if content_length is None:
        return not content
    try:
        return int(content_length) == 0
    except ValueError:
        return not content


async def to_error(response: httpx.Response) -> Error:
    """Build the ``Error`` describing a failed response.

    Error bodies that are not valid ``Error`` JSON (plain text pages from a
    proxy, truncated JSON) are kept verbatim in ``more_info``. This never raises.
    """
    content = await response.aread()
    if _declared_empty(response, content):
        return Error(
            code=response.status_code,
            message=response.reason_phrase,
            more_info=NO_CONTENT_RETURNED,
        )

    try:
        return Error.model_validate_json(content)
    except ValidationError:
        return Error(
            code=response.status_code,
            message=response.reason_phrase,
            more_info=response.text,
        )


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


@dataclass(frozen=True)
class ByteRange:
    """Inclusive byte range of a chunk within a larger payload.

    Attributes:
        start: Offset of the first byte
        end: Offset of the last byte (inclusive)
        total: Size of the whole payload, if known
    """

    start: int
    end: int
    total: int | None = None

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid byte range {self.start}-{self.end}")
        if self.total is not None and self.end >= self.total:
            raise ValueError(
                f"Byte range {self.start}-{self.end} exceeds total size {self.total}"
            )

    @classmethod
    def for_chunk(cls, offset: int, size: int, total: int | None = None) -> ByteRange:
        return cls(offset, offset + size - 1, total)

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def range_header(self) -> str:
        return f"bytes={self.start}-{self.end}"

    def content_range_header(self) -> str:
        total = "*" if self.total is None else str(self.total)
        return f"bytes {self.start}-{self.end}/{total}"


class ResourceClient:
    """Issues resource requests on an injected ``httpx.AsyncClient``.

    The transport is borrowed: this class never opens or closes it, and it may
    be shared by concurrent calls.
    """

    def __init__(self, http_client: httpx.AsyncClient):
        self._http = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http

    async def _ensure_success(self, response: httpx.Response) -> httpx.Response:
        logger.debug(
            "%s %s -> %d %s",
            response.request.method,
            response.request.url,
            response.status_code,
            response.reason_phrase,
        )
        if response.is_success:
            return response

        raise ApiException(response.status_code, await to_error(response))

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        with request_context(method, url):
            logger.debug("%s %s", method, url)
            response = await self._http.request(method, url, **kwargs)
            return await self._ensure_success(response)

    async def get_resource(
        self, path: str, response_type: type[T], options: QueryOptions = None
    ) -> T:
        """GET a resource and deserialize its JSON body as ``response_type``.

        Raises:
            ApiException: If the response status is not 2xx
            pydantic.ValidationError: If a success body does not match the type
        """
        response = await self._request("GET", add_options(path, options))
        return _adapter(response_type).validate_json(response.content)

    async def get_content(self, path: str, options: QueryOptions = None) -> bytes:
        """GET a resource and return its raw body (e.g. a fax image)."""
        response = await self._request("GET", add_options(path, options))
        return response.content

    async def post_resource(
        self, path: str, response_type: type[T], options: QueryOptions = None
    ) -> T:
        """POST with an empty body and deserialize the JSON response."""
        response = await self._request("POST", add_options(path, options), content=b"")
        return _adapter(response_type).validate_json(response.content)

    async def post(
        self,
        path: str,
        options: QueryOptions = None,
        *,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        files: Any = None,
    ) -> httpx.Response:
        """POST and return the raw response, for callers that need headers.

        Without ``content`` or ``files`` the body is empty, which the API reads
        as "perform the action". ``files`` are sent as ``multipart/mixed``.

        Raises:
            ValueError: If both ``content`` and ``files`` are given
        """
        if content is not None and files is not None:
            raise ValueError("Pass either content or files, not both")

        url = add_options(path, options)
        if files is not None:
            return await self._post_multipart(url, files, headers)

        return await self._request(
            "POST",
            url,
            content=content if content is not None else b"",
            headers=dict(headers) if headers else None,
        )

    async def _post_multipart(
        self, url: str, files: Any, headers: Mapping[str, str] | None
    ) -> httpx.Response:
        # httpx only encodes form-data; keep its boundary and swap the subtype
        request = self._http.build_request(
            "POST", url, files=files, headers=dict(headers) if headers else None
        )
        request.headers["Content-Type"] = request.headers["Content-Type"].replace(
            "multipart/form-data", MULTIPART_MIXED, 1
        )
        with request_context("POST", url):
            logger.debug("POST %s (%s)", url, MULTIPART_MIXED)
            response = await self._http.send(request)
            return await self._ensure_success(response)

    async def post_range(
        self, path: str, content: bytes, byte_range: ByteRange
    ) -> httpx.Response:
        """POST one chunk of a larger payload with its byte range headers."""
        request = self._http.build_request(
            "POST",
            path,
            content=content,
            headers={
                "Content-Type": OCTET_STREAM,
                "Range": byte_range.range_header(),
                "Content-Range": byte_range.content_range_header(),
            },
        )
        with request_context("POST", path):
            logger.debug("POST %s (%s)", path, byte_range.content_range_header())
            response = await self._http.send(request)
            return await self._ensure_success(response)

    async def delete_resource(self, path: str) -> str:
        """DELETE a resource and return the response's reason phrase."""
        response = await self._request("DELETE", path)
        return response.reason_phrase
