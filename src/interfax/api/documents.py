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

"""Document upload endpoints.

Large documents are uploaded in chunks to an upload session, then faxed by
passing the session URI to ``Outbound.send_fax`` via ``FaxDocument.from_uri``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from interfax.http import ByteRange
from interfax.models import UploadSession
from interfax.options import DocumentListOptions, UploadSessionOptions

from ._base import Resource

logger = logging.getLogger(__name__)

DOCUMENTS = "/outbound/documents"
DEFAULT_CHUNK_SIZE = 256 * 1024


class Documents(Resource):
    """Upload sessions for documents too large to send inline."""

    async def list(self, options: DocumentListOptions | None = None) -> list[UploadSession]:
        return await self._client.get_resource(DOCUMENTS, list[UploadSession], options)

    async def create(
        self, name: str, size: int, options: UploadSessionOptions | None = None
    ) -> str:
        """Open an upload session.

        Args:
            name: Document file name; its extension tells the API the format
            size: Total document size in bytes
            options: Optional disposition and sharing settings

        Returns:
            URI of the new upload session
        """
        response = await self._create(name, size, options)
        return self._location(response)

    async def _create(
        self, name: str, size: int, options: UploadSessionOptions | None
    ) -> httpx.Response:
        params = {"size": str(size), "name": name}
        if options is not None:
            params.update(options.to_dict())
        return await self._client.post(DOCUMENTS, params)

    async def get(self, session_id: str) -> UploadSession:
        return await self._client.get_resource(f"{DOCUMENTS}/{session_id}", UploadSession)

    async def upload_chunk(
        self, session_id: str, content: bytes, byte_range: ByteRange
    ) -> httpx.Response:
        """Upload one chunk.

        The API answers 202 while more bytes are expected and 200 once the
        document is complete.
        """
        if len(content) != byte_range.length:
            raise ValueError(
                f"Chunk is {len(content)} bytes but range "
                f"{byte_range.content_range_header()} covers {byte_range.length}"
            )
        return await self._client.post_range(
            f"{DOCUMENTS}/{session_id}", content, byte_range
        )

    async def upload(
        self,
        name: str,
        data: bytes,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        options: UploadSessionOptions | None = None,
    ) -> UploadSession:
        """Upload a whole document through a new session, chunk by chunk.

        Returns:
            The upload session record once every chunk was accepted
        """
        if not data:
            raise ValueError("Cannot upload an empty document")
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        response = await self._create(name, len(data), options)
        session_id = self._location_id(response)

        total = len(data)
        for offset in range(0, total, chunk_size):
            chunk = data[offset : offset + chunk_size]
            byte_range = ByteRange.for_chunk(offset, len(chunk), total)
            await self.upload_chunk(session_id, chunk, byte_range)
            logger.debug(
                "Uploaded %s of %s (%d bytes)",
                byte_range.content_range_header(),
                name,
                total,
            )

        return await self.get(session_id)

    async def upload_file(
        self,
        path: str | Path,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        options: UploadSessionOptions | None = None,
    ) -> UploadSession:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Document not found: {path}")
        return await self.upload(
            path.name, path.read_bytes(), chunk_size=chunk_size, options=options
        )

    async def cancel(self, session_id: str) -> str:
        """Delete an upload session and whatever was uploaded to it."""
        return await self._client.delete_resource(f"{DOCUMENTS}/{session_id}")
