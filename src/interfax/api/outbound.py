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

"""Outbound fax endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from interfax.models import FaxDocument, OutboundFax
from interfax.options import (
    CompletedOptions,
    ListOptions,
    ResendOptions,
    SearchOptions,
    SendOptions,
)

from ._base import Resource

FAXES = "/outbound/faxes"


def _multipart_part(index: int, document: FaxDocument) -> tuple[Any, ...]:
    if document.uri is not None:
        filename = document.filename or document.uri.rstrip("/").rsplit("/", 1)[-1]
        return (filename, b"", "text/plain", {"Content-Location": document.uri})
    filename = document.filename or f"document{index}"
    return (filename, document.content, document.media_type)


class Outbound(Resource):
    """Send faxes and inspect the ones already sent."""

    async def send_fax(
        self,
        fax_number: str,
        documents: FaxDocument | Sequence[FaxDocument],
        options: SendOptions | None = None,
    ) -> int:
        """Submit a fax for sending.

        A single document goes as the request body (or as a ``Content-Location``
        reference when it is a URI); several documents go as multipart parts.

        Args:
            fax_number: Destination fax number, in international format
            documents: One or more documents, sent in order
            options: Optional send options

        Returns:
            The id of the new outbound fax
        """
        if isinstance(documents, FaxDocument):
            documents = [documents]
        if not documents:
            raise ValueError("At least one document is required to send a fax")

        options = (options or SendOptions()).model_copy(update={"fax_number": fax_number})

        if len(documents) == 1:
            document = documents[0]
            if document.uri is not None:
                response = await self._client.post(
                    FAXES, options, headers={"Content-Location": document.uri}
                )
            else:
                response = await self._client.post(
                    FAXES,
                    options,
                    content=document.content,
                    headers={"Content-Type": document.media_type},
                )
        else:
            files = [
                ("file", _multipart_part(index, document))
                for index, document in enumerate(documents)
            ]
            response = await self._client.post(FAXES, options, files=files)

        return self._location_int_id(response)

    async def list(self, options: ListOptions | None = None) -> list[OutboundFax]:
        """List recent outbound faxes."""
        return await self._client.get_resource(FAXES, list[OutboundFax], options)

    async def completed(self, ids: Sequence[int]) -> list[OutboundFax]:
        """Fetch the records of the given faxes that have finished processing."""
        return await self._client.get_resource(
            f"{FAXES}/completed", list[OutboundFax], CompletedOptions(ids=list(ids))
        )

    async def get(self, fax_id: int) -> OutboundFax:
        return await self._client.get_resource(f"{FAXES}/{fax_id}", OutboundFax)

    async def image(self, fax_id: int) -> bytes:
        """Image of the fax as sent (TIFF or PDF, per account settings)."""
        return await self._client.get_content(f"{FAXES}/{fax_id}/image")

    async def cancel(self, fax_id: int) -> str:
        response = await self._client.post(f"{FAXES}/{fax_id}/cancel")
        return response.reason_phrase

    async def hide(self, fax_id: int) -> str:
        """Hide a fax from the outbound list."""
        response = await self._client.post(f"{FAXES}/{fax_id}/hide")
        return response.reason_phrase

    async def resend(self, fax_id: int, fax_number: str | None = None) -> int:
        """Resend a fax, optionally to another number.

        Returns:
            The id of the newly created outbound fax
        """
        response = await self._client.post(
            f"{FAXES}/{fax_id}/resend", ResendOptions(fax_number=fax_number)
        )
        return self._location_int_id(response)

    async def search(self, options: SearchOptions | None = None) -> list[OutboundFax]:
        return await self._client.get_resource(
            "/outbound/search", list[OutboundFax], options
        )
