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

"""Inbound fax endpoints."""

from __future__ import annotations

from interfax.models import ForwardingEmail, InboundFax
from interfax.options import InboundListOptions, InboundResendOptions, MarkOptions

from ._base import Resource

FAXES = "/inbound/faxes"


class Inbound(Resource):
    """Received faxes."""

    async def list(self, options: InboundListOptions | None = None) -> list[InboundFax]:
        return await self._client.get_resource(FAXES, list[InboundFax], options)

    async def get(self, message_id: int) -> InboundFax:
        return await self._client.get_resource(f"{FAXES}/{message_id}", InboundFax)

    async def image(self, message_id: int) -> bytes:
        return await self._client.get_content(f"{FAXES}/{message_id}/image")

    async def emails(self, message_id: int) -> list[ForwardingEmail]:
        """Addresses the fax was forwarded to, with delivery status."""
        return await self._client.get_resource(
            f"{FAXES}/{message_id}/emails", list[ForwardingEmail]
        )

    async def mark(self, message_id: int, unread: bool) -> str:
        """Mark a fax as read or unread."""
        response = await self._client.post(
            f"{FAXES}/{message_id}/mark", MarkOptions(unread=unread)
        )
        return response.reason_phrase

    async def resend(self, message_id: int, email: str | None = None) -> str:
        """Forward the fax again, to its original recipients or to ``email``."""
        response = await self._client.post(
            f"{FAXES}/{message_id}/resend", InboundResendOptions(email=email)
        )
        return response.reason_phrase
