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

"""Typed payloads exchanged with the InterFAX REST API."""

from __future__ import annotations

import mimetypes
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class ApiModel(BaseModel):
    """Base for API payloads: camelCase on the wire, unknown fields kept."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class Error(BaseModel):
    """Error payload returned by the API for failed requests.

    Attributes:
        code: Status-like error code
        message: Short human readable message
        more_info: Diagnostic detail, or the raw response body
    """

    model_config = ConfigDict(populate_by_name=True)

    code: int
    message: str
    more_info: str | None = Field(default=None, alias="moreInfo")


class OutboundFax(ApiModel):
    """Outbound fax record.

    A negative ``status`` means the fax is still being processed, zero means it
    was delivered, anything positive is a failure code.
    """

    id: int | None = None
    uri: str | None = None
    status: int | None = None
    user_id: str | None = None
    pages_sent: int | None = None
    pages_submitted: int | None = None
    completion_time: datetime | None = None
    submit_time: datetime | None = None
    remote_csid: str | None = Field(default=None, alias="remoteCSID")
    sender_csid: str | None = Field(default=None, alias="senderCSID")
    duration: int | None = None
    priority: int | None = None
    units: Decimal | None = None
    cost_per_unit: Decimal | None = None
    attempts_made: int | None = None
    attempts_to_perform: int | None = None
    destination_fax: str | None = None
    subject: str | None = None
    contact: str | None = None
    reply_address: str | None = None
    page_size: str | None = None
    page_orientation: str | None = None
    page_resolution: str | None = None
    rendering: str | None = None

    @property
    def in_progress(self) -> bool:
        return self.status is not None and self.status < 0

    @property
    def delivered(self) -> bool:
        return self.status == 0


class InboundFax(ApiModel):
    """Inbound fax record."""

    message_id: int | None = None
    user_id: str | None = None
    phone_number: str | None = None
    remote_csid: str | None = Field(default=None, alias="remoteCSID")
    message_status: int | None = None
    pages: int | None = None
    message_size: int | None = None
    message_type: int | None = None
    receive_time: datetime | None = None
    caller_id: str | None = None
    message_recording_duration: int | None = None
    image_status: int | None = None
    num_of_emails: int | None = None
    num_of_failed_emails: int | None = None


class ForwardingEmail(ApiModel):
    """Email address an inbound fax was forwarded to."""

    email_address: str | None = None
    message_status: int | None = None
    completion_time: datetime | None = None


class UploadSession(ApiModel):
    """Document upload session used for chunked uploads."""

    id: str | None = None
    uri: str | None = None
    media_type: str | None = None
    document_name: str | None = None
    document_size: int | None = None
    uploaded: int | None = None
    disposition: str | None = None
    sharing: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class FaxDocument:
    """A document to fax, given either as content or as a URI.

    URIs may point at a public web resource or at a completed upload session.
    """

    content: bytes | None = None
    media_type: str = DEFAULT_MEDIA_TYPE
    filename: str | None = None
    uri: str | None = None

    def __post_init__(self) -> None:
        if (self.content is None) == (self.uri is None):
            raise ValueError("FaxDocument needs exactly one of content or uri")

    @classmethod
    def from_bytes(
        cls, content: bytes, filename: str, media_type: str | None = None
    ) -> FaxDocument:
        if media_type is None:
            media_type = mimetypes.guess_type(filename)[0] or DEFAULT_MEDIA_TYPE
        return cls(content=content, media_type=media_type, filename=filename)

    @classmethod
    def from_file(cls, path: str | Path, media_type: str | None = None) -> FaxDocument:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Document not found: {path}")
        return cls.from_bytes(path.read_bytes(), path.name, media_type)

    @classmethod
    def from_uri(cls, uri: str) -> FaxDocument:
        return cls(uri=uri)
