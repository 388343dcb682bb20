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

"""Query-string options accepted by the InterFAX endpoints.

Each endpoint that takes optional parameters has its own options model. Only
fields that are set end up in the query string, under their camelCase API
name:

    ListOptions(limit=10, sort_order=SortOrder.DESCENDING).to_dict()
    # {"limit": "10", "sortOrder": "desc"}
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class PageSize(str, Enum):
    A4 = "a4"
    LETTER = "letter"
    LEGAL = "legal"
    B4 = "b4"


class PageOrientation(str, Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class Resolution(str, Enum):
    STANDARD = "standard"
    FINE = "fine"


class Rendering(str, Enum):
    GREYSCALE = "greyscale"
    BW = "bw"


class FitToPage(str, Enum):
    SCALE = "scale"
    NO_SCALE = "noscale"


class Disposition(str, Enum):
    """How long an uploaded document stays available."""

    SINGLE_USE = "singleUse"
    MULTI_USE = "multiUse"
    PERMANENT = "permanent"


class Sharing(str, Enum):
    PRIVATE = "private"
    SHARED = "shared"


def _format_value(value: Any) -> str:
    """Render a single option value the way the API expects it."""
    if isinstance(value, Enum):
        return str(value.value)
    # bool before anything numeric, True is an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return ",".join(_format_value(item) for item in value)
    return str(value)


def format_params(values: Mapping[str, Any]) -> dict[str, str]:
    """Format raw query values, dropping the ones that are unset or empty."""
    params: dict[str, str] = {}
    for key, value in values.items():
        if value is None:
            continue
        formatted = _format_value(value)
        if formatted == "":
            continue
        params[key] = formatted
    return params


class Options(BaseModel):
    """Base class for per-call query options."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_dict(self) -> dict[str, str]:
        """Map every set option to its API name and string value."""
        return format_params(
            {
                field.alias or name: getattr(self, name)
                for name, field in type(self).model_fields.items()
            }
        )


class ListOptions(Options):
    """Options for listing outbound faxes."""

    limit: int | None = None
    last_id: int | None = None
    sort_order: SortOrder | None = None
    user_id: str | None = None


class CompletedOptions(Options):
    ids: list[int]


class SearchOptions(Options):
    """Filters for searching outbound faxes."""

    ids: list[int] | None = None
    reference: str | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None
    status: int | None = None
    user_id: str | None = None
    fax_number: str | None = None
    limit: int | None = None
    offset: int | None = None


class SendOptions(Options):
    """Options for sending a fax.

    ``fax_number`` is normally filled in by ``Outbound.send_fax``.
    """

    fax_number: str | None = None
    contact: str | None = None
    postpone_time: datetime | None = None
    retries_to_perform: int | None = None
    csid: str | None = None
    page_header: str | None = None
    reference: str | None = None
    reply_address: str | None = None
    page_size: PageSize | None = None
    fit_to_page: FitToPage | None = None
    page_orientation: PageOrientation | None = None
    resolution: Resolution | None = None
    rendering: Rendering | None = None


class ResendOptions(Options):
    fax_number: str | None = None


class InboundListOptions(Options):
    """Options for listing inbound faxes."""

    unread_only: bool | None = None
    limit: int | None = None
    last_id: int | None = None
    all_users: bool | None = None


class MarkOptions(Options):
    unread: bool


class InboundResendOptions(Options):
    email: str | None = None


class DocumentListOptions(Options):
    limit: int | None = None
    offset: int | None = None


class UploadSessionOptions(Options):
    """Options for creating a document upload session."""

    disposition: Disposition | None = None
    sharing: Sharing | None = None
