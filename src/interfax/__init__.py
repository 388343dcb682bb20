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

"""Async Python client for the InterFAX REST API.

Example:
    ```python
    from interfax import FaxDocument, InterFAX

    async with InterFAX("user", "secret") as interfax:
        balance = await interfax.account.balance()
        fax_id = await interfax.outbound.send_fax(
            "+11111111112", FaxDocument.from_file("letter.pdf")
        )
    ```

Failed calls raise ``ApiException`` carrying the HTTP status and the API's
``Error`` payload.
"""

from .client import InterFAX
from .config import ClientConfig
from .exceptions import ApiException, ConfigurationError, InterFAXError
from .http import ByteRange, ResourceClient, add_options, to_error
from .models import (
    Error,
    FaxDocument,
    ForwardingEmail,
    InboundFax,
    OutboundFax,
    UploadSession,
)
from .options import (
    Disposition,
    DocumentListOptions,
    FitToPage,
    InboundListOptions,
    ListOptions,
    Options,
    PageOrientation,
    PageSize,
    Rendering,
    Resolution,
    SearchOptions,
    SendOptions,
    Sharing,
    SortOrder,
    UploadSessionOptions,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "InterFAX",
    "ClientConfig",
    "ResourceClient",
    "ByteRange",
    "add_options",
    "to_error",
    # Errors
    "ApiException",
    "ConfigurationError",
    "InterFAXError",
    # Models
    "Error",
    "FaxDocument",
    "ForwardingEmail",
    "InboundFax",
    "OutboundFax",
    "UploadSession",
    # Options
    "Disposition",
    "DocumentListOptions",
    "FitToPage",
    "InboundListOptions",
    "ListOptions",
    "Options",
    "PageOrientation",
    "PageSize",
    "Rendering",
    "Resolution",
    "SearchOptions",
    "SendOptions",
    "Sharing",
    "SortOrder",
    "UploadSessionOptions",
]
