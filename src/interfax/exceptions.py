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

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from interfax.models import Error


class InterFAXError(Exception):
    """Base exception for all InterFAX client errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(InterFAXError):
    """Missing or invalid client configuration."""


class ApiException(InterFAXError):
    """The InterFAX API answered with a non-success status.

    Attributes:
        status_code: HTTP status of the failed response
        error: Structured error payload built from the response
    """

    def __init__(self, status_code: HTTPStatus | int, error: Error):
        try:
            status_code = HTTPStatus(status_code)
        except ValueError:
            pass
        self.status_code = status_code
        self.error = error

        message = f"HTTP {int(status_code)}: {error.message}"
        if error.more_info:
            message = f"{message} ({error.more_info})"
        super().__init__(message)
