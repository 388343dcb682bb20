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

"""Logging configuration for the InterFAX client.

The library only logs through ``logging.getLogger(__name__)``. Applications that
want structured output can call ``setup_logging()``, configured via environment
variables:
- INTERFAX_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, default: WARNING)
- INTERFAX_LOG_FORMAT: Output format (json or text, default: json)
"""

from __future__ import annotations

import contextvars
import json
import logging
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import IO

LOGGER_NAME = "interfax"

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Request currently being issued by this task, if any
_request_context: contextvars.ContextVar[dict[str, str] | None] = (
    contextvars.ContextVar("interfax_request_context", default=None)
)


class LogConfig:
    """Logging configuration read from the environment."""

    def __init__(self, level: str | None = None, format: str | None = None) -> None:
        level_str = (level or os.environ.get("INTERFAX_LOG_LEVEL", "WARNING")).upper()
        self.level = getattr(logging, level_str, logging.WARNING)
        self.format = (format or os.environ.get("INTERFAX_LOG_FORMAT", "json")).lower()

    def __repr__(self) -> str:
        return (
            f"LogConfig(level={logging.getLevelName(self.level)}, "
            f"format={self.format})"
        )


@contextmanager
def request_context(method: str, path: str) -> Iterator[None]:
    """Attach the in-flight request to log records emitted inside the block."""
    token = _request_context.set({"http_method": method, "http_path": path})
    try:
        yield
    finally:
        _request_context.reset(token)


class RequestContextFilter(logging.Filter):
    """Filter that injects the in-flight request into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = _request_context.get() or {}
        record.http_method = context.get("http_method", "")
        record.http_path = context.get("http_path", "")
        return True


class StructuredJsonFormatter(logging.Formatter):
    """JSON formatter with request context fields."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if getattr(record, "http_method", ""):
            log_entry["http_method"] = record.http_method
        if getattr(record, "http_path", ""):
            log_entry["http_path"] = record.http_path

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def setup_logging(
    config: LogConfig | None = None, stream: IO[str] | None = None
) -> logging.Logger:
    """Attach a single handler to the ``interfax`` logger.

    Calling this again replaces the handler rather than adding a second one.
    """
    if config is None:
        config = LogConfig()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(config.level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(config.level)
    if config.format == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(StructuredJsonFormatter())
    handler.addFilter(RequestContextFilter())
    package_logger.addHandler(handler)

    return package_logger
