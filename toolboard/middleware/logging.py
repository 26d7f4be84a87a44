"""Structured logging setup and request tracking."""
import logging
import json
import time
import uuid
from typing import Callable
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from toolboard.settings import settings

SERVICE_NAME = "toolboard"

# Hit by orchestrators every few seconds
PROBE_PATHS = {"/health", "/ready"}

# Query parameters of the listing and export endpoints
LISTING_PARAMS = ("q", "source", "category", "sort")

# Status checks issue one request per tool URL
NOISY_LOGGERS = ("httpx", "httpcore")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, tagged with service and environment."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "service": SERVICE_NAME,
            "env": settings.ENV,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if hasattr(record, 'request_id'):
            log_data['request_id'] = record.request_id

        if hasattr(record, 'extra_fields'):
            log_data.update(record.extra_fields)

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def listing_filters(request: Request) -> dict[str, str]:
    """Listing filters present on the request, for log correlation."""
    return {
        name: request.query_params[name]
        for name in LISTING_PARAMS
        if name in request.query_params
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log API requests with a request ID and duration.

    Health and readiness probes are logged at DEBUG only. Listing and
    export requests carry their filters as a structured field.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.logger = logging.getLogger("toolboard.requests")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        path = request.url.path
        level = logging.DEBUG if path in PROBE_PATHS else logging.INFO
        start_time = time.time()

        fields = {
            'method': request.method,
            'path': path,
            'client_ip': request.client.host if request.client else None,
        }
        filters = listing_filters(request)
        if filters:
            fields['filters'] = filters

        try:
            response = await call_next(request)
        except Exception as e:
            fields['duration_ms'] = round((time.time() - start_time) * 1000, 2)
            fields['error'] = str(e)
            self.logger.error(
                f"Request failed: {request.method} {path} - {e}",
                extra={'request_id': request_id, 'extra_fields': fields},
                exc_info=True
            )
            raise

        fields['status_code'] = response.status_code
        fields['duration_ms'] = round((time.time() - start_time) * 1000, 2)

        # Server errors are worth seeing even on probe paths
        if response.status_code >= 500:
            level = logging.WARNING

        self.logger.log(
            level,
            f"{request.method} {path} - {response.status_code}",
            extra={'request_id': request_id, 'extra_fields': fields}
        )

        response.headers["X-Request-ID"] = request_id
        return response


def setup_logging():
    """Configure the root logger from settings."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper()))

    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()

    if settings.LOG_FORMAT == "json":
        console_handler.setFormatter(JSONFormatter())
    else:
        console_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
        )

    root_logger.addHandler(console_handler)

    if settings.LOG_FILE:
        file_handler = logging.FileHandler(settings.LOG_FILE)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.info(f"Logging configured: level={settings.LOG_LEVEL}, format={settings.LOG_FORMAT}")
