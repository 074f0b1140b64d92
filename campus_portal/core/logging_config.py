import logging
import logging.config
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("request")


class RequestContextFilter(logging.Filter):
    """Fill request context fields so the formatter never fails on plain records."""

    def filter(self, record):
        if not hasattr(record, "request_id"):
            record.request_id = "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_context": {"()": RequestContextFilter},
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s %(levelname)s [%(name)s] [%(request_id)s] %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "filters": ["request_context"],
            },
        },
        "loggers": {
            "campus_portal": {"handlers": ["console"], "level": level, "propagate": False},
            "request": {"handlers": ["console"], "level": level, "propagate": False},
        },
    })


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Gives every request a short id and writes one access line:
    HTTP METHOD PATH -> STATUS (ms)
    """

    async def dispatch(self, request, call_next):
        request_id = uuid.uuid4().hex[:10]
        request.state.request_id = request_id
        t0 = time.time()
        status = 500
        try:
            response = await call_next(request)
            status = response.status_code
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            dur_ms = int((time.time() - t0) * 1000)
            logger.info(
                "HTTP %s %s -> %s (%sms)",
                request.method,
                request.url.path,
                status,
                dur_ms,
                extra={"request_id": request_id},
            )
