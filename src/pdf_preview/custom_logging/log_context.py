"""Custom logging context to include the Lambda request id in log messages."""

import logging
from contextvars import ContextVar
from typing import Optional

from pdf_preview.config import settings

# Store the current invocation's request id in a context variable.
# ContextVar is context-safe.
request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class ContextFilter(logging.Filter):
    """Injects request_id into log records if present."""

    def filter(self, record):
        """Injects request_id into log records if present.

        Args:
            record (logging.LogRecord): The log record to modify.

        Returns:
            bool: Always returns True.
        """
        request_id = request_id_context.get()
        if request_id:
            record.msg = f"{request_id} {record.msg}"
        return True


def setup_logging():
    """Call this once at cold start."""
    root_logger = logging.getLogger()

    # The Lambda runtime installs its own handler; replace it so records are not emitted twice.
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    handler.setFormatter(formatter)
    handler.addFilter(ContextFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(settings.LOG_LEVEL)
