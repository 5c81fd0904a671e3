"""
Logging Setup
=============

Standard library logging configured for the service.

Every record carries the id of the HTTP request being served (or "-" outside
a request), so log lines from the controller, use cases and repository can be
correlated.
"""
import logging
import sys
from contextvars import ContextVar
from typing import Optional

# Request id for the current task, set by the request id middleware
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [request_id=%(request_id)s] %(message)s"


class RequestIdFilter(logging.Filter):
    """Attach the current request id to each log record."""
    
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging for the application.
    
    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    
    Raises:
        ValueError: If the level name is unknown
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(
            f"Invalid log level: {level!r}. "
            "Valid levels are: DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)


def set_request_id(request_id: Optional[str]) -> None:
    """Set the request id for the current context."""
    request_id_var.set(request_id)


def get_request_id() -> Optional[str]:
    """Get the request id for the current context, if any."""
    return request_id_var.get()
