import logging

from opentelemetry.instrumentation.logging import LoggingInstrumentor

from kiters.config import LoggingSettings
from kiters.context import get_request_id

# Placeholder written to records logged outside of a request.
NO_REQUEST_ID = "-"


class RequestIdLogFilter(logging.Filter):
    """Attach the current request id to every record as ``record.request_id``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = get_request_id() or NO_REQUEST_ID
        return True


def setup_logging(settings: LoggingSettings):
    """Setup all logging configurations based on settings."""
    # List of all uvicorn loggers that need configuration
    uvicorn_loggers = ["uvicorn", "uvicorn.error", "uvicorn.access"]
    known_loggers = uvicorn_loggers

    if not settings.verbose:
        # Suppress all logging output when not verbose
        logging.getLogger().setLevel(logging.CRITICAL)
        for logger_name in known_loggers:
            logging.getLogger(logger_name).setLevel(logging.CRITICAL)
        return

    # Initialize OpenTelemetry logging instrumentation with default settings
    LoggingInstrumentor().instrument(set_logging_format=True)

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    for handler in root.handlers:
        if not any(isinstance(f, RequestIdLogFilter) for f in handler.filters):
            handler.addFilter(RequestIdLogFilter())

    # Configure all uvicorn loggers to inherit from root logger defaults
    for logger_name in known_loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.INFO)
        logger.handlers.clear()
        logger.propagate = True
