"""Wire request ids into a FastAPI app.

::

    app = FastAPI()
    generator = setup_app(app)  # settings from KITERS_* environment variables
"""

from fastapi import FastAPI

from kiters.config import Settings, get_settings
from kiters.logging import setup_logging
from kiters.metrics import setup_metrics
from kiters.middleware import setup_request_id
from kiters.request_id import RequestIdGenerator
from kiters.trace import setup_tracing


def setup_app(
    app: FastAPI,
    settings: Settings | None = None,
    generator: RequestIdGenerator | None = None,
) -> RequestIdGenerator | None:
    """Set up logging, metrics, tracing and request id middleware on ``app``.

    Returns the generator backing the middleware, or ``None`` when request
    ids are disabled.
    """
    # Get settings when setting up app.
    if settings is None:
        settings = get_settings()

    setup_logging(settings.logging)
    setup_metrics(app, settings.metrics)
    setup_tracing(settings.tracing)

    return setup_request_id(app, settings.request_id, generator=generator)
