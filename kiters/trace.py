import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SpanProcessor

from kiters import __version__
from kiters.config import TraceSettings
from kiters.context import get_request_id

ATTR_REQUEST_ID = "kiters.request_id"

logger = logging.getLogger(__name__)


class RequestIdSpanProcessor(SpanProcessor):
    """Span processor that tags spans with the request id bound at start."""

    attr_request_id = ATTR_REQUEST_ID

    def on_start(self, span, parent_context=None):
        request_id = get_request_id()
        if not request_id:
            return

        attrs = span.attributes or {}
        if self.attr_request_id in attrs:
            return
        span.set_attribute(self.attr_request_id, request_id)


def setup_tracing(
    settings: TraceSettings, tracer_provider: TracerProvider | None = None
) -> TracerProvider | None:
    """Register request id tagging on a tracer provider.

    When no provider is given a new one is created and installed globally.
    """
    if not settings.enabled:
        return None

    if tracer_provider is None:
        resource = Resource.create(
            attributes={
                "service.name": settings.service_name,
                "service.version": __version__,
            }
        )
        tracer_provider = TracerProvider(resource=resource)
        trace.set_tracer_provider(tracer_provider)

    tracer_provider.add_span_processor(RequestIdSpanProcessor())
    logger.debug("Request id span processor registered for %s", settings.service_name)
    return tracer_provider
