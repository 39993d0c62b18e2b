from fastapi import FastAPI
from prometheus_client import Counter, make_asgi_app

from kiters.config import MetricsSettings

PROMETHEUS_REQUEST_IDS_ISSUED = "kiters_request_ids_issued"
PROMETHEUS_REQUEST_IDS_ISSUED_DESC = "Request ids attached to handled requests"

SOURCE_GENERATED = "generated"
SOURCE_INBOUND = "inbound"

# Width label for ids not produced by a generator (inbound ids vary in length).
WIDTH_UNKNOWN = "n/a"

REQUEST_IDS_ISSUED = Counter(
    PROMETHEUS_REQUEST_IDS_ISSUED,
    PROMETHEUS_REQUEST_IDS_ISSUED_DESC,
    ["width", "source"],
)


def record_issued(width: int | None, source: str) -> None:
    label = WIDTH_UNKNOWN if width is None else str(int(width))
    REQUEST_IDS_ISSUED.labels(width=label, source=source).inc()


def setup_metrics(app: FastAPI, settings: MetricsSettings):
    """Expose Prometheus metrics on the app if enabled."""
    if not settings.enabled:
        return

    app.mount(settings.endpoint, make_asgi_app())
