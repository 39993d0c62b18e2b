import logging

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from kiters.config import REQUEST_ID_HEADER_DEFAULT, RequestIdSettings
from kiters.context import reset_request_id, set_request_id
from kiters.metrics import SOURCE_GENERATED, SOURCE_INBOUND, record_issued
from kiters.request_id import ALPHABET, RequestIdGenerator

# Longest inbound id accepted when trusting client supplied ids.
MAX_INBOUND_LENGTH = 64

_ALPHABET_CHARS = frozenset(ALPHABET)

logger = logging.getLogger(__name__)


def is_valid_request_id(value: str | None) -> bool:
    """True for a non-empty id of alphabet characters, at most 64 long."""
    if not value or len(value) > MAX_INBOUND_LENGTH:
        return False
    return _ALPHABET_CHARS.issuperset(value)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Give each request an id, bind it to the context and echo it back."""

    def __init__(
        self,
        app,
        *,
        generator: RequestIdGenerator,
        header_name: str = REQUEST_ID_HEADER_DEFAULT,
        trust_inbound: bool = False,
    ) -> None:
        super().__init__(app)
        self._generator = generator
        self._header_name = header_name
        self._trust_inbound = trust_inbound

    def _resolve(self, request: Request) -> tuple[str, str]:
        inbound = request.headers.get(self._header_name)
        if inbound is not None:
            if self._trust_inbound and is_valid_request_id(inbound):
                return inbound, SOURCE_INBOUND
            logger.debug("Ignoring inbound %s header", self._header_name)
        return self._generator.next_id_string(), SOURCE_GENERATED

    async def dispatch(self, request: Request, call_next):
        request_id, source = self._resolve(request)
        width = None if source == SOURCE_INBOUND else self._generator.width
        record_issued(width, source)
        request.state.request_id = request_id

        token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(token)

        response.headers[self._header_name] = request_id
        return response


def setup_request_id(
    app: FastAPI,
    settings: RequestIdSettings,
    generator: RequestIdGenerator | None = None,
) -> RequestIdGenerator | None:
    """Install request id middleware on the app if enabled.

    Returns the generator backing the middleware so callers can share it.
    """
    if not settings.enabled:
        return None

    if generator is None:
        generator = RequestIdGenerator(width=settings.width, mixed=settings.mixed)

    app.add_middleware(
        RequestIdMiddleware,
        generator=generator,
        header_name=settings.header_name,
        trust_inbound=settings.trust_inbound,
    )
    return generator
