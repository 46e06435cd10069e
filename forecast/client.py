"""Forecast API client facades over an injected httpx client."""

from __future__ import annotations

import logging
from typing import Union

import httpx

from forecast.config import settings
from forecast.models.requests import ForecastRequest, TimeMachineRequest

logger = logging.getLogger("forecast.client")

AnyRequest = Union[ForecastRequest, TimeMachineRequest]


class ApiClient:
    """Issue Forecast and Time Machine requests with a synchronous httpx client.

    Calls return the raw :class:`httpx.Response`. httpx has already read the
    body into memory, but status codes are not interpreted and the body is not
    decoded; that is left to :func:`forecast.serde.parse_response`. Transport
    errors propagate as raised by httpx.
    """

    def __init__(self, http_client: httpx.Client | None = None) -> None:
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=settings.timeout)

    def get_forecast(self, request: ForecastRequest) -> httpx.Response:
        return self._get(request)

    def get_time_machine(self, request: TimeMachineRequest) -> httpx.Response:
        return self._get(request)

    def _get(self, request: AnyRequest) -> httpx.Response:
        response = self.http_client.get(request.url)
        logger.debug("GET %s -> %s", request.redacted_url, response.status_code)
        return response

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class AsyncApiClient:
    """Async counterpart of :class:`ApiClient` over :class:`httpx.AsyncClient`."""

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=settings.timeout)

    async def get_forecast(self, request: ForecastRequest) -> httpx.Response:
        return await self._get(request)

    async def get_time_machine(self, request: TimeMachineRequest) -> httpx.Response:
        return await self._get(request)

    async def _get(self, request: AnyRequest) -> httpx.Response:
        response = await self.http_client.get(request.url)
        logger.debug("GET %s -> %s", request.redacted_url, response.status_code)
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "AsyncApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["ApiClient", "AsyncApiClient"]
