import json

import httpx
import pytest

from forecast.client import ApiClient, AsyncApiClient
from forecast.config import DEFAULT_BASE_URL
from forecast.domain import ExcludeBlock, ExtendBy, Lang, Units
from forecast.errors import TransportFailure
from forecast.models.requests import ForecastRequestBuilder, TimeMachineRequestBuilder
from forecast.serde import parse_response

API_KEY = "some_api_key"
LOCATION = "6.6600000000000001,66.5999999999999943"


def _forecast_request():
    return (
        ForecastRequestBuilder(API_KEY, 6.66, 66.6, base_url=DEFAULT_BASE_URL)
        .add_exclusion(ExcludeBlock.HOURLY)
        .add_exclusions([ExcludeBlock.DAILY, ExcludeBlock.ALERTS])
        .set_extend(ExtendBy.HOURLY)
        .set_language(Lang.ARABIC)
        .set_units(Units.IMPERIAL)
        .build()
    )


def _time_machine_request():
    return TimeMachineRequestBuilder(API_KEY, 6.66, 66.6, 666, base_url=DEFAULT_BASE_URL).build()


def test_get_forecast_issues_get_to_request_url(forecast_body):
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, text=forecast_body)

    with httpx.Client(transport=httpx.MockTransport(handler)) as http_client:
        response = ApiClient(http_client).get_forecast(_forecast_request())

    assert response.status_code == 200
    assert parse_response(response.content).timezone == "America/Los_Angeles"

    request = seen[0]
    assert request.method == "GET"
    assert request.url.host == "api.darksky.net"
    assert request.url.path == f"/forecast/{API_KEY}/{LOCATION}"
    assert request.url.params["exclude"] == "hourly,daily,alerts"
    assert request.url.params["extend"] == "hourly"
    assert request.url.params["lang"] == "ar"
    assert request.url.params["units"] == "us"


def test_get_time_machine_puts_time_in_path():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json={"latitude": 6.66, "longitude": 66.6, "timezone": "UTC"})

    with httpx.Client(transport=httpx.MockTransport(handler)) as http_client:
        response = ApiClient(http_client).get_time_machine(_time_machine_request())

    assert response.json()["timezone"] == "UTC"
    assert seen[0].url.path == f"/forecast/{API_KEY}/{LOCATION},666"
    assert not seen[0].url.params


def test_non_success_status_is_returned_unchanged():
    body = json.dumps({"code": 403, "error": "permission denied"})
    transport = httpx.MockTransport(lambda request: httpx.Response(403, text=body))

    with httpx.Client(transport=transport) as http_client:
        response = ApiClient(http_client).get_forecast(_forecast_request())

    assert response.status_code == 403
    assert response.text == body


def test_transport_failure_propagates():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as http_client:
        with pytest.raises(TransportFailure):
            ApiClient(http_client).get_forecast(_forecast_request())


def test_timeout_propagates_as_httpx_timeout():
    def handler(request: httpx.Request):
        raise httpx.ReadTimeout("timed out", request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as http_client:
        with pytest.raises(httpx.TimeoutException):
            ApiClient(http_client).get_time_machine(_time_machine_request())


def test_injected_client_is_left_open():
    http_client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))

    with ApiClient(http_client) as api_client:
        api_client.get_forecast(_forecast_request())

    assert not http_client.is_closed
    http_client.close()


def test_owned_client_is_closed():
    api_client = ApiClient()
    api_client.close()

    assert api_client.http_client.is_closed


@pytest.mark.anyio
async def test_async_get_forecast(forecast_body):
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, text=forecast_body)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        async with AsyncApiClient(http_client) as api_client:
            response = await api_client.get_forecast(_forecast_request())
        assert not http_client.is_closed

    assert parse_response(response.content).flags.units is Units.IMPERIAL
    assert seen[0].url.params["lang"] == "ar"


@pytest.mark.anyio
async def test_async_get_time_machine_returns_error_status():
    transport = httpx.MockTransport(lambda request: httpx.Response(400, text="bad request"))

    async with httpx.AsyncClient(transport=transport) as http_client:
        response = await AsyncApiClient(http_client).get_time_machine(_time_machine_request())

    assert response.status_code == 400


@pytest.mark.anyio
async def test_async_transport_failure_propagates():
    def handler(request: httpx.Request):
        raise httpx.ConnectTimeout("timeout", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        with pytest.raises(httpx.TimeoutException):
            await AsyncApiClient(http_client).get_forecast(_forecast_request())


@pytest.mark.anyio
async def test_async_owned_client_is_closed():
    api_client = AsyncApiClient()
    await api_client.aclose()

    assert api_client.http_client.is_closed
