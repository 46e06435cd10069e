"""Tests which perform network calls against the live API.

Run with ``FORECAST_API_KEY=... pytest -m integration``.
"""

import os

import pytest

from forecast.client import ApiClient
from forecast.domain import ExcludeBlock, ExtendBy, Lang, Units
from forecast.models.requests import ForecastRequestBuilder, TimeMachineRequestBuilder
from forecast.serde import parse_response

LAT = 6.66
LONG = 66.6
TIME = 666

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.getenv("FORECAST_API_KEY"), reason="FORECAST_API_KEY not set"),
]


@pytest.fixture
def api_client():
    with ApiClient() as client:
        yield client


@pytest.fixture
def api_key():
    return os.environ["FORECAST_API_KEY"]


def test_get_forecast_request_default(api_client, api_key):
    request = ForecastRequestBuilder(api_key, LAT, LONG).build()

    response = api_client.get_forecast(request)

    assert response.status_code == 200
    assert parse_response(response.content).latitude == pytest.approx(LAT)


def test_get_forecast_request_full(api_client, api_key):
    request = (
        ForecastRequestBuilder(api_key, LAT, LONG)
        .add_exclusion(ExcludeBlock.HOURLY)
        .add_exclusions([ExcludeBlock.DAILY, ExcludeBlock.ALERTS])
        .set_extend(ExtendBy.HOURLY)
        .set_language(Lang.ARABIC)
        .set_units(Units.IMPERIAL)
        .build()
    )

    response = api_client.get_forecast(request)

    assert response.status_code == 200
    assert parse_response(response.content).daily is None


def test_get_time_machine_request_default(api_client, api_key):
    request = TimeMachineRequestBuilder(api_key, LAT, LONG, TIME).build()

    response = api_client.get_time_machine(request)

    assert response.status_code == 200


def test_get_time_machine_request_full(api_client, api_key):
    request = (
        TimeMachineRequestBuilder(api_key, LAT, LONG, TIME)
        .add_exclusion(ExcludeBlock.HOURLY)
        .add_exclusions([ExcludeBlock.DAILY, ExcludeBlock.ALERTS])
        .set_language(Lang.ARABIC)
        .set_units(Units.IMPERIAL)
        .build()
    )

    response = api_client.get_time_machine(request)

    assert response.status_code == 200
