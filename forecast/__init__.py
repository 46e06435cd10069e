"""Client library for the Dark Sky style Forecast and Time Machine API."""

from .client import ApiClient, AsyncApiClient
from .domain import AlertSeverity, ExcludeBlock, ExtendBy, Icon, Lang, PrecipType, Units
from .errors import ForecastError, MalformedResponse, TransportFailure, UnrecognizedTag
from .models import (
    Alert,
    ApiResponse,
    DataBlock,
    DataPoint,
    Flags,
    ForecastRequest,
    ForecastRequestBuilder,
    TimeMachineRequest,
    TimeMachineRequestBuilder,
)
from .serde import dump_payload, dump_response, parse_payload, parse_response

__all__ = [
    "Alert",
    "AlertSeverity",
    "ApiClient",
    "ApiResponse",
    "AsyncApiClient",
    "DataBlock",
    "DataPoint",
    "ExcludeBlock",
    "ExtendBy",
    "Flags",
    "ForecastError",
    "ForecastRequest",
    "ForecastRequestBuilder",
    "Icon",
    "Lang",
    "MalformedResponse",
    "PrecipType",
    "TimeMachineRequest",
    "TimeMachineRequestBuilder",
    "TransportFailure",
    "Units",
    "UnrecognizedTag",
    "dump_payload",
    "dump_response",
    "parse_payload",
    "parse_response",
]
