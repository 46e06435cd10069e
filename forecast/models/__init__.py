"""Request and response models for the forecast client."""

from .requests import (
    ForecastRequest,
    ForecastRequestBuilder,
    TimeMachineRequest,
    TimeMachineRequestBuilder,
)
from .response import Alert, ApiResponse, DataBlock, DataPoint, Flags

__all__ = [
    "Alert",
    "ApiResponse",
    "DataBlock",
    "DataPoint",
    "Flags",
    "ForecastRequest",
    "ForecastRequestBuilder",
    "TimeMachineRequest",
    "TimeMachineRequestBuilder",
]
