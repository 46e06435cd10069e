"""Pydantic models for Forecast and Time Machine API responses."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from forecast.domain import AlertSeverity, Icon, PrecipType, Units


class WireModel(BaseModel):
    """Immutable, strictly typed model keyed by camelCase wire names.

    Python callers may construct models by attribute name; payloads are
    validated by wire name only (see :mod:`forecast.serde`).
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        validate_by_alias=True,
        validate_by_name=True,
        extra="ignore",
    )


class DataPoint(WireModel):
    """Weather conditions at a point in time.

    Each metric is the average over the covered period unless the name says
    otherwise. Every metric except ``time`` may be absent from the payload.
    """

    time: int = Field(..., description="UNIX time the data point begins")
    summary: Optional[str] = Field(default=None, description="Human-readable summary")
    icon: Optional[Icon] = Field(default=None, description="Machine-readable summary")

    apparent_temperature: Optional[float] = Field(
        default=None, alias="apparentTemperature", description="Feels-like temperature"
    )
    apparent_temperature_high: Optional[float] = Field(
        default=None, alias="apparentTemperatureHigh",
        description="Daytime high feels-like temperature",
    )
    apparent_temperature_high_time: Optional[int] = Field(
        default=None, alias="apparentTemperatureHighTime",
        description="UNIX time of the daytime high feels-like temperature",
    )
    apparent_temperature_low: Optional[float] = Field(
        default=None, alias="apparentTemperatureLow",
        description="Overnight low feels-like temperature",
    )
    apparent_temperature_low_time: Optional[int] = Field(
        default=None, alias="apparentTemperatureLowTime",
        description="UNIX time of the overnight low feels-like temperature",
    )
    apparent_temperature_max: Optional[float] = Field(
        default=None, alias="apparentTemperatureMax",
        description="Maximum feels-like temperature for the day",
    )
    apparent_temperature_max_time: Optional[int] = Field(
        default=None, alias="apparentTemperatureMaxTime",
        description="UNIX time of the maximum feels-like temperature",
    )
    apparent_temperature_min: Optional[float] = Field(
        default=None, alias="apparentTemperatureMin",
        description="Minimum feels-like temperature for the day",
    )
    apparent_temperature_min_time: Optional[int] = Field(
        default=None, alias="apparentTemperatureMinTime",
        description="UNIX time of the minimum feels-like temperature",
    )
    cloud_cover: Optional[float] = Field(
        default=None, alias="cloudCover", description="Fraction of sky covered, 0 to 1"
    )
    dew_point: Optional[float] = Field(default=None, alias="dewPoint", description="Dew point")
    humidity: Optional[float] = Field(default=None, description="Relative humidity, 0 to 1")
    moon_phase: Optional[float] = Field(
        default=None, alias="moonPhase", description="Fractional lunation number"
    )
    nearest_storm_bearing: Optional[float] = Field(
        default=None, alias="nearestStormBearing",
        description="Direction of the nearest storm in degrees from true north",
    )
    nearest_storm_distance: Optional[float] = Field(
        default=None, alias="nearestStormDistance", description="Distance to the nearest storm"
    )
    ozone: Optional[float] = Field(default=None, description="Columnar ozone density in Dobson units")
    precip_accumulation: Optional[float] = Field(
        default=None, alias="precipAccumulation", description="Snowfall accumulation"
    )
    precip_intensity: Optional[float] = Field(
        default=None, alias="precipIntensity", description="Precipitation intensity"
    )
    precip_intensity_error: Optional[float] = Field(
        default=None, alias="precipIntensityError",
        description="Standard deviation of the precipitation intensity",
    )
    precip_intensity_max: Optional[float] = Field(
        default=None, alias="precipIntensityMax", description="Maximum precipitation intensity"
    )
    precip_intensity_max_time: Optional[int] = Field(
        default=None, alias="precipIntensityMaxTime",
        description="UNIX time of the maximum precipitation intensity",
    )
    precip_probability: Optional[float] = Field(
        default=None, alias="precipProbability", description="Chance of precipitation, 0 to 1"
    )
    precip_type: Optional[PrecipType] = Field(
        default=None, alias="precipType", description="Kind of precipitation"
    )
    pressure: Optional[float] = Field(default=None, description="Sea-level air pressure")
    sunrise_time: Optional[int] = Field(
        default=None, alias="sunriseTime", description="UNIX time of sunrise"
    )
    sunset_time: Optional[int] = Field(
        default=None, alias="sunsetTime", description="UNIX time of sunset"
    )
    temperature: Optional[float] = Field(default=None, description="Air temperature")
    temperature_high: Optional[float] = Field(
        default=None, alias="temperatureHigh", description="Daytime high temperature"
    )
    temperature_high_time: Optional[int] = Field(
        default=None, alias="temperatureHighTime",
        description="UNIX time of the daytime high temperature",
    )
    temperature_low: Optional[float] = Field(
        default=None, alias="temperatureLow", description="Overnight low temperature"
    )
    temperature_low_time: Optional[int] = Field(
        default=None, alias="temperatureLowTime",
        description="UNIX time of the overnight low temperature",
    )
    temperature_max: Optional[float] = Field(
        default=None, alias="temperatureMax", description="Maximum temperature for the day"
    )
    temperature_max_time: Optional[int] = Field(
        default=None, alias="temperatureMaxTime", description="UNIX time of the maximum temperature"
    )
    temperature_min: Optional[float] = Field(
        default=None, alias="temperatureMin", description="Minimum temperature for the day"
    )
    temperature_min_time: Optional[int] = Field(
        default=None, alias="temperatureMinTime", description="UNIX time of the minimum temperature"
    )
    uv_index: Optional[float] = Field(default=None, alias="uvIndex", description="UV index")
    uv_index_time: Optional[int] = Field(
        default=None, alias="uvIndexTime", description="UNIX time of the maximum UV index"
    )
    visibility: Optional[float] = Field(default=None, description="Average visibility")
    wind_bearing: Optional[float] = Field(
        default=None, alias="windBearing",
        description="Direction the wind is coming from in degrees from true north",
    )
    wind_gust: Optional[float] = Field(default=None, alias="windGust", description="Wind gust speed")
    wind_gust_time: Optional[int] = Field(
        default=None, alias="windGustTime", description="UNIX time of the maximum wind gust"
    )
    wind_speed: Optional[float] = Field(default=None, alias="windSpeed", description="Wind speed")


class DataBlock(WireModel):
    """Weather conditions over a period of time, as a series of data points."""

    data: list[DataPoint] = Field(..., description="Data points ordered by time")
    summary: Optional[str] = Field(default=None, description="Human-readable summary")
    icon: Optional[Icon] = Field(default=None, description="Machine-readable summary")


class Alert(WireModel):
    """Severe weather warning issued by a government authority."""

    title: str = Field(..., description="Brief description of the alert")
    description: str = Field(..., description="Detailed description of the alert")
    severity: AlertSeverity = Field(..., description="Severity of the weather alert")
    regions: list[str] = Field(..., description="Names of regions covered by the alert")
    time: int = Field(..., description="UNIX time the alert was issued")
    expires: int = Field(..., description="UNIX time the alert will expire")
    uri: str = Field(..., description="Link to detailed information about the alert")


class Flags(WireModel):
    """Miscellaneous metadata about a request."""

    sources: list[str] = Field(..., description="Data sources used to build the response")
    units: Units = Field(..., description="Units used for the response data")
    darksky_unavailable: Optional[str] = Field(
        default=None, alias="darksky-unavailable",
        description="Present when the service is degraded for the location",
    )
    metno_license: Optional[str] = Field(
        default=None, alias="metno-license", description="MET Norway license notice"
    )
    nearest_station: Optional[float] = Field(
        default=None, alias="nearest-station", description="Distance to the nearest station"
    )


class ApiResponse(WireModel):
    """Forecast or Time Machine API response."""

    latitude: float = Field(..., description="Requested latitude")
    longitude: float = Field(..., description="Requested longitude")
    timezone: str = Field(..., description="IANA timezone name for the location")
    offset: Optional[float] = Field(
        default=None, description="Current UTC offset of the location in hours"
    )
    currently: Optional[DataPoint] = Field(default=None, description="Current conditions")
    minutely: Optional[DataBlock] = Field(default=None, description="Minute-by-minute conditions")
    hourly: Optional[DataBlock] = Field(default=None, description="Hour-by-hour conditions")
    daily: Optional[DataBlock] = Field(default=None, description="Day-by-day conditions")
    alerts: Optional[list[Alert]] = Field(default=None, description="Active weather alerts")
    flags: Optional[Flags] = Field(default=None, description="Request metadata")


__all__ = ["Alert", "ApiResponse", "DataBlock", "DataPoint", "Flags", "WireModel"]
