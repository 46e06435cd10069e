"""Forecast and Time Machine request models and their builders."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional
from urllib.parse import urlencode

from forecast.config import settings
from forecast.domain import ExcludeBlock, ExtendBy, Lang, Units

logger = logging.getLogger("forecast.requests")


def format_coordinate(value: float) -> str:
    """Format a coordinate as fixed-point with 16 fractional digits."""

    return format(value, ".16f")


def build_query(
    exclude: Iterable[ExcludeBlock] = (),
    extend: Optional[ExtendBy] = None,
    lang: Optional[Lang] = None,
    units: Optional[Units] = None,
) -> str:
    """Encode the optional request parameters into a query string.

    Parameters are emitted in the order exclude, extend, lang, units and are
    omitted entirely when unset. Exclusion blocks keep their insertion order,
    duplicates included, and are joined with literal commas.
    """

    params: list[tuple[str, str]] = []
    blocks = [block.to_wire() for block in exclude]
    if blocks:
        params.append(("exclude", ",".join(blocks)))
    if extend is not None:
        params.append(("extend", extend.to_wire()))
    if lang is not None:
        params.append(("lang", lang.to_wire()))
    if units is not None:
        params.append(("units", units.to_wire()))
    return urlencode(params, safe=",")


def build_url(base_url: str, api_key: str, location: list[str], query: str) -> str:
    return f"{base_url.rstrip('/')}/{api_key}/{','.join(location)}?{query}"


def redact_url(url: str, api_key: str) -> str:
    """Return ``url`` with the API key path segment masked for logging."""

    if not api_key:
        return url
    return url.replace(f"/{api_key}/", "/***/", 1)


@dataclass(frozen=True)
class ForecastRequest:
    """Request for current conditions and the forecast at a location."""

    api_key: str = field(repr=False)
    latitude: float
    longitude: float
    exclude: tuple[ExcludeBlock, ...] = ()
    extend: Optional[ExtendBy] = None
    lang: Optional[Lang] = None
    units: Optional[Units] = None
    base_url: str = field(default_factory=lambda: settings.base_url, repr=False)
    url: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude", tuple(self.exclude))
        location = [format_coordinate(self.latitude), format_coordinate(self.longitude)]
        query = build_query(self.exclude, self.extend, self.lang, self.units)
        object.__setattr__(self, "url", build_url(self.base_url, self.api_key, location, query))

    @property
    def redacted_url(self) -> str:
        return redact_url(self.url, self.api_key)


@dataclass(frozen=True)
class TimeMachineRequest:
    """Request for observed or forecast conditions at a point in time.

    ``time`` is a UNIX epoch timestamp and travels in the URL path.
    """

    api_key: str = field(repr=False)
    latitude: float
    longitude: float
    time: int
    exclude: tuple[ExcludeBlock, ...] = ()
    lang: Optional[Lang] = None
    units: Optional[Units] = None
    base_url: str = field(default_factory=lambda: settings.base_url, repr=False)
    url: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude", tuple(self.exclude))
        location = [
            format_coordinate(self.latitude),
            format_coordinate(self.longitude),
            str(self.time),
        ]
        query = build_query(self.exclude, lang=self.lang, units=self.units)
        object.__setattr__(self, "url", build_url(self.base_url, self.api_key, location, query))

    @property
    def redacted_url(self) -> str:
        return redact_url(self.url, self.api_key)


class _RequestBuilder:
    """Accumulates the parameters shared by every request kind."""

    def __init__(
        self,
        api_key: str,
        latitude: float,
        longitude: float,
        *,
        base_url: Optional[str] = None,
    ) -> None:
        self.api_key = api_key
        self.latitude = latitude
        self.longitude = longitude
        self.base_url = base_url or settings.base_url
        self.exclude: list[ExcludeBlock] = []
        self.lang: Optional[Lang] = None
        self.units: Optional[Units] = None

    def add_exclusion(self, block: ExcludeBlock):
        self.exclude.append(block)
        return self

    def add_exclusions(self, blocks: Iterable[ExcludeBlock]):
        self.exclude.extend(blocks)
        return self

    def set_language(self, lang: Lang):
        self.lang = lang
        return self

    def set_units(self, units: Units):
        self.units = units
        return self


class ForecastRequestBuilder(_RequestBuilder):
    """Fluent builder for :class:`ForecastRequest`.

    >>> request = (
    ...     ForecastRequestBuilder("some_api_key", 6.66, 66.6)
    ...     .add_exclusion(ExcludeBlock.HOURLY)
    ...     .set_units(Units.SI)
    ...     .build()
    ... )
    """

    def __init__(
        self,
        api_key: str,
        latitude: float,
        longitude: float,
        *,
        base_url: Optional[str] = None,
    ) -> None:
        super().__init__(api_key, latitude, longitude, base_url=base_url)
        self.extend: Optional[ExtendBy] = None

    def set_extend(self, extend: ExtendBy) -> "ForecastRequestBuilder":
        self.extend = extend
        return self

    def build(self) -> ForecastRequest:
        request = ForecastRequest(
            api_key=self.api_key,
            latitude=self.latitude,
            longitude=self.longitude,
            exclude=tuple(self.exclude),
            extend=self.extend,
            lang=self.lang,
            units=self.units,
            base_url=self.base_url,
        )
        logger.debug("Built forecast request: %s", request.redacted_url)
        return request


class TimeMachineRequestBuilder(_RequestBuilder):
    """Fluent builder for :class:`TimeMachineRequest`."""

    def __init__(
        self,
        api_key: str,
        latitude: float,
        longitude: float,
        time: int,
        *,
        base_url: Optional[str] = None,
    ) -> None:
        super().__init__(api_key, latitude, longitude, base_url=base_url)
        self.time = time

    def build(self) -> TimeMachineRequest:
        request = TimeMachineRequest(
            api_key=self.api_key,
            latitude=self.latitude,
            longitude=self.longitude,
            time=self.time,
            exclude=tuple(self.exclude),
            lang=self.lang,
            units=self.units,
            base_url=self.base_url,
        )
        logger.debug("Built time machine request: %s", request.redacted_url)
        return request


__all__ = [
    "ForecastRequest",
    "ForecastRequestBuilder",
    "TimeMachineRequest",
    "TimeMachineRequestBuilder",
    "build_query",
    "format_coordinate",
    "redact_url",
]
