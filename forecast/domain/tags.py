"""Enumerated tags exchanged with the forecast API."""

from __future__ import annotations

from enum import Enum

from forecast.errors import UnrecognizedTag


class WireTag(str, Enum):
    """Base for enums whose value is the tag's wire string."""

    @classmethod
    def variants(cls) -> list["WireTag"]:
        return list(cls)

    @classmethod
    def from_wire(cls, value: str) -> "WireTag":
        try:
            return cls(value)
        except ValueError:
            raise UnrecognizedTag(cls.__name__, value) from None

    def to_wire(self) -> str:
        return self.value


class ExcludeBlock(WireTag):
    """Response section to leave out of the payload."""

    CURRENTLY = "currently"
    MINUTELY = "minutely"
    HOURLY = "hourly"
    DAILY = "daily"
    ALERTS = "alerts"
    FLAGS = "flags"


class ExtendBy(WireTag):
    """Report hourly data for 168 hours into the future instead of 48."""

    HOURLY = "hourly"


class Lang(WireTag):
    """Language of the summary text in the response."""

    ARABIC = "ar"
    AZERBAIJANI = "az"
    BELARUSIAN = "be"
    BOSNIAN = "bs"
    CZECH = "cz"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    CROATIAN = "hr"
    HUNGARIAN = "hu"
    INDONESIAN = "id"
    ITALIAN = "it"
    ICELANDIC = "is"
    CORNISH = "kw"
    NORWEGIAN_BOKMAL = "nb"
    DUTCH = "nl"
    POLISH = "pl"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SERBIAN = "sr"
    SWEDISH = "sv"
    TETUM = "tet"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    IGPAY_ATINLAY = "x-pig-latin"
    SIMPLIFIED_CHINESE = "zh"
    TRADITIONAL_CHINESE = "zh-tw"


class Units(WireTag):
    """Measurement unit system."""

    AUTO = "auto"
    CA = "ca"
    UK = "uk2"
    IMPERIAL = "us"
    SI = "si"


class Icon(WireTag):
    """Machine-readable summary of conditions, suitable for picking an icon."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"
    WIND = "wind"
    FOG = "fog"
    CLOUDY = "cloudy"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    TORNADO = "tornado"


class PrecipType(WireTag):
    """Kind of precipitation occurring at a point in time."""

    RAIN = "rain"
    SNOW = "snow"
    SLEET = "sleet"


class AlertSeverity(WireTag):
    """Severity of a government weather alert."""

    ADVISORY = "advisory"
    WATCH = "watch"
    WARNING = "warning"


__all__ = [
    "AlertSeverity",
    "ExcludeBlock",
    "ExtendBy",
    "Icon",
    "Lang",
    "PrecipType",
    "Units",
    "WireTag",
]
