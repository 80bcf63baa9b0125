"""
Wire Enum Codec

Closed enumerations used by the forecast API and the token tables that map
each variant to the string the API puts on the wire.

Every enum has exactly one hand-written table, so the wire contract is
visible here and nowhere else. Tokens are bare strings ("ar", not '"ar"'):
nothing in this module knows about JSON or HTTP.

The one irregular case is Lang.NORWEGIAN_BOKMAL, which decodes from both
"nb" and "no" but always encodes to "nb".
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto
from typing import Generic, TypeVar

from .errors import UnrecognizedToken

E = TypeVar("E", bound=Enum)


# -----------------------------------------------------------------------------
# Enumerations
# -----------------------------------------------------------------------------


class ExcludeBlock(Enum):
    """Response sections a caller can ask the API to omit."""

    CURRENTLY = auto()
    MINUTELY = auto()
    HOURLY = auto()
    DAILY = auto()
    ALERTS = auto()
    FLAGS = auto()


class ExtendBy(Enum):
    """Extend the hourly window from 48 to 168 hours."""

    HOURLY = auto()


class Lang(Enum):
    """Language of the text summaries in the response."""

    ARABIC = auto()
    AZERBAIJANI = auto()
    BELARUSIAN = auto()
    BULGARIAN = auto()
    BOSNIAN = auto()
    CATALAN = auto()
    CZECH = auto()
    DANISH = auto()
    GERMAN = auto()
    GREEK = auto()
    ENGLISH = auto()
    SPANISH = auto()
    ESTONIAN = auto()
    FINNISH = auto()
    FRENCH = auto()
    CROATIAN = auto()
    HUNGARIAN = auto()
    INDONESIAN = auto()
    ICELANDIC = auto()
    ITALIAN = auto()
    JAPANESE = auto()
    GEORGIAN = auto()
    KOREAN = auto()
    CORNISH = auto()
    NORWEGIAN_BOKMAL = auto()
    DUTCH = auto()
    POLISH = auto()
    PORTUGUESE = auto()
    ROMANIAN = auto()
    RUSSIAN = auto()
    SLOVAK = auto()
    SLOVENIAN = auto()
    SERBIAN = auto()
    SWEDISH = auto()
    TETUM = auto()
    TURKISH = auto()
    UKRAINIAN = auto()
    IGPAY_ATINLAY = auto()
    SIMPLIFIED_CHINESE = auto()
    TRADITIONAL_CHINESE = auto()


class Units(Enum):
    """Measurement units for response data."""

    AUTO = auto()
    CA = auto()
    UK = auto()
    IMPERIAL = auto()
    SI = auto()


class Severity(Enum):
    """Severity of a weather alert."""

    ADVISORY = auto()
    WATCH = auto()
    WARNING = auto()


class Icon(Enum):
    """Machine-readable summary of a data point, suitable for picking an icon."""

    CLEAR_DAY = auto()
    CLEAR_NIGHT = auto()
    RAIN = auto()
    SNOW = auto()
    SLEET = auto()
    WIND = auto()
    FOG = auto()
    CLOUDY = auto()
    PARTLY_CLOUDY_DAY = auto()
    PARTLY_CLOUDY_NIGHT = auto()
    HAIL = auto()
    THUNDERSTORM = auto()
    TORNADO = auto()


class PrecipType(Enum):
    """Type of precipitation at a data point."""

    RAIN = auto()
    SNOW = auto()
    SLEET = auto()


# -----------------------------------------------------------------------------
# Codec
# -----------------------------------------------------------------------------


class WireCodec(Generic[E]):
    """
    Bidirectional mapping between one enum type and its wire tokens.

    - tokens: exactly one output token per variant (encode direction)
    - aliases: extra input-only tokens accepted by decode

    The table is checked at construction. A missing variant, a repeated
    token, or an alias shadowing a primary token raises ValueError, so a
    broken table fails at import time rather than on some later request.
    """

    def __init__(
        self,
        enum_type: type[E],
        tokens: Mapping[E, str],
        aliases: Mapping[str, E] | None = None,
    ) -> None:
        missing = [member.name for member in enum_type if member not in tokens]
        if missing:
            raise ValueError(
                f"{enum_type.__name__} codec has no token for: {', '.join(missing)}"
            )

        decode_table: dict[str, E] = {}
        for member, token in tokens.items():
            if token in decode_table:
                raise ValueError(
                    f"{enum_type.__name__} token {token!r} is used by "
                    f"{decode_table[token].name} and {member.name}"
                )
            decode_table[token] = member

        for alias, member in (aliases or {}).items():
            if alias in decode_table:
                raise ValueError(
                    f"{enum_type.__name__} alias {alias!r} shadows a primary token"
                )
            decode_table[alias] = member

        self.enum_type = enum_type
        self._encode_table: dict[E, str] = dict(tokens)
        self._decode_table = decode_table

    def encode(self, variant: E) -> str:
        """Return the bare wire token for a variant."""
        return self._encode_table[variant]

    def decode(self, token: str) -> E:
        """Return the variant named by a wire token, or raise UnrecognizedToken."""
        try:
            return self._decode_table[token]
        except (KeyError, TypeError):
            raise UnrecognizedToken(self.enum_type, token) from None

    def tokens(self) -> list[str]:
        """All tokens decode accepts, primary tokens first."""
        return list(self._decode_table)


# -----------------------------------------------------------------------------
# Token Tables
# -----------------------------------------------------------------------------

EXCLUDE_BLOCK_CODEC: WireCodec[ExcludeBlock] = WireCodec(
    ExcludeBlock,
    {
        ExcludeBlock.CURRENTLY: "currently",
        ExcludeBlock.MINUTELY: "minutely",
        ExcludeBlock.HOURLY: "hourly",
        ExcludeBlock.DAILY: "daily",
        ExcludeBlock.ALERTS: "alerts",
        ExcludeBlock.FLAGS: "flags",
    },
)

EXTEND_BY_CODEC: WireCodec[ExtendBy] = WireCodec(
    ExtendBy,
    {ExtendBy.HOURLY: "hourly"},
)

LANG_CODEC: WireCodec[Lang] = WireCodec(
    Lang,
    {
        Lang.ARABIC: "ar",
        Lang.AZERBAIJANI: "az",
        Lang.BELARUSIAN: "be",
        Lang.BULGARIAN: "bg",
        Lang.BOSNIAN: "bs",
        Lang.CATALAN: "ca",
        Lang.CZECH: "cz",
        Lang.DANISH: "da",
        Lang.GERMAN: "de",
        Lang.GREEK: "el",
        Lang.ENGLISH: "en",
        Lang.SPANISH: "es",
        Lang.ESTONIAN: "et",
        Lang.FINNISH: "fi",
        Lang.FRENCH: "fr",
        Lang.CROATIAN: "hr",
        Lang.HUNGARIAN: "hu",
        Lang.INDONESIAN: "id",
        Lang.ICELANDIC: "is",
        Lang.ITALIAN: "it",
        Lang.JAPANESE: "ja",
        Lang.GEORGIAN: "ka",
        Lang.KOREAN: "ko",
        Lang.CORNISH: "kw",
        Lang.NORWEGIAN_BOKMAL: "nb",
        Lang.DUTCH: "nl",
        Lang.POLISH: "pl",
        Lang.PORTUGUESE: "pt",
        Lang.ROMANIAN: "ro",
        Lang.RUSSIAN: "ru",
        Lang.SLOVAK: "sk",
        Lang.SLOVENIAN: "sl",
        Lang.SERBIAN: "sr",
        Lang.SWEDISH: "sv",
        Lang.TETUM: "tet",
        Lang.TURKISH: "tr",
        Lang.UKRAINIAN: "uk",
        Lang.IGPAY_ATINLAY: "x-pig-latin",
        Lang.SIMPLIFIED_CHINESE: "zh",
        Lang.TRADITIONAL_CHINESE: "zh-tw",
    },
    # Older API responses use "no" for Norwegian Bokmal. Accepted on input only.
    aliases={"no": Lang.NORWEGIAN_BOKMAL},
)

UNITS_CODEC: WireCodec[Units] = WireCodec(
    Units,
    {
        Units.AUTO: "auto",
        Units.CA: "ca",
        Units.UK: "uk2",
        Units.IMPERIAL: "us",
        Units.SI: "si",
    },
)

SEVERITY_CODEC: WireCodec[Severity] = WireCodec(
    Severity,
    {
        Severity.ADVISORY: "advisory",
        Severity.WATCH: "watch",
        Severity.WARNING: "warning",
    },
)

ICON_CODEC: WireCodec[Icon] = WireCodec(
    Icon,
    {
        Icon.CLEAR_DAY: "clear-day",
        Icon.CLEAR_NIGHT: "clear-night",
        Icon.RAIN: "rain",
        Icon.SNOW: "snow",
        Icon.SLEET: "sleet",
        Icon.WIND: "wind",
        Icon.FOG: "fog",
        Icon.CLOUDY: "cloudy",
        Icon.PARTLY_CLOUDY_DAY: "partly-cloudy-day",
        Icon.PARTLY_CLOUDY_NIGHT: "partly-cloudy-night",
        Icon.HAIL: "hail",
        Icon.THUNDERSTORM: "thunderstorm",
        Icon.TORNADO: "tornado",
    },
)

PRECIP_TYPE_CODEC: WireCodec[PrecipType] = WireCodec(
    PrecipType,
    {
        PrecipType.RAIN: "rain",
        PrecipType.SNOW: "snow",
        PrecipType.SLEET: "sleet",
    },
)

CODECS: dict[type[Enum], WireCodec] = {
    codec.enum_type: codec
    for codec in (
        EXCLUDE_BLOCK_CODEC,
        EXTEND_BY_CODEC,
        LANG_CODEC,
        UNITS_CODEC,
        SEVERITY_CODEC,
        ICON_CODEC,
        PRECIP_TYPE_CODEC,
    )
}


# -----------------------------------------------------------------------------
# Helper Functions
# -----------------------------------------------------------------------------


def codec_for(enum_type: type[E]) -> WireCodec[E]:
    """Look up the codec registered for an enum type."""
    try:
        return CODECS[enum_type]
    except KeyError:
        raise TypeError(f"No wire codec registered for {enum_type.__name__}") from None


def encode(variant: Enum) -> str:
    """Encode any registered enum variant to its wire token."""
    return codec_for(type(variant)).encode(variant)


def decode(enum_type: type[E], token: str) -> E:
    """Decode a wire token into a variant of enum_type."""
    return codec_for(enum_type).decode(token)
