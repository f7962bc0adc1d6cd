from .canonical import SteamID, SteamIDFields
from .enums import AccountType, Universe
from .errors import ConversionError, InvalidEnumValue, ParseError, SteamIDError
from .legacy import LegacyTextID, from_legacy_text, to_legacy_text
from .modern import ModernTextID, from_modern_text, to_modern_text
from .parsing import describe, parse_any

__all__ = [
    "AccountType",
    "ConversionError",
    "InvalidEnumValue",
    "LegacyTextID",
    "ModernTextID",
    "ParseError",
    "SteamID",
    "SteamIDError",
    "SteamIDFields",
    "Universe",
    "describe",
    "from_legacy_text",
    "from_modern_text",
    "parse_any",
    "to_legacy_text",
    "to_modern_text",
]

__version__ = "0.1.0"
