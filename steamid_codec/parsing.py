from __future__ import annotations

from typing import Dict, Union

from .canonical import SteamID
from .enums import AccountType, Universe
from .errors import ConversionError, InvalidEnumValue, ParseError
from .legacy import from_legacy_text, to_legacy_text
from .modern import from_modern_text, to_modern_text

NOT_AVAILABLE = "n/a"


def parse_any(text: str, default_universe: Union[Universe, int] = Universe.PUBLIC) -> SteamID:
    """Parse a SteamID2, SteamID3, SteamID64 or bare 32-bit account id.

    A number that fits in 32 bits is an individual account in
    ``default_universe``; anything larger is a SteamID64.
    """
    if not isinstance(text, str):
        raise ParseError(text, "expected a string")
    s = text.strip()
    if s.startswith("STEAM_"):
        return from_legacy_text(s)
    if s.startswith("["):
        return from_modern_text(s)
    if s.isascii() and s.isdigit():
        n = int(s)
        if n <= 0xFFFFFFFF:
            try:
                universe = Universe.from_int(default_universe)
            except InvalidEnumValue:
                raise ParseError(text, f"unknown universe {default_universe!r}") from None
            return SteamID.pack(universe, AccountType.INDIVIDUAL, 1, n)
        return SteamID.from_str(s)
    raise ParseError(text, "not a SteamID2, SteamID3 or SteamID64")


def _or_na(fn, *args, **kwargs) -> str:
    try:
        return str(fn(*args, **kwargs))
    except (ConversionError, InvalidEnumValue):
        return NOT_AVAILABLE


def _enum_name(enum_cls, raw: int) -> str:
    try:
        return enum_cls.from_int(raw).name
    except InvalidEnumValue:
        return NOT_AVAILABLE


def describe(steamid: SteamID) -> Dict[str, str]:
    """Printable rows for one identifier, in display order."""
    fields = steamid.unpack()
    return {
        "SteamID64": str(steamid),
        "Account ID": str(fields.account_number),
        "Type": f"{fields.account_type} ({_enum_name(AccountType, fields.account_type)})",
        "Universe": f"{fields.universe} ({_enum_name(Universe, fields.universe)})",
        "Instance": str(fields.instance),
        "Steam2": _or_na(to_legacy_text, steamid),
        "Steam2Legacy": _or_na(to_legacy_text, steamid, zero_universe=True),
        "Steam3": _or_na(to_modern_text, steamid),
        "Community URL": steamid.community_url or NOT_AVAILABLE,
        "Valid": str(steamid.is_valid()).lower(),
    }
