"""SteamID2, the ``STEAM_X:Y:Z`` notation.

X is the universe, Y the low bit of the account number and Z the rest of it.
The notation only exists for individual accounts. Old game servers print
``STEAM_0`` for public accounts, so universe 0 is read as PUBLIC when the id
is folded back into a SteamID64.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from .canonical import SteamID
from .enums import AccountType, Universe
from .errors import ConversionError, InvalidEnumValue, ParseError

STEAM2_RE = re.compile(r"STEAM_([0-9]):([0-9]):([0-9]+)")

_U32_MAX = 0xFFFFFFFF
_TARGET = "SteamID2"


@dataclass(frozen=True)
class LegacyTextID:
    universe: Universe
    parity: int
    serial: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "universe", Universe.from_int(self.universe))
        if self.parity not in (0, 1):
            raise ValueError(f"parity must be 0 or 1, got {self.parity!r}")
        if not 0 <= self.serial <= _U32_MAX:
            raise ValueError(f"serial {self.serial} is not an unsigned 32-bit value")

    @classmethod
    def parse(cls, text: str) -> "LegacyTextID":
        if not isinstance(text, str):
            raise ParseError(text, "expected a string")
        match = STEAM2_RE.fullmatch(text)
        if not match:
            raise ParseError(text, "expected STEAM_X:Y:Z")

        x, y, z = match.groups()
        try:
            universe = Universe.from_int(int(x))
        except InvalidEnumValue:
            raise ParseError(text, f"unknown universe {x}") from None
        if y not in ("0", "1"):
            raise ParseError(text, f"parity must be 0 or 1, got {y}")
        serial = int(z)
        if serial > _U32_MAX:
            raise ParseError(text, "account serial out of range")
        return cls(universe, int(y), serial)

    @classmethod
    def from_steamid(cls, steamid: SteamID) -> "LegacyTextID":
        if steamid.account_type != AccountType.INDIVIDUAL:
            raise ConversionError(steamid, _TARGET, "only individual accounts")
        n = steamid.account_number
        return cls(steamid.universe, n & 1, n // 2)

    @property
    def account_number(self) -> int:
        return self.serial * 2 + self.parity

    def to_steamid(self) -> SteamID:
        n = self.account_number
        if n > _U32_MAX:
            raise ConversionError(self, "SteamID64", "account number overflows 32 bits")
        universe = self.universe
        if universe == Universe.INDIVIDUAL:
            universe = Universe.PUBLIC
        return SteamID.pack(universe, AccountType.INDIVIDUAL, 1, n)

    def format(self, zero_universe: bool = False) -> str:
        universe = int(self.universe)
        if zero_universe and self.universe == Universe.PUBLIC:
            universe = 0
        return f"STEAM_{universe}:{self.parity}:{self.serial}"

    def __str__(self) -> str:
        return self.format()


def from_legacy_text(text: str) -> SteamID:
    return LegacyTextID.parse(text).to_steamid()


def to_legacy_text(steamid: SteamID, zero_universe: bool = False) -> str:
    return LegacyTextID.from_steamid(steamid).format(zero_universe=zero_universe)
