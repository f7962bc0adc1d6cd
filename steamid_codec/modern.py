"""SteamID3, the bracketed ``[L:U:N]`` notation.

L is the account type letter, U the universe and N the 32-bit account
number. Chat rooms may be written with ``T``, ``L`` (lobby) or ``c`` (clan
chat); all three read as CHAT and are written back as ``T``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from .canonical import SteamID
from .enums import AccountType, Universe
from .errors import ConversionError, InvalidEnumValue, ParseError

STEAM3_RE = re.compile(r"\[([A-Za-z]):([0-9]):([0-9]+)\]")

_U32_MAX = 0xFFFFFFFF
_TARGET = "SteamID3"


@dataclass(frozen=True)
class ModernTextID:
    account_type: AccountType
    universe: Universe
    account_number: int

    def __post_init__(self) -> None:
        account_type = AccountType.from_int(self.account_type)
        if not account_type.has_letter:
            raise ConversionError(None, _TARGET, f"{account_type.name} has no type letter")
        object.__setattr__(self, "account_type", account_type)
        object.__setattr__(self, "universe", Universe.from_int(self.universe))
        if not 0 <= self.account_number <= _U32_MAX:
            raise ValueError(
                f"account number {self.account_number} is not an unsigned 32-bit value"
            )

    @classmethod
    def parse(cls, text: str) -> "ModernTextID":
        if not isinstance(text, str):
            raise ParseError(text, "expected a string")
        match = STEAM3_RE.fullmatch(text)
        if not match:
            raise ParseError(text, "expected [L:U:N]")

        letter, u, n = match.groups()
        try:
            account_type = AccountType.from_letter(letter)
        except InvalidEnumValue:
            raise ParseError(text, f"unknown account type letter {letter!r}") from None
        try:
            universe = Universe.from_int(int(u))
        except InvalidEnumValue:
            raise ParseError(text, f"unknown universe {u}") from None
        account_number = int(n)
        if account_number > _U32_MAX:
            raise ParseError(text, "account number out of range")
        return cls(account_type, universe, account_number)

    @classmethod
    def from_steamid(cls, steamid: SteamID) -> "ModernTextID":
        account_type = steamid.account_type
        universe = steamid.universe
        if not account_type.has_letter:
            raise ConversionError(steamid, _TARGET, f"{account_type.name} has no type letter")
        return cls(account_type, universe, steamid.account_number)

    @property
    def instance(self) -> int:
        return 1 if self.account_type == AccountType.INDIVIDUAL else 0

    def to_steamid(self) -> SteamID:
        return SteamID.pack(self.universe, self.account_type, self.instance, self.account_number)

    def format(self) -> str:
        return f"[{self.account_type.letter}:{int(self.universe)}:{self.account_number}]"

    def __str__(self) -> str:
        return self.format()


def from_modern_text(text: str) -> SteamID:
    return ModernTextID.parse(text).to_steamid()


def to_modern_text(steamid: SteamID) -> str:
    return ModernTextID.from_steamid(steamid).format()
