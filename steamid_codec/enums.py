from __future__ import annotations

from enum import IntEnum
from typing import Dict

from .errors import InvalidEnumValue


def _lookup(enum_cls, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidEnumValue(enum_cls.__name__, value)
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidEnumValue(enum_cls.__name__, value) from None


class Universe(IntEnum):
    """Steam deployment realms.

    Value 0 is named INDIVIDUAL after the SteamID2 convention, where older
    tooling writes it for accounts that actually live in PUBLIC.
    """

    INDIVIDUAL = 0
    PUBLIC = 1
    BETA = 2
    INTERNAL = 3
    DEV = 4
    RC = 5

    @classmethod
    def from_int(cls, value: int) -> "Universe":
        return _lookup(cls, value)


class AccountType(IntEnum):
    INVALID = 0
    INDIVIDUAL = 1
    MULTISEAT = 2
    GAME_SERVER = 3
    ANON_GAME_SERVER = 4
    PENDING = 5
    CONTENT_SERVER = 6
    CLAN = 7
    CHAT = 8
    P2P_SUPER_SEEDER = 9
    ANON_USER = 10

    @classmethod
    def from_int(cls, value: int) -> "AccountType":
        return _lookup(cls, value)

    @classmethod
    def from_letter(cls, letter: str) -> "AccountType":
        try:
            return _LETTER_TYPES[letter]
        except (KeyError, TypeError):
            raise InvalidEnumValue(cls.__name__, letter) from None

    @property
    def has_letter(self) -> bool:
        return self in _TYPE_LETTERS

    @property
    def letter(self) -> str:
        """SteamID3 letter. Callers check ``has_letter`` first."""
        if self not in _TYPE_LETTERS:
            raise AssertionError(f"{self.name} has no SteamID3 letter")
        return _TYPE_LETTERS[self]


_TYPE_LETTERS: Dict[AccountType, str] = {
    AccountType.INVALID: "I",
    AccountType.INDIVIDUAL: "U",
    AccountType.MULTISEAT: "M",
    AccountType.GAME_SERVER: "G",
    AccountType.ANON_GAME_SERVER: "A",
    AccountType.PENDING: "P",
    AccountType.CONTENT_SERVER: "C",
    AccountType.CLAN: "g",
    AccountType.CHAT: "T",
    AccountType.ANON_USER: "a",
}

# lobby (L) and clan chat (c) rooms are both read as plain chat
_LETTER_TYPES: Dict[str, AccountType] = {v: k for k, v in _TYPE_LETTERS.items()}
_LETTER_TYPES["L"] = AccountType.CHAT
_LETTER_TYPES["c"] = AccountType.CHAT
