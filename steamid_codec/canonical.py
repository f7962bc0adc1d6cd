from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Union

from .enums import AccountType, Universe
from .errors import InvalidEnumValue, ParseError

_ACCOUNT_NUMBER_MASK = 0xFFFFFFFF
_INSTANCE_MASK = 0xFFFFF
_TYPE_MASK = 0xF
_UNIVERSE_MASK = 0xFF

_INSTANCE_SHIFT = 32
_TYPE_SHIFT = 52
_UNIVERSE_SHIFT = 56

_MAX_ID64 = 0xFFFFFFFFFFFFFFFF

COMMUNITY_URL = "https://steamcommunity.com"


class SteamIDFields(NamedTuple):
    """Raw bit fields of a SteamID64, not checked against the enumerations."""

    universe: int
    account_type: int
    instance: int
    account_number: int


def _check_width(name: str, value: int, mask: int) -> int:
    value = int(value)
    if value < 0 or value > mask:
        raise ValueError(f"{name} {value} does not fit in {mask.bit_length()} bits")
    return value


@dataclass(frozen=True, order=True)
class SteamID:
    """A 64-bit Steam account identifier (SteamID64).

    Any 64-bit value is accepted; ``universe`` and ``account_type`` only fail
    when the packed field is read as an enumeration member.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ParseError(self.value, "expected an integer")
        if self.value < 0 or self.value > _MAX_ID64:
            raise ParseError(self.value, "not an unsigned 64-bit value")

    @classmethod
    def pack(
        cls,
        universe: Union[Universe, int],
        account_type: Union[AccountType, int],
        instance: int,
        account_number: int,
    ) -> "SteamID":
        u = _check_width("universe", universe, _UNIVERSE_MASK)
        t = _check_width("account_type", account_type, _TYPE_MASK)
        i = _check_width("instance", instance, _INSTANCE_MASK)
        n = _check_width("account_number", account_number, _ACCOUNT_NUMBER_MASK)
        return cls(
            (u << _UNIVERSE_SHIFT)
            | (t << _TYPE_SHIFT)
            | (i << _INSTANCE_SHIFT)
            | n
        )

    @classmethod
    def from_str(cls, text: str) -> "SteamID":
        s = text.strip() if isinstance(text, str) else text
        if not isinstance(s, str) or not s.isascii() or not s.isdigit():
            raise ParseError(text, "expected a decimal SteamID64")
        return cls(int(s))

    def unpack(self) -> SteamIDFields:
        return SteamIDFields(
            self.raw_universe,
            self.raw_account_type,
            self.instance,
            self.account_number,
        )

    # ── raw fields

    @property
    def raw_universe(self) -> int:
        return (self.value >> _UNIVERSE_SHIFT) & _UNIVERSE_MASK

    @property
    def raw_account_type(self) -> int:
        return (self.value >> _TYPE_SHIFT) & _TYPE_MASK

    @property
    def instance(self) -> int:
        return (self.value >> _INSTANCE_SHIFT) & _INSTANCE_MASK

    @property
    def account_number(self) -> int:
        return self.value & _ACCOUNT_NUMBER_MASK

    account_id = account_number

    @property
    def as_64(self) -> int:
        return self.value

    # ── interpreted fields

    @property
    def universe(self) -> Universe:
        return Universe.from_int(self.raw_universe)

    @property
    def account_type(self) -> AccountType:
        return AccountType.from_int(self.raw_account_type)

    def is_valid(self) -> bool:
        """Check the fields against Steam's rules.

        Does not check whether the account actually exists.
        """
        try:
            universe = self.universe
            account_type = self.account_type
        except InvalidEnumValue:
            return False

        if universe == Universe.INDIVIDUAL or account_type == AccountType.INVALID:
            return False
        if account_type == AccountType.INDIVIDUAL:
            if self.account_number == 0 or self.instance > 4:
                return False
        if account_type == AccountType.CLAN:
            if self.account_number == 0 or self.instance != 0:
                return False
        if account_type == AccountType.GAME_SERVER and self.account_number == 0:
            return False
        return True

    @property
    def community_url(self) -> Optional[str]:
        if self.raw_account_type == AccountType.INDIVIDUAL:
            return f"{COMMUNITY_URL}/profiles/{self.value}"
        if self.raw_account_type == AccountType.CLAN:
            return f"{COMMUNITY_URL}/gid/{self.value}"
        return None

    # ── text forms

    @property
    def as_steam2(self) -> str:
        from .legacy import to_legacy_text

        return to_legacy_text(self)

    @property
    def as_steam2_zero(self) -> str:
        from .legacy import to_legacy_text

        return to_legacy_text(self, zero_universe=True)

    @property
    def as_steam3(self) -> str:
        from .modern import to_modern_text

        return to_modern_text(self)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
