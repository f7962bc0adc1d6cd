from __future__ import annotations

from typing import Any, Optional


class SteamIDError(Exception):
    """Raised when a Steam ID cannot be parsed, interpreted or converted."""


class ParseError(SteamIDError, ValueError):
    def __init__(self, text: Any, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"cannot parse {text!r}: {reason}")


class ConversionError(SteamIDError, ValueError):
    def __init__(self, steamid: Optional[Any], target: str, reason: Optional[str] = None) -> None:
        self.steamid = steamid
        self.target = target
        self.reason = reason
        if steamid is None:
            msg = f"no {target} representation"
        else:
            msg = f"{steamid} has no {target} representation"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InvalidEnumValue(SteamIDError, ValueError):
    def __init__(self, enum_name: str, value: Any) -> None:
        self.enum_name = enum_name
        self.value = value
        super().__init__(f"{value!r} is not a valid {enum_name}")
