from __future__ import annotations
from collections.abc import Mapping
from datetime import timedelta
from typing import TypeAlias

from PySubsync.Helpers.Time import GetTimecode
from PySubsync.SubtitleError import MalformedTimecodeError

SettingType: TypeAlias = str | int | float | bool | timedelta | None

class SettingsError(Exception):
    """Raised when a setting cannot be coerced to the expected type."""
    pass

class SettingsType(dict[str, SettingType]):
    """
    Settings dictionary with restricted range of types allowed and type-safe getters
    """
    def __init__(self, settings : Mapping[str,SettingType]|None = None):
        if not isinstance(settings, SettingsType):
            settings = dict(settings or {})
        super().__init__(settings)

    def get_bool(self, key: str, default: bool|None = False) -> bool:
        """Get a boolean setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return False

        if isinstance(value, bool):
            return value
        elif isinstance(value, str):
            lower_val = value.strip().lower()
            if lower_val in ('true', '1', 'yes'):
                return True
            elif lower_val in ('false', '0', 'no'):
                return False

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to bool")

    def get_int(self, key: str, default: int|None = None) -> int|None:
        """Get an integer setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, bool):
            pass
        elif isinstance(value, (int,float)):
            return int(value)
        elif isinstance(value, str):
            if not value.strip():
                return None
            try:
                return int(value)
            except ValueError:
                pass

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} with value {repr(value)} to int")

    def get_str(self, key: str, default: str|None = None) -> str|None:
        """Get a string setting with type safety"""
        value = self.get(key, default)
        if value is None:
            return None
        elif isinstance(value, str):
            return value

        return str(value)

    def get_timecode(self, key: str, default: int|None = None) -> int|None:
        """Get a timecode setting as milliseconds, accepting hh:mm:ss,mmm text, milliseconds or a timedelta"""
        value = self.get(key, default)
        if value is None:
            return None

        if isinstance(value, (int, str, timedelta)):
            try:
                return GetTimecode(value)
            except MalformedTimecodeError as e:
                raise SettingsError(f"Cannot convert setting '{key}' with value {repr(value)} to a timecode: {e}")

        raise SettingsError(f"Cannot convert setting '{key}' of type {type(value).__name__} to a timecode")

    def update(self, other=(), /, **kwds) -> None:
        """Update settings, filtering out None values"""
        if hasattr(other, 'items'):
            if isinstance(other, SettingsType):
                other = dict(other)
            if isinstance(other, dict):
                other = {k: v for k, v in other.items() if v is not None}
        kwds = {k: v for k, v in kwds.items() if v is not None}
        super().update(other, **kwds)
