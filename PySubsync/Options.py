from __future__ import annotations

import os
from collections.abc import Mapping

from PySubsync.SettingsType import SettingType, SettingsType

# Capacity of the legacy fixed text buffer (1024 bytes including the terminator)
LEGACY_MAX_TEXT_BYTES = 1023

default_settings = SettingsType({
    'encoding': os.getenv('DEFAULT_ENCODING', 'utf-8'),
    'fallback_encoding': os.getenv('FALLBACK_ENCODING', 'iso-8859-1'),
    'max_text_bytes': os.getenv('SUBSYNC_MAX_TEXT_BYTES') or None,
    'discard_unterminated_cue': os.getenv('SUBSYNC_DISCARD_UNTERMINATED_CUE', 'True'),
    'first_sub': None,
    'last_sub': None,
})

class Options(SettingsType):
    """
    Settings for loading, synchronizing and saving subtitles.

    Values not supplied explicitly are taken from the environment or the defaults above.
    """
    def __init__(self, settings : Mapping[str, SettingType]|None = None, **kwargs : SettingType):
        super().__init__(default_settings)
        if settings:
            self.update(settings)
        self.update(kwargs)

    @property
    def encoding(self) -> str:
        return self.get_str('encoding') or 'utf-8'

    @property
    def fallback_encoding(self) -> str|None:
        return self.get_str('fallback_encoding')

    @property
    def max_text_bytes(self) -> int|None:
        return self.get_int('max_text_bytes')

    @property
    def discard_unterminated_cue(self) -> bool:
        return self.get_bool('discard_unterminated_cue', True)

    @property
    def first_sub(self) -> int|None:
        return self.get_timecode('first_sub')

    @property
    def last_sub(self) -> int|None:
        return self.get_timecode('last_sub')
