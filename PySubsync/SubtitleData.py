from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from PySubsync.SubtitleCue import SubtitleCue

class SubtitleData:
    """
    Ordered collection of subtitle cues and file-level metadata.

    Cues are kept in input order, they are never sorted by time.

    Attributes:
        cues (list[SubtitleCue]): The cues, in the order they were read
        metadata (dict[str, Any]): File-level metadata, e.g. the encoding the file was read with
    """
    def __init__(self, cues : list[SubtitleCue]|None = None, metadata : dict[str, Any]|None = None):
        self.cues : list[SubtitleCue] = cues if cues is not None else []
        self.metadata : dict[str, Any] = metadata if metadata is not None else {}

    @property
    def first(self) -> SubtitleCue|None:
        return self.cues[0] if self.cues else None

    @property
    def last(self) -> SubtitleCue|None:
        return self.cues[-1] if self.cues else None

    def __len__(self) -> int:
        return len(self.cues)

    def __iter__(self) -> Iterator[SubtitleCue]:
        return iter(self.cues)

    def __getitem__(self, index : int) -> SubtitleCue:
        return self.cues[index]
