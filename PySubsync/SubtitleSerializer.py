from __future__ import annotations

from collections.abc import Iterable, Iterator

from PySubsync.Helpers.Time import FormatTimecode
from PySubsync.SubtitleCue import SubtitleCue
from PySubsync.SubtitleParser import LINE_TERMINATOR

def FormatTimingLine(cue : SubtitleCue) -> str:
    """
    Render 'start --> end' followed by the cue position, if it has one
    """
    return f"{FormatTimecode(cue.start)} --> {FormatTimecode(cue.end)}{cue.position or ''}"

def SerializeCues(cues : Iterable[SubtitleCue]) -> Iterator[str]:
    """
    Render cues as CRLF terminated cue blocks, numbered from 1 in collection order.

    The cue text is written verbatim followed by a blank line, so every block, including the last,
    is followed by an empty line. Nothing is validated.
    """
    for number, cue in enumerate(cues, start=1):
        yield f"{number}{LINE_TERMINATOR}"
        yield f"{FormatTimingLine(cue)}{LINE_TERMINATOR}"
        yield from cue.text.splitlines(keepends=True)
        yield LINE_TERMINATOR
