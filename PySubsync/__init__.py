"""
PySubsync - Linear re-timing of SubRip subtitles

Moves the first and last subtitle to new start times and rescales every other subtitle in between,
which fixes subtitles that drift out of sync because of a different frame rate or offset.

Basic Usage
-----------

# Re-time a file in place
resync_file("movie.srt", first="00:01:33,492", last="01:39:23,561")

# Or work with the cue collection directly
data = parse(lines)
synchronize(data, parse_timecode("00:01:33,492"), parse_timecode("01:39:23,561"))
output = serialize(data)
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import timedelta

from PySubsync.Formats.SrtFileHandler import SrtFileHandler
from PySubsync.Helpers.Time import FormatTimecode, ParseTimecode
from PySubsync.Options import Options
from PySubsync.SettingsType import SettingType, SettingsType
from PySubsync.SubtitleCue import SubtitleCue
from PySubsync.SubtitleData import SubtitleData
from PySubsync.SubtitleError import SubtitleError, SubtitleParseError, SubtitleSyncError
from PySubsync.SubtitleParser import SubtitleParser
from PySubsync.SubtitleProject import SubtitleProject
from PySubsync.SubtitleSerializer import SerializeCues
from PySubsync.SubtitleSynchronizer import LinearMapping, SubtitleSynchronizer
from PySubsync.version import __version__

def init_options(**settings : SettingType) -> Options:
    """
    Create an :class:`Options` instance. Unspecified settings take their defaults from the environment.

    Examples
    --------

    opts = init_options(encoding="cp1252", max_text_bytes=1023)
    """
    return Options(settings)

def parse_timecode(text : str) -> int:
    """
    Convert 'hh:mm:ss,mmm' or 'hh:mm:ss.mmm' to milliseconds. Raises MalformedTimecodeError.
    """
    return ParseTimecode(text)

def format_timecode(milliseconds : int) -> str:
    """
    Convert milliseconds to 'hh:mm:ss,mmm'
    """
    return FormatTimecode(milliseconds)

def parse(lines : Iterable[str], options : Options|None = None) -> SubtitleData:
    """
    Parse a sequence of text lines into an ordered cue collection.

    Raises a SubtitleParseError subclass if the input is malformed, in which case nothing is returned.
    """
    options = options or Options()
    parser = SubtitleParser(
        max_text_bytes=options.max_text_bytes,
        discard_unterminated_cue=options.discard_unterminated_cue,
    )
    return parser.ParseLines(lines)

def synchronize(data : SubtitleData, first_anchor : int, last_anchor : int) -> None:
    """
    Re-time the cues in place so that the first cue starts at first_anchor and the last at last_anchor.

    Raises EmptyInputError for an empty collection and DegenerateAnchorsError if the first and last cue
    start at the same time.
    """
    SubtitleSynchronizer(first_anchor, last_anchor).Synchronize(data)

def serialize(data : SubtitleData) -> list[str]:
    """
    Render the cues as CRLF terminated lines, numbered from 1
    """
    return list(SerializeCues(data.cues))

def load_subtitles(filepath : str, options : Options|None = None) -> SubtitleData:
    """
    Load and parse a subtitle file
    """
    return SrtFileHandler(options).load_file(filepath)

def resync_file(
    filepath : str,
    outputpath : str|None = None,
    *,
    first : int|str|timedelta|None = None,
    last : int|str|timedelta|None = None,
    options : Options|None = None,
) -> SubtitleProject:
    """
    Load a subtitle file, re-time it and save it.

    Missing anchors default to the current start of the first and last subtitle.
    If outputpath is not given the input file is overwritten.
    """
    project = SubtitleProject(options)
    project.InitialiseProject(filepath, outputpath)
    project.SyncSubtitles(first, last)
    project.SaveSubtitles()
    return project

__all__ = [
    "__version__",
    "init_options",
    "parse_timecode",
    "format_timecode",
    "parse",
    "synchronize",
    "serialize",
    "load_subtitles",
    "resync_file",
    "LinearMapping",
    "Options",
    "SettingsType",
    "SrtFileHandler",
    "SubtitleCue",
    "SubtitleData",
    "SubtitleError",
    "SubtitleParseError",
    "SubtitleParser",
    "SubtitleProject",
    "SubtitleSyncError",
    "SubtitleSynchronizer",
]
