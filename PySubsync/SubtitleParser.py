from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import NamedTuple

import regex

from PySubsync.Helpers.Time import ParseTimecode
from PySubsync.SubtitleCue import SubtitleCue
from PySubsync.SubtitleData import SubtitleData
from PySubsync.SubtitleError import (
    MalformedTimecodeError,
    MalformedTimingLineError,
    UnexpectedBlankLineError,
)

LINE_TERMINATOR = "\r\n"

# start --> end [position], the position is everything after the end timecode
timing_line_pattern = regex.compile(r"\s*(\S+)\s+-->\s*(\S+)(.*)", regex.DOTALL)

class ParserState(Enum):
    AwaitIndex = 1
    AwaitTiming = 2
    AwaitText = 3

class ParserEffect(Enum):
    Skip = 1
    BeginCue = 2
    AppendText = 3
    FinishCue = 4

class TimingLine(NamedTuple):
    start : int
    end : int
    position : str|None

class ParserStep(NamedTuple):
    state : ParserState
    effect : ParserEffect
    timing : TimingLine|None = None

def StripLineEnding(line : str) -> str:
    """
    Remove a trailing LF and, if it is immediately before it, a CR
    """
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line

def SplitLines(content : str) -> Iterator[str]:
    """
    Split text into LF terminated lines. A final line without a terminator is yielded as is.
    """
    pieces = content.split("\n")
    for piece in pieces[:-1]:
        yield piece + "\n"
    if pieces[-1]:
        yield pieces[-1]

def ParseTimingLine(line : str, line_number : int|None = None) -> TimingLine:
    """
    Parse a 'start --> end [position]' line.

    The position is returned verbatim, including the whitespace that separates it from the end time,
    so that it can be written back unchanged. Only an empty remainder means there is no position.
    """
    match = timing_line_pattern.fullmatch(line)
    if not match:
        raise MalformedTimingLineError(line, line_number)

    start_text, end_text, remainder = match.groups()

    try:
        start = ParseTimecode(start_text)
        end = ParseTimecode(end_text)
    except MalformedTimecodeError as e:
        e.line_number = line_number
        raise

    position = remainder or None
    return TimingLine(start, end, position)

def NextParserStep(state : ParserState, line : str, line_number : int|None = None) -> ParserStep:
    """
    Advance the cue state machine by one line, which must already have its line ending removed.

    AwaitIndex:  blank lines are skipped, any other line is the cue number, which is ignored.
    AwaitTiming: the line must be a timing line.
    AwaitText:   a blank line completes the cue, any other line is body text.
    """
    blank = line == ""

    if state == ParserState.AwaitIndex:
        if blank:
            return ParserStep(ParserState.AwaitIndex, ParserEffect.Skip)
        return ParserStep(ParserState.AwaitTiming, ParserEffect.Skip)

    if state == ParserState.AwaitTiming:
        if blank:
            raise UnexpectedBlankLineError(line_number)
        return ParserStep(ParserState.AwaitText, ParserEffect.BeginCue, ParseTimingLine(line, line_number))

    if blank:
        return ParserStep(ParserState.AwaitIndex, ParserEffect.FinishCue)
    return ParserStep(ParserState.AwaitText, ParserEffect.AppendText)

class CueTextBuffer:
    """
    Accumulates the body text of a cue.

    If max_bytes is set the buffer holds at most that many UTF-8 bytes and anything beyond it is
    truncated, line terminator included. Otherwise the buffer grows without limit.
    """
    def __init__(self, max_bytes : int|None = None):
        self.max_bytes : int|None = max_bytes
        self.parts : list[str] = []
        self.size : int = 0
        self.truncated : bool = False

    def Append(self, line : str) -> None:
        chunk = line + LINE_TERMINATOR
        if self.max_bytes is None:
            self.parts.append(chunk)
            return

        encoded = chunk.encode('utf-8')
        room = max(self.max_bytes - self.size, 0)
        if len(encoded) > room:
            self.truncated = True
            # A multi-byte character cut at the boundary is dropped
            encoded = encoded[:room]
            chunk = encoded.decode('utf-8', errors='ignore')
            encoded = chunk.encode('utf-8')

        self.parts.append(chunk)
        self.size += len(encoded)

    @property
    def text(self) -> str:
        return "".join(self.parts)

class SubtitleParser:
    """
    Reads SubRip style cue blocks into an ordered SubtitleData collection.

    A cue block is an index line (ignored), a timing line, one or more body lines and a blank line.
    Any error aborts the parse and nothing is returned.

    If discard_unterminated_cue is True, a final cue that is not followed by a blank line is dropped,
    as earlier subsync releases did. Set it to False to keep that cue.
    """
    def __init__(self, max_text_bytes : int|None = None, discard_unterminated_cue : bool = True):
        if max_text_bytes is not None and max_text_bytes < 0:
            raise ValueError(f"max_text_bytes cannot be negative: {max_text_bytes}")
        self.max_text_bytes : int|None = max_text_bytes
        self.discard_unterminated_cue : bool = discard_unterminated_cue

    def ParseString(self, content : str) -> SubtitleData:
        return self.ParseLines(SplitLines(content))

    def ParseLines(self, lines : Iterable[str]) -> SubtitleData:
        cues : list[SubtitleCue] = []
        state = ParserState.AwaitIndex
        cue : SubtitleCue|None = None
        buffer : CueTextBuffer|None = None
        line_number = 0

        for line_number, raw_line in enumerate(lines, start=1):
            line = StripLineEnding(raw_line)
            step = NextParserStep(state, line, line_number)

            if step.effect == ParserEffect.BeginCue and step.timing is not None:
                cue = SubtitleCue(step.timing.start, step.timing.end, position=step.timing.position)
                buffer = CueTextBuffer(self.max_text_bytes)

            elif step.effect == ParserEffect.AppendText and buffer is not None:
                buffer.Append(line)

            elif step.effect == ParserEffect.FinishCue and cue is not None and buffer is not None:
                cues.append(self._finish_cue(cue, buffer, len(cues) + 1))
                cue, buffer = None, None

            state = step.state

        if state == ParserState.AwaitText and cue is not None and buffer is not None:
            if self.discard_unterminated_cue:
                logging.warning(f"Subtitle {len(cues) + 1} is not followed by a blank line and was discarded")
            else:
                cues.append(self._finish_cue(cue, buffer, len(cues) + 1))

        elif state == ParserState.AwaitTiming:
            logging.warning(f"Line {line_number}: input ended before the timing line of subtitle {len(cues) + 1}")

        logging.debug(f"Parsed {len(cues)} cues from {line_number} lines")
        return SubtitleData(cues=cues)

    def _finish_cue(self, cue : SubtitleCue, buffer : CueTextBuffer, number : int) -> SubtitleCue:
        if buffer.truncated:
            logging.warning(f"Text of subtitle {number} exceeds {self.max_text_bytes} bytes and was truncated")
        cue.text = buffer.text
        return cue
