from __future__ import annotations

import logging
import math
from fractions import Fraction

from PySubsync.SubtitleData import SubtitleData
from PySubsync.SubtitleError import (
    DegenerateAnchorsError,
    EmptyInputError,
    NegativeTimecodeError,
)

def RoundHalfAwayFromZero(value : Fraction) -> int:
    """
    Round to the nearest integer, ties away from zero (not banker's rounding)
    """
    if value >= 0:
        return math.floor(value + Fraction(1, 2))
    return -math.floor(-value + Fraction(1, 2))

class LinearMapping:
    """
    The line y = slope * x + intercept through two (desynced, synced) points.

    Arithmetic is exact, so timings at any magnitude are mapped without rounding error
    until the final rounding to whole milliseconds.
    """
    def __init__(self, slope : Fraction, intercept : Fraction):
        self.slope : Fraction = slope
        self.intercept : Fraction = intercept

    @classmethod
    def FromAnchors(cls, desynced_first : int, desynced_last : int, synced_first : int, synced_last : int) -> LinearMapping:
        if desynced_last == desynced_first:
            raise DegenerateAnchorsError(desynced_first)

        slope = Fraction(synced_last - synced_first, desynced_last - desynced_first)
        intercept = synced_last - slope * desynced_last
        return cls(slope, intercept)

    def Map(self, value : int) -> int:
        return RoundHalfAwayFromZero(self.slope * value + self.intercept)

    def __repr__(self) -> str:
        return f"LinearMapping(slope={float(self.slope)}, intercept={float(self.intercept)})"

class SubtitleSynchronizer:
    """
    Re-times cues so that the first cue starts at first_anchor and the last cue starts at last_anchor.

    The first and last cues are taken in collection order, not by time. Every start and end time is
    moved along the same linear mapping, in place.
    """
    def __init__(self, first_anchor : int, last_anchor : int):
        self.first_anchor : int = first_anchor
        self.last_anchor : int = last_anchor

    def GetMapping(self, data : SubtitleData) -> LinearMapping:
        first, last = data.first, data.last
        if first is None or last is None:
            raise EmptyInputError("Unable to synchronize, there are no subtitles")

        return LinearMapping.FromAnchors(first.start, last.start, self.first_anchor, self.last_anchor)

    def Synchronize(self, data : SubtitleData) -> LinearMapping:
        """
        Apply the mapping to every cue. Raises NegativeTimecodeError, leaving the cues unchanged,
        if any time would be moved before zero.
        """
        mapping = self.GetMapping(data)
        logging.debug(f"Synchronizing with {mapping}")

        synced : list[tuple[int, int]] = []
        for number, cue in enumerate(data.cues, start=1):
            start, end = mapping.Map(cue.start), mapping.Map(cue.end)
            if start < 0 or end < 0:
                raise NegativeTimecodeError(number, min(start, end))
            synced.append((start, end))

        for cue, (start, end) in zip(data.cues, synced):
            cue.start, cue.end = start, end

        logging.info(f"Synchronized {len(data.cues)} subtitles")
        return mapping
