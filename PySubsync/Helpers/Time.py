from datetime import timedelta

import regex

from PySubsync.SubtitleError import MalformedTimecodeError

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

# Either ',' or '.' may separate seconds from milliseconds
timecode_pattern = regex.compile(r"([0-9]+):([0-9]+):([0-9]+)[,.]([0-9]+)")

def ParseTimecode(text : str) -> int:
    """
    Convert a timecode in the form hh:mm:ss,mmm (or hh:mm:ss.mmm) to milliseconds.

    Hours may have any number of digits. Minutes and seconds must be below 60, milliseconds below 1000.

    Raises MalformedTimecodeError if the text is not a valid timecode.
    """
    if not isinstance(text, str):
        raise MalformedTimecodeError(repr(text))

    match = timecode_pattern.fullmatch(text)
    if not match:
        raise MalformedTimecodeError(text)

    hours, minutes, seconds, milliseconds = (int(field) for field in match.groups())
    if minutes >= 60 or seconds >= 60 or milliseconds >= 1000:
        raise MalformedTimecodeError(text)

    return hours * MS_PER_HOUR + minutes * MS_PER_MINUTE + seconds * MS_PER_SECOND + milliseconds

def FormatTimecode(milliseconds : int) -> str:
    """
    Convert milliseconds to the canonical hh:mm:ss,mmm form
    """
    if milliseconds < 0:
        raise ValueError(f"Timecodes cannot be negative: {milliseconds}")

    hours, remainder = divmod(milliseconds, MS_PER_HOUR)
    minutes, remainder = divmod(remainder, MS_PER_MINUTE)
    seconds, ms = divmod(remainder, MS_PER_SECOND)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{ms:03d}"

def TimedeltaToTimecode(value : timedelta) -> int:
    """
    Convert a timedelta to whole milliseconds, discarding any sub-millisecond part
    """
    return (value.days * 86400 + value.seconds) * MS_PER_SECOND + value.microseconds // 1000

def GetTimecode(value : int|str|timedelta) -> int:
    """
    Accept a timecode as milliseconds, hh:mm:ss,mmm text or a timedelta
    """
    if isinstance(value, bool):
        raise MalformedTimecodeError(repr(value))
    if isinstance(value, int):
        if value < 0:
            raise MalformedTimecodeError(str(value))
        return value
    if isinstance(value, timedelta):
        return TimedeltaToTimecode(value)
    return ParseTimecode(value.strip())
