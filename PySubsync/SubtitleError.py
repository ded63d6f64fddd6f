class SubtitleError(Exception):
    """
    Base class for all errors raised by PySubsync
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.message:
            return self.message
        if self.error:
            return str(self.error)
        return super().__str__()

class SubtitleParseError(SubtitleError):
    """
    Raised when subtitle text cannot be read into cues.
    """
    def __init__(self, message : str|None = None, error : Exception|None = None, line_number : int|None = None):
        super().__init__(message, error)
        self.line_number : int|None = line_number

    def __str__(self) -> str:
        message = super().__str__()
        if self.line_number is not None:
            return f"Line {self.line_number}: {message}"
        return message

class MalformedTimecodeError(SubtitleParseError):
    """
    A timecode is not in the form hh:mm:ss,mmm or has a field out of range
    """
    def __init__(self, timecode : str, line_number : int|None = None):
        super().__init__(f"Can not convert '{timecode}' to milliseconds", line_number=line_number)
        self.timecode : str = timecode

class MalformedTimingLineError(SubtitleParseError):
    """
    A timing line does not contain a start and end timecode separated by -->
    """
    def __init__(self, line : str, line_number : int|None = None):
        super().__init__(f"Wrong file format, expected 'start --> end' but found '{line}'", line_number=line_number)
        self.line : str = line

class UnexpectedBlankLineError(SubtitleParseError):
    """
    A blank line was found where a timing line was required
    """
    def __init__(self, line_number : int|None = None):
        super().__init__("Wrong file format, expected a timing line but found a blank line", line_number=line_number)

class SubtitleSyncError(SubtitleError):
    """
    Raised when cues cannot be re-timed.
    """
    pass

class EmptyInputError(SubtitleSyncError):
    def __init__(self, message : str|None = None):
        super().__init__(message or "No subtitles were found in the input")

class DegenerateAnchorsError(SubtitleSyncError):
    """
    The first and last cue start at the same time, so no linear mapping can be fitted
    """
    def __init__(self, start : int):
        super().__init__(f"The first and last subtitles both start at {start} ms, unable to synchronize")
        self.start : int = start

class InvalidAnchorsError(SubtitleSyncError):
    """
    The requested first anchor is later than the requested last anchor
    """
    def __init__(self, first : int, last : int):
        super().__init__("First subtitle can not be after last subtitle")
        self.first : int = first
        self.last : int = last

class NegativeTimecodeError(SubtitleSyncError):
    """
    A remapped time would fall before 00:00:00,000
    """
    def __init__(self, cue_number : int, value : int):
        super().__init__(f"Subtitle {cue_number} would be moved to a negative time ({value} ms)")
        self.cue_number : int = cue_number
        self.value : int = value
