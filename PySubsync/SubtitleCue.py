from __future__ import annotations

class SubtitleCue:
    """
    A single subtitle entry.

    Times are integer milliseconds. No ordering is enforced between start and end,
    the values are kept exactly as they were read.

    position is the free-form annotation that may follow the end time on the timing line
    (e.g. ' X1:10 X2:20'). It is None when the timing line has no annotation.

    text is the body of the cue, each source line terminated with CRLF.
    """
    def __init__(self, start : int = 0, end : int = 0, text : str = "", position : str|None = None):
        self.start : int = start
        self.end : int = end
        self.text : str = text
        self.position : str|None = position

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, SubtitleCue):
            return NotImplemented
        return (self.start, self.end, self.position, self.text) == (other.start, other.end, other.position, other.text)

    def __repr__(self) -> str:
        return f"SubtitleCue(start={self.start}, end={self.end}, position={self.position!r}, text={self.text!r})"
