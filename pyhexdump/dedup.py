from enum import Enum, auto
from typing import Optional, Tuple


class LineAction(Enum):
    EMIT = auto()
    MARKER = auto()
    SUPPRESS = auto()


class DuplicateDetector:
    """
    Decides what to do with each raw line when squeezing duplicates.

    The first repeat of a line becomes a single '*', further repeats are
    dropped. If the data ends inside such a run, finish() hands back the
    last dropped line so the dump still ends on a real offset.
    """

    def __init__(self, hide: bool):
        self.hide = hide
        self.previous: Optional[bytes] = None
        self.marker_shown = False
        self.last_offset = 0
        self.last_line: Optional[bytes] = None

    def feed(self, offset: int, line: bytes, final: bool = False) -> LineAction:
        if not self.hide:
            return LineAction.EMIT
        if final or self.previous is None or line != self.previous:
            self.previous = bytes(line)
            self.marker_shown = False
            self.last_line = None
            return LineAction.EMIT
        self.last_offset = offset
        self.last_line = self.previous
        if self.marker_shown:
            return LineAction.SUPPRESS
        self.marker_shown = True
        return LineAction.MARKER

    def finish(self) -> Optional[Tuple[int, bytes]]:
        pending = None
        if self.marker_shown and self.last_line is not None:
            pending = (self.last_offset, self.last_line)
        self.previous = None
        self.marker_shown = False
        self.last_line = None
        return pending
