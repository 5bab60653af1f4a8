from __future__ import annotations

import io
from typing import Iterator, Optional, Protocol, Union

from .config import HexdumpConfig
from .dedup import DuplicateDetector, LineAction
from .render import MARKER, LineFormat, render_line


class ByteSource(Protocol):
    def read(self, size: int = ..., /) -> bytes: ...


AnyBytes = Union[bytes, bytearray, memoryview]


def as_source(src: Union[ByteSource, AnyBytes]) -> ByteSource:
    if isinstance(src, (bytes, bytearray, memoryview)):
        return io.BytesIO(src)
    return src


class HexdumpIter:
    """
    Lazy iterator over the formatted lines of a byte source.

    Lines are produced one read at a time and carry no line terminator.
    The iterator is single pass: once exhausted it stays exhausted, dump
    again with a fresh source.

    Usage:
        for line in HexdumpIter(HexdumpConfig(), open("blob.bin", "rb")):
            print(line)
    """

    def __init__(
        self,
        config: HexdumpConfig,
        src: Union[ByteSource, AnyBytes],
        offset: int = 0,
        length: Optional[int] = None,
        line_format: Optional[LineFormat] = None,
    ):
        self.config = config
        self.src = as_source(src)
        self.base_offset = offset
        # bytes consumed from src so far
        self.consumed = 0
        self.length = length
        self.line_format = line_format
        self.detector = DuplicateDetector(config.hide_duplicates)
        self.done = False

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self.done:
            raise StopIteration
        bpl = self.config.bytes_per_line
        while True:
            offset = self.base_offset + self.consumed
            chunk = self.read_chunk()
            if not chunk:
                self.done = True
                pending = self.detector.finish()
                if pending is None:
                    raise StopIteration
                return self.render(*pending)
            self.consumed += len(chunk)
            action = self.detector.feed(offset, chunk, final=len(chunk) < bpl)
            if action is LineAction.EMIT:
                return self.render(offset, chunk)
            if action is LineAction.MARKER:
                return MARKER
            # suppressed duplicate, pull the next line

    def read_chunk(self) -> bytes:
        want = self.config.bytes_per_line
        if self.length is not None:
            want = min(want, self.length - self.consumed)
        if want <= 0:
            return b""
        chunk = self.src.read(want)
        # pipes and sockets may return less than asked before the end of data
        while chunk and len(chunk) < want:
            more = self.src.read(want - len(chunk))
            if not more:
                break
            chunk += more
        return bytes(chunk)

    def render(self, offset: int, data: bytes) -> str:
        return render_line(self.config, offset, data, self.line_format)
