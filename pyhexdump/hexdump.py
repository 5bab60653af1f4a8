# Line layout follows `xxd`: "00000000: 00 01 02 ...  ascii"
import sys
from typing import BinaryIO, Iterator, List, Optional, TextIO, Union

from .config import DEFAULT_CONFIG, HexdumpConfig
from .iterator import AnyBytes, ByteSource, HexdumpIter
from .render import LineFormat

Source = Union[ByteSource, AnyBytes]


class Hexdump:
    """
    Formats data from a byte source to a string, a byte sink or the console.
    Without an explicit config the installed default is used.
    """

    def __init__(
        self,
        config: Optional[HexdumpConfig] = None,
        line_format: Optional[LineFormat] = None,
    ):
        self.config = config if config is not None else DEFAULT_CONFIG.get()
        self.line_format = line_format

    def iter(
        self, src: Source, offset: int = 0, length: Optional[int] = None
    ) -> HexdumpIter:
        return HexdumpIter(self.config, src, offset, length, self.line_format)

    def lines(self, data: Source, offset: int = 0) -> List[str]:
        return list(self.iter(data, offset))

    def dumps(self, src: Source, offset: int = 0, length: Optional[int] = None) -> str:
        return "".join(line + "\n" for line in self.iter(src, offset, length))

    def dump(
        self,
        src: Source,
        dst: BinaryIO,
        offset: int = 0,
        length: Optional[int] = None,
    ) -> int:
        # each line is written as soon as it is formatted, a failing write
        # stops the dump. utf-8 since template text is not limited to ascii
        count = 0
        for line in self.iter(src, offset, length):
            dst.write(line.encode("utf-8") + b"\n")
            count += 1
        return count

    def print(
        self,
        src: Source,
        offset: int = 0,
        length: Optional[int] = None,
        file: Optional[TextIO] = None,
    ) -> None:
        out = file if file is not None else sys.stdout
        for line in self.iter(src, offset, length):
            out.write(line + "\n")

    def __repr__(self) -> str:
        return f"Hexdump({self.config!r})"


class hexdump:
    def __init__(
        self,
        buf: Source,
        off: int = 0,
        config: Optional[HexdumpConfig] = None,
        line_format: Optional[LineFormat] = None,
    ):
        # bytes can be dumped repeatedly, a stream only once
        self.buf = buf
        self.off = off
        self.rhx = Hexdump(config, line_format)

    def __iter__(self) -> Iterator[str]:
        return self.rhx.iter(self.buf, self.off)

    def __str__(self) -> str:
        return "\n".join(self)

    def __repr__(self) -> str:
        return "\n".join(self)


def hexdumps(data: Source, offset: int = 0) -> str:
    return Hexdump().dumps(data, offset)


def print_hexdump(data: Source, offset: int = 0) -> None:
    Hexdump().print(data, offset)


def install(config: HexdumpConfig) -> HexdumpConfig:
    return DEFAULT_CONFIG.install(config)
