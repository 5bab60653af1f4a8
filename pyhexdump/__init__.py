from .config import (
    DEFAULT_CONFIG,
    Base,
    BitWidth,
    Endianness,
    GroupSize,
    HexdumpBuilder,
    HexdumpConfig,
)
from .hexdump import Hexdump, hexdump, hexdumps, install, print_hexdump
from .iterator import HexdumpIter
from .render import DEFAULT_FORMAT, FormatError, LineFormat

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_FORMAT",
    "Base",
    "BitWidth",
    "Endianness",
    "FormatError",
    "GroupSize",
    "Hexdump",
    "HexdumpBuilder",
    "HexdumpConfig",
    "HexdumpIter",
    "LineFormat",
    "hexdump",
    "hexdumps",
    "install",
    "print_hexdump",
]
