from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .hexdump import Hexdump

# widest group we can turn into a single unsigned integer
MAX_BYTES_PER_GROUP = 8


class Base(IntEnum):
    BIN = 2
    OCT = 8
    DEC = 10
    HEX = 16

    @property
    def format_code(self) -> str:
        # format() type code for this base
        return {2: "b", 8: "o", 10: "d", 16: "x"}[self.value]


class Endianness(Enum):
    LITTLE = "little"
    BIG = "big"


class BitWidth(IntEnum):
    # value is the number of hex digits in the offset field
    BW32 = 8
    BW64 = 16

    @property
    def mask(self) -> int:
        return (1 << (self.value * 4)) - 1


class GroupSize(IntEnum):
    BYTE = 1
    WORD = 2
    DWORD = 4
    QWORD = 8

    def width(self, base: Base) -> int:
        """Digits needed for the largest group value in `base`."""
        max_value = (1 << (8 * self.value)) - 1
        return len(format(max_value, Base(base).format_code))


@dataclass(frozen=True)
class HexdumpConfig:
    base: Base = Base.HEX
    endianness: Endianness = Endianness.LITTLE
    bit_width: BitWidth = BitWidth.BW32
    group_size: GroupSize = GroupSize.BYTE
    groups_per_line: int = 16
    hide_duplicates: bool = False
    bytes_per_line: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        # accept plain ints/strings, Base(3) or GroupSize(3) raise ValueError
        object.__setattr__(self, "base", Base(self.base))
        object.__setattr__(self, "endianness", Endianness(self.endianness))
        object.__setattr__(self, "bit_width", BitWidth(self.bit_width))
        object.__setattr__(self, "group_size", GroupSize(self.group_size))
        if self.groups_per_line < 0:
            raise ValueError(f"groups_per_line must be positive: {self.groups_per_line}")
        if self.groups_per_line == 0:
            object.__setattr__(self, "groups_per_line", 1)
        object.__setattr__(
            self, "bytes_per_line", int(self.group_size) * self.groups_per_line
        )

    @property
    def group_width(self) -> int:
        return self.group_size.width(self.base)

    @property
    def offset_width(self) -> int:
        return int(self.bit_width)

    @property
    def numeral_width(self) -> int:
        # groups plus the single spaces between them
        return self.groups_per_line * (self.group_width + 1) - 1

    @property
    def line_width(self) -> int:
        """
        Size of a formatted line including its terminator:
        offset, ':', a space before each group, two spaces, ascii, newline.
        """
        return (
            self.offset_width
            + 1
            + self.groups_per_line * (self.group_width + 1)
            + 2
            + self.bytes_per_line
            + 1
        )


class HexdumpBuilder:
    """
    Fluent construction of a HexdumpConfig.

    Usage:
        config = HexdumpBuilder().base(Base.OCT).group_size(GroupSize.WORD).config()
        rhx = HexdumpBuilder().groups_per_line(4).hide_duplicates(True).build()
    """

    def __init__(self, config: HexdumpConfig | None = None):
        self._config = config if config is not None else HexdumpConfig()

    def base(self, base: Union[Base, int]) -> HexdumpBuilder:
        self._config = replace(self._config, base=Base(base))
        return self

    def endianness(self, endianness: Union[Endianness, str]) -> HexdumpBuilder:
        self._config = replace(self._config, endianness=Endianness(endianness))
        return self

    def bit_width(self, bit_width: BitWidth) -> HexdumpBuilder:
        self._config = replace(self._config, bit_width=bit_width)
        return self

    def group_size(self, group_size: Union[GroupSize, int]) -> HexdumpBuilder:
        self._config = replace(self._config, group_size=GroupSize(group_size))
        return self

    def groups_per_line(self, groups_per_line: int) -> HexdumpBuilder:
        self._config = replace(self._config, groups_per_line=groups_per_line)
        return self

    def hide_duplicates(self, hide: bool = True) -> HexdumpBuilder:
        self._config = replace(self._config, hide_duplicates=hide)
        return self

    def config(self) -> HexdumpConfig:
        return self._config

    def build(self) -> Hexdump:
        from .hexdump import Hexdump

        return Hexdump(self._config)


class DefaultConfig:
    """
    Process-wide default configuration used when a caller does not pass one.
    Mutating it from several threads at once is the caller's problem.
    """

    def __init__(self) -> None:
        self._config = HexdumpConfig()

    def get(self) -> HexdumpConfig:
        return self._config

    def install(self, config: HexdumpConfig) -> HexdumpConfig:
        previous, self._config = self._config, config
        return previous

    def reset(self) -> None:
        self._config = HexdumpConfig()


DEFAULT_CONFIG = DefaultConfig()
