from __future__ import annotations

from enum import Enum
from typing import List, Optional

from .config import HexdumpConfig
from .encoder import encode_group

FMT_START_MARK = "#["
FMT_END_MARK = "]"

# the fixed layout: offset, groups, ascii
DEFAULT_FORMAT = "#[OFFSET]: #[RAW]  #[ASCII]"

MARKER = "*"


class FormatError(ValueError):
    pass


class Field(Enum):
    OFFSET = "OFFSET"
    RAW = "RAW"
    ASCII = "ASCII"


class LineFormat:
    """
    A line template such as "#[OFFSET]: #[RAW] | #[ASCII]". Text outside the
    #[...] marks is kept verbatim; there is always one more separator than
    fields (the prefix and the suffix may be empty).
    """

    def __init__(self, fields: List[Field], separators: List[str]):
        if len(separators) != len(fields) + 1:
            raise FormatError(
                f"{len(fields)} fields need {len(fields) + 1} separators, got {len(separators)}"
            )
        self.fields = fields
        self.separators = separators

    @classmethod
    def parse(cls, fmt: str) -> LineFormat:
        fields: List[Field] = []
        separators: List[str] = []
        pos = 0
        while True:
            start = fmt.find(FMT_START_MARK, pos)
            if start < 0:
                break
            end = fmt.find(FMT_END_MARK, start)
            if end < 0:
                # unterminated mark, rest of the template is literal
                break
            name = fmt[start + len(FMT_START_MARK) : end]
            try:
                fields.append(Field(name))
            except ValueError:
                raise FormatError(f"unknown format field '{name}' in {fmt!r}") from None
            separators.append(fmt[pos:start])
            pos = end + len(FMT_END_MARK)
        separators.append(fmt[pos:])
        return cls(fields, separators)

    def apply(self, offset: str, raw: str, ascii: str) -> str:
        values = {Field.OFFSET: offset, Field.RAW: raw, Field.ASCII: ascii}
        out = [self.separators[0]]
        for fld, sep in zip(self.fields, self.separators[1:]):
            out.append(values[fld])
            out.append(sep)
        return "".join(out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineFormat):
            return NotImplemented
        return self.fields == other.fields and self.separators == other.separators

    def __repr__(self) -> str:
        return f"LineFormat({self.fields!r}, {self.separators!r})"


def render_fields(config: HexdumpConfig, offset: int, data: bytes) -> List[str]:
    """
    Render the three padded fields of a line: offset, numerals and ascii.
    Short lines are padded to the width of a full line.
    """
    numerals = []
    ascii = []
    gs = int(config.group_size)
    for i in range(0, len(data), gs):
        numeral, text = encode_group(data[i : i + gs], config)
        numerals.append(numeral)
        ascii.append(text)
    return [
        "{:0{}x}".format(offset & config.bit_width.mask, config.offset_width),
        " ".join(numerals).ljust(config.numeral_width),
        "".join(ascii).ljust(config.bytes_per_line),
    ]


def render_line(
    config: HexdumpConfig,
    offset: int,
    data: bytes,
    line_format: Optional[LineFormat] = None,
) -> str:
    offset_text, raw, ascii = render_fields(config, offset, data)
    if line_format is None:
        # same as DEFAULT_FORMAT, without going through the template
        return f"{offset_text}: {raw}  {ascii}"
    return line_format.apply(offset_text, raw, ascii)
