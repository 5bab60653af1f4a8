from typing import Tuple

from .config import MAX_BYTES_PER_GROUP, Endianness, HexdumpConfig


def printable(c: int) -> str:  # c should be int 0..255
    # ascii graphic only, space is shown as '.'
    return chr(c) if 32 < c < 127 else "."


def group_value(chunk: bytes, endianness: Endianness) -> int:
    # partial big endian groups are rotated into the low-order end of the
    # buffer so the zero padding is never read as significant bytes
    n = len(chunk)
    buf = bytearray(MAX_BYTES_PER_GROUP)
    buf[:n] = chunk
    if endianness is Endianness.BIG:
        buf = buf[n:] + buf[:n]
    return int.from_bytes(buf, endianness.value)


def encode_group(chunk: bytes, config: HexdumpConfig) -> Tuple[str, str]:
    """
    Render 1..group_size bytes as (numeral, ascii). The numeral is zero
    padded to the width of the largest value a full group can hold; the
    ascii fragment has one character per real byte.
    """
    value = group_value(chunk, config.endianness)
    numeral = format(value, "0{}{}".format(config.group_width, config.base.format_code))
    ascii = "".join(printable(c) for c in chunk)
    return numeral, ascii
