import io
from typing import Iterator

import pytest

from pyhexdump import (
    DEFAULT_CONFIG,
    Base,
    BitWidth,
    GroupSize,
    Hexdump,
    HexdumpBuilder,
    HexdumpConfig,
    LineFormat,
    hexdump,
    hexdumps,
    install,
    print_hexdump,
)

V = bytes(range(0x14))

V_DUMP = (
    "00000000: 00 01 02 03 04 05 06 07 08 09 0a 0b 0c 0d 0e 0f  ................\n"
    "00000010: 10 11 12 13" + " " * 36 + "  ...." + " " * 12 + "\n"
)


class FullDisk(io.RawIOBase):
    def writable(self) -> bool:
        return True

    def write(self, b) -> int:  # type: ignore[no-untyped-def]
        raise OSError(28, "No space left on device")


@pytest.fixture
def default_config() -> Iterator[None]:
    yield
    DEFAULT_CONFIG.reset()


def test_dumps() -> None:
    assert Hexdump().dumps(V) == V_DUMP
    assert Hexdump().dumps(io.BytesIO(V)) == V_DUMP
    assert Hexdump().dumps(b"") == ""


def test_dumps_offset() -> None:
    out = Hexdump().dumps(V, 0x12340000)
    assert out.startswith("12340000: 00 01")
    assert "\n12340010: 10 11 12 13 " in out


def test_lines() -> None:
    assert Hexdump().lines(V) == V_DUMP.splitlines()


def test_dump_to_byte_sink() -> None:
    sink = io.BytesIO()
    assert Hexdump().dump(io.BytesIO(V), sink) == 2
    assert sink.getvalue() == V_DUMP.encode()


def test_dump_sink_error() -> None:
    with pytest.raises(OSError):
        Hexdump().dump(V, FullDisk())


def test_print(capsys: pytest.CaptureFixture[str]) -> None:
    Hexdump().print(V)
    assert capsys.readouterr().out == V_DUMP
    print_hexdump(V)
    assert capsys.readouterr().out == V_DUMP


def test_print_to_file() -> None:
    out = io.StringIO()
    Hexdump().print(V, file=out)
    assert out.getvalue() == V_DUMP


def test_hexdump_class() -> None:
    dump = hexdump(V)
    assert str(dump) == V_DUMP.rstrip("\n")
    # bytes can be iterated again
    assert list(dump) == V_DUMP.splitlines()
    assert repr(hexdump(V, 0x100)).startswith("00000100: ")


def test_hexdump_class_config() -> None:
    config = HexdumpConfig(group_size=GroupSize.WORD, groups_per_line=2)
    fmt = LineFormat.parse("#[OFFSET] #[RAW]")
    assert list(hexdump(b"\x01\x02\x03\x04\x05", config=config, line_format=fmt)) == [
        "00000000 0201 0403",
        "00000004 0005     ",
    ]


def test_builder_hide_duplicates() -> None:
    rhx = HexdumpBuilder().hide_duplicates(True).groups_per_line(4).build()
    assert rhx.dumps(bytes(0x10)) == (
        "00000000: 00 00 00 00  ....\n" "*\n" "0000000c: 00 00 00 00  ....\n"
    )


def test_install(default_config: None) -> None:
    assert hexdumps(V) == V_DUMP
    config = (
        HexdumpBuilder()
        .base(Base.OCT)
        .bit_width(BitWidth.BW64)
        .group_size(GroupSize.WORD)
        .groups_per_line(4)
        .config()
    )
    previous = install(config)
    assert previous == HexdumpConfig()
    assert hexdumps(V) == (
        "0000000000000000: 000400 001402 002404 003406  ........\n"
        "0000000000000008: 004410 005412 006414 007416  ........\n"
        "0000000000000010: 010420 011422" + " " * 14 + "  ...." + " " * 4 + "\n"
    )
    # an explicit config is not affected by the installed one
    assert Hexdump(HexdumpConfig()).dumps(V) == V_DUMP


def test_dump_template_text_is_utf8() -> None:
    sink = io.BytesIO()
    rhx = Hexdump(HexdumpConfig(groups_per_line=4), LineFormat.parse("#[OFFSET] │ #[ASCII] │"))
    assert rhx.dump(b"abc", sink) == 1
    assert sink.getvalue() == "00000000 │ abc  │\n".encode("utf-8")
