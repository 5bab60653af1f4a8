import argparse
import sys
from typing import BinaryIO, List, Optional

from .config import Base, BitWidth, Endianness, GroupSize, HexdumpBuilder
from .hexdump import Hexdump
from .render import DEFAULT_FORMAT, FormatError, LineFormat

# e.g. $ python -m pyhexdump.cli -g 4 -n 4 -e big --squeeze firmware.bin
#      $ cat blob.bin | pyhexdump -b 8 -k 0x100 -l 64 -


def number(text: str) -> int:
    # accepts 0x.. and 0o.. prefixes
    return int(text, 0)


def line_format(text: str) -> LineFormat:
    try:
        return LineFormat.parse(text)
    except FormatError as ex:
        raise argparse.ArgumentTypeError(str(ex))


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Hexdump a file or stdin",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "file", help="file to dump, '-' for stdin", nargs="?", default="-"
    )
    parser.add_argument(
        "-b", "--base", help="numeral base", type=int, choices=[2, 8, 10, 16], default=16
    )
    parser.add_argument(
        "-e", "--endian", help="group byte order", choices=["little", "big"], default="little"
    )
    parser.add_argument(
        "-w", "--offset-width", help="offset bits", type=int, choices=[32, 64], default=32
    )
    parser.add_argument(
        "-g",
        "--group-size",
        help="bytes per group",
        type=int,
        choices=[1, 2, 4, 8],
        default=1,
    )
    parser.add_argument("-n", "--groups", help="groups per line", type=int, default=16)
    parser.add_argument(
        "-s",
        "--squeeze",
        help="collapse duplicate lines into '*'",
        action="store_true",
        default=False,
    )
    parser.add_argument(
        "-o", "--offset", help="offset shown for the first byte", type=number, default=0
    )
    parser.add_argument(
        "-k", "--skip", help="skip bytes of input first", type=number, default=0
    )
    parser.add_argument(
        "-l", "--length", help="stop after LENGTH bytes", type=number, default=None
    )
    parser.add_argument(
        "-f", "--format", help="line template", type=line_format, default=DEFAULT_FORMAT
    )
    parser.add_argument(
        "--verbose", help="Print progress to stderr", action="store_true", default=False
    )
    return parser


def skip_input(stream: BinaryIO, count: int) -> None:
    if stream.seekable():
        stream.seek(count, 1)
        return
    # pipes can't seek, read and throw away
    while count > 0:
        data = stream.read(min(count, 65536))
        if not data:
            break
        count -= len(data)


def main(argv: Optional[List[str]] = None) -> int:
    args = get_parser().parse_args(argv)

    try:
        config = (
            HexdumpBuilder()
            .base(Base(args.base))
            .endianness(Endianness(args.endian))
            .bit_width(BitWidth.BW64 if args.offset_width == 64 else BitWidth.BW32)
            .group_size(GroupSize(args.group_size))
            .groups_per_line(args.groups)
            .hide_duplicates(args.squeeze)
            .config()
        )
    except ValueError as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 2

    fmt: LineFormat = args.format
    if args.verbose:
        print(f"config {config}", file=sys.stderr)

    if args.file == "-":
        stream = sys.stdin.buffer
    else:
        try:
            stream = open(args.file, "rb")
        except OSError as ex:
            print(f"error: {ex}", file=sys.stderr)
            return 1
        if args.verbose:
            print(f"reading {args.file}", file=sys.stderr)

    try:
        if args.skip:
            skip_input(stream, args.skip)
        rhx = Hexdump(config, fmt)
        count = rhx.dump(
            stream, sys.stdout.buffer, args.offset + args.skip, args.length
        )
        sys.stdout.buffer.flush()
    finally:
        if stream is not sys.stdin.buffer:
            stream.close()

    if args.verbose:
        print(f"wrote {count} lines", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
