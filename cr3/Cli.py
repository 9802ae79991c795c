# cr3/Cli.py
import argparse
import os
import sys
from typing import Iterator, List, Optional

from cr3.DualLfsr import WARMUP_A_EXTRA, WARMUP_B_EXTRA, DegenerateKeyError, DualLfsr
from cr3.KeyDerivation import MalformedKeyError, derive_parameters, validate_key
from cr3.KeyGen import new_key
from cr3.OutputMode import OutputMode
from cr3.Vigenere import decrypt, encrypt

# 실행 파일 이름 → 출력 모드 (ln -s 로 cr3n / cr3l / cr3h 를 만들어 씀)
MODES_BY_PROG = {
    "cr3n": OutputMode.DIGIT,
    "cr3l": OutputMode.LETTER,
    "cr3h": OutputMode.HEX,
}

DEFAULT_BLOCKS = 20
BLOCK_SIZE = 25
GROUP_SIZE = 5

TAG = "[cr3]"

EXAMPLE = """\
cr3n produces numeric random characters [0-9], cr3l produces alpha random
characters [A-Z] and cr3h produces random hexadecimal values [0-f].

Example: cr3n 0011223380a0f0ed 5
will generate a key 125 chars long using the hex key 0011223380a0f0ed
"""


def format_line(symbols: str) -> str:
    """5개씩 묶고 묶음마다 뒤에 공백 하나 (줄 끝 공백 포함)"""
    return "".join(
        symbols[i:i + GROUP_SIZE] + " " for i in range(0, len(symbols), GROUP_SIZE)
    )


def keystream_lines(stream: DualLfsr, mode: OutputMode, blocks: int) -> Iterator[str]:
    for _ in range(blocks):
        yield format_line("".join(stream.symbols(mode, BLOCK_SIZE)))


def hex_key(value: str) -> str:
    try:
        return validate_key(value)
    except MalformedKeyError as e:
        raise argparse.ArgumentTypeError(str(e))


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid block count: {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError("block count must be a positive integer")
    return n


def build_argparser(prog: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=prog,
        description="Predictable random key generator (two LFSRs, 16 hex digit key).",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("key", nargs="?", type=hex_key,
                   help="16 hex digit key: 8 digits start count + 8 digits start value")
    p.add_argument("blocks", nargs="?", type=positive_int, default=DEFAULT_BLOCKS,
                   help=f"number of blocks of {BLOCK_SIZE} (default {DEFAULT_BLOCKS})")
    p.add_argument("-m", "--mode", choices=[m.value for m in OutputMode],
                   help="n: digits, l: letters, h: hex (default: from program name)")

    text = p.add_mutually_exclusive_group()
    text.add_argument("-e", "--encrypt", metavar="TEXT",
                      help="add the keystream to TEXT instead of printing blocks")
    text.add_argument("-d", "--decrypt", metavar="TEXT",
                      help="subtract the keystream from TEXT")

    p.add_argument("--new-key", action="store_true",
                   help="print a fresh random key and exit")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="progress messages on stderr")
    return p


def resolve_mode(prog: str, mode: Optional[str]) -> Optional[OutputMode]:
    if mode is not None:
        return OutputMode(mode)
    return MODES_BY_PROG.get(prog)


def main(argv: Optional[List[str]] = None, prog: Optional[str] = None) -> int:
    if prog is None:
        prog = os.path.basename(sys.argv[0])

    parser = build_argparser(prog)
    args = parser.parse_args(argv)

    def log(msg: str) -> None:
        if args.verbose:
            print(f"{TAG} {msg}", file=sys.stderr)

    if args.new_key:
        print(new_key())
        return 0

    mode = resolve_mode(prog, args.mode)
    if mode is None:
        parser.error("Please use cr3h, cr3l or cr3n (or pass --mode)")
    if args.key is None:
        parser.error("the key is required")

    params = derive_parameters(args.key)
    log(f"mode={mode.name}, warm-up A: {params.precount + WARMUP_A_EXTRA} steps, "
        f"B: {params.precount + WARMUP_B_EXTRA} steps")

    try:
        stream = DualLfsr.from_key(args.key)
    except DegenerateKeyError as e:
        print(f"\nWarning: {e}", file=sys.stderr)
        return 0

    if args.encrypt is not None:
        print(encrypt(args.encrypt, stream.symbols(mode), mode))
        return 0
    if args.decrypt is not None:
        print(decrypt(args.decrypt, stream.symbols(mode), mode))
        return 0

    log(f"{args.blocks} blocks of {BLOCK_SIZE}")
    for line in keystream_lines(stream, mode, args.blocks):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
