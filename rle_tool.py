#!/usr/bin/env python3
"""
Compress or decompress text with run-length encoding and report size statistics.

Examples:
  rle-tool compress notes.txt              # writes notes.txt.rle
  rle-tool decompress notes.txt.rle        # writes notes.txt
  rle-tool compress - -o - < in.txt        # stdin -> stdout
  rle-tool decompress in.rle --json        # result record as JSON on stdout
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import List, Optional, TextIO, Union

from rlelib.formats.rle_file import compressed_name, decompressed_name, read_text, write_text
from rlelib.formats.summary import summarize
from rlelib.metrics.ratios import SIZE_UNITS
from rlelib.models.results import CompressionResult, DecompressionResult
from rlelib.service import CodecOptions, compress, decompress
from rlelib.utils.rle import RleDecodeError, RleOutputLimitError

logger = logging.getLogger("rle_tool")

# ---------- CLI ----------

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="rle-tool",
        description="Run-length encode / decode text files and report compression statistics.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "-l", "--level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level",
    )
    sub = p.add_subparsers(dest="command", required=True)

    def _common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("input", help="Input path; use '-' for stdin.")
        sp.add_argument("-o", "--output", default=None,
                        help="Output path; '-' for stdout. Default: derived file name, or stdout for stdin input.")
        sp.add_argument("--unit", choices=list(SIZE_UNITS), default="chars",
                        help="Unit used for sizes and ratios")
        sp.add_argument("--json", action="store_true",
                        help="Print the full result record as JSON to stdout instead of writing content.")

    c = sub.add_parser("compress", help="Encode text as <count><char> tokens.")
    _common(c)

    d = sub.add_parser("decompress", help="Decode <count><char> tokens back to text.")
    _common(d)
    d.add_argument("--strict", action="store_true",
                   help="Fail on malformed tokens instead of dropping them.")
    d.add_argument("--max-output", type=int, default=None,
                   help="Refuse to decode more than N characters.")

    return p.parse_args(argv)

# ---------- helpers ----------

def _read_stdin() -> str:
    # UTF-8 with line endings untouched, same as reading a file path
    buf = getattr(sys.stdin, "buffer", None)
    if buf is None:
        return sys.stdin.read()
    wrapper = io.TextIOWrapper(buf, encoding="utf-8", errors="replace", newline="")
    try:
        return wrapper.read()
    finally:
        wrapper.detach()


def _write_stdout(text: str) -> None:
    buf = getattr(sys.stdout, "buffer", None)
    if buf is None:
        sys.stdout.write(text)
        return
    sys.stdout.flush()
    wrapper = io.TextIOWrapper(buf, encoding="utf-8", newline="")
    try:
        wrapper.write(text)
        wrapper.flush()
    finally:
        wrapper.detach()


def _resolve_output(args: argparse.Namespace) -> Union[str, TextIO]:
    if args.output == "-" or (args.output is None and args.input == "-"):
        return sys.stdout
    if args.output is not None:
        return args.output
    if args.command == "compress":
        return compressed_name(args.input)
    return decompressed_name(args.input)


def _run(args: argparse.Namespace, text: str) -> Union[CompressionResult, DecompressionResult]:
    if args.command == "compress":
        return compress(text, CodecOptions(unit=args.unit))
    opts = CodecOptions(unit=args.unit, strict=args.strict, max_output=args.max_output)
    return decompress(text, opts)

# ---------- main ----------

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.getLevelName(args.level))

    if getattr(args, "max_output", None) is not None and args.max_output < 0:
        print("error: --max-output must be ≥ 0", file=sys.stderr)
        return 2

    try:
        text = _read_stdin() if args.input == "-" else read_text(args.input)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        result = _run(args, text)
    except (RleDecodeError, RleOutputLimitError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(result.to_json(indent=2))
        return 0

    content = result.compressed_content if isinstance(result, CompressionResult) else result.decompressed_content
    target = _resolve_output(args)
    if target is sys.stdout:
        _write_stdout(content)
    else:
        write_text(content, target)
        logger.info("Wrote %s", target)
    print(summarize(result, args.unit), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
