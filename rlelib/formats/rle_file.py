# rlelib/formats/rle_file.py
from __future__ import annotations

import os
from logging import getLogger
from typing import Optional, TextIO, Union

from rlelib.models.results import CompressionResult, DecompressionResult
from rlelib.service import CodecOptions, compress, decompress

__all__ = [
    "RLE_SUFFIX",
    "read_text",
    "write_text",
    "compressed_name",
    "decompressed_name",
    "compress_file",
    "decompress_file",
]

logger = getLogger(__name__)

RLE_SUFFIX = ".rle"

PathLike = Union[str, "os.PathLike[str]"]
Source = Union[PathLike, TextIO]             # path | file-like
Sink   = Optional[Union[PathLike, TextIO]]   # path | file-like | None (return string)

# =====================================
# Source / sink plumbing
# =====================================

def read_text(source: Source) -> str:
    """
    Read the whole of ``source``:
      - path (str or PathLike): UTF-8, undecodable bytes replaced,
        line endings left untouched,
      - file-like: whatever ``.read()`` returns.
    """
    if hasattr(source, "read"):
        return source.read()  # type: ignore[union-attr]
    path = os.fspath(source)  # type: ignore[arg-type]
    if not os.path.isfile(path):
        raise FileNotFoundError(f"file not found: {path}")
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as fh:
        return fh.read()


def write_text(text: str, sink: Sink) -> str:
    if sink is None:
        return text
    if hasattr(sink, "write"):
        sink.write(text)  # type: ignore[union-attr]
        return text
    if not isinstance(sink, (str, os.PathLike)):
        raise TypeError("sink must be a path, a file-like with .write, or None")
    path = os.fspath(sink)
    out_dir = os.path.dirname(os.path.abspath(path))
    if out_dir and not os.path.isdir(out_dir):
        os.makedirs(out_dir, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(text)
    return text

# =====================================
# Output naming
# =====================================

def compressed_name(path: PathLike) -> str:
    return os.fspath(path) + RLE_SUFFIX


def decompressed_name(path: PathLike) -> str:
    """
    ``notes.txt.rle`` -> ``notes.txt``. Inputs without the suffix get ``.out``
    appended so the derived name never points back at the input.
    """
    p = os.fspath(path)
    if p.endswith(RLE_SUFFIX) and len(os.path.basename(p)) > len(RLE_SUFFIX):
        return p[: -len(RLE_SUFFIX)]
    return p + ".out"

# =====================================
# File-level operations
# =====================================

def compress_file(
    path: PathLike,
    output: Sink = None,
    *,
    options: Optional[CodecOptions] = None,
) -> CompressionResult:
    """Compress a text file; ``output=None`` writes ``<path>.rle`` beside it."""
    text = read_text(path)
    result = compress(text, options)
    target = output if output is not None else compressed_name(path)
    write_text(result.compressed_content, target)
    logger.info("Compressed %s (%d -> %d)", os.fspath(path), result.original_size, result.compressed_size)
    return result


def decompress_file(
    path: PathLike,
    output: Sink = None,
    *,
    options: Optional[CodecOptions] = None,
) -> DecompressionResult:
    """Decompress an ``.rle`` file; ``output=None`` writes beside it without the suffix."""
    text = read_text(path)
    result = decompress(text, options)
    target = output if output is not None else decompressed_name(path)
    write_text(result.decompressed_content, target)
    logger.info("Decompressed %s (%d -> %d)", os.fspath(path), result.compressed_size, result.decompressed_size)
    return result
