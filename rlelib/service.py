# rlelib/service.py
from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import Optional

from rlelib.metrics.ratios import SizeUnit, check_unit, compression_ratio, expansion_ratio, measure_size
from rlelib.models.results import CompressionResult, DecompressionResult
from rlelib.utils.rle import decode_with_stats, rle_encode

__all__ = ["CodecOptions", "compress", "decompress"]

logger = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CodecOptions:
    # Size accounting: "chars" (code points) or "bytes" (UTF-8)
    unit: SizeUnit = "chars"

    # Decoder toggles (both off = fail-soft, unbounded)
    strict: bool = False
    max_output: Optional[int] = None

    def __post_init__(self) -> None:
        check_unit(self.unit)
        if self.max_output is not None and self.max_output < 0:
            raise ValueError("max_output must be ≥ 0 or None.")


_DEFAULTS = CodecOptions()


def compress(text: str, options: Optional[CodecOptions] = None) -> CompressionResult:
    """
    Run-length encode ``text`` and report sizes in ``options.unit``.

    Empty input short-circuits to an all-zero record.
    """
    opts = options or _DEFAULTS
    if not text:
        return CompressionResult(
            original_size=0,
            compressed_size=0,
            compressed_content="",
            compression_ratio=0.0,
        )

    encoded = rle_encode(text)
    original_size = measure_size(text, opts.unit)
    compressed_size = measure_size(encoded, opts.unit)
    logger.debug("Compressed %d -> %d %s", original_size, compressed_size, opts.unit)
    return CompressionResult(
        original_size=original_size,
        compressed_size=compressed_size,
        compressed_content=encoded,
        compression_ratio=compression_ratio(original_size, compressed_size),
    )


def decompress(text: str, options: Optional[CodecOptions] = None) -> DecompressionResult:
    """
    Decode ``text`` as ``<count><char>`` tokens and report sizes in ``options.unit``.

    Malformed input is decoded best-effort unless ``options.strict`` is set.
    """
    opts = options or _DEFAULTS
    decoded, dropped = decode_with_stats(text, strict=opts.strict, max_output=opts.max_output)
    compressed_size = measure_size(text, opts.unit)
    decompressed_size = measure_size(decoded, opts.unit)
    logger.debug(
        "Decompressed %d -> %d %s (%d unit(s) dropped)",
        compressed_size, decompressed_size, opts.unit, dropped,
    )
    return DecompressionResult(
        compressed_size=compressed_size,
        decompressed_size=decompressed_size,
        decompressed_content=decoded,
        expansion_ratio=expansion_ratio(compressed_size, decompressed_size),
    )
