# rlelib/metrics/ratios.py
from __future__ import annotations
from typing import Literal, get_args

SizeUnit = Literal["chars", "bytes"]
SIZE_UNITS: tuple[str, ...] = get_args(SizeUnit)

def check_unit(unit: str) -> str:
    if unit not in SIZE_UNITS:
        raise ValueError(f"unit must be one of {', '.join(SIZE_UNITS)}; got {unit!r}")
    return unit

def measure_size(text: str, unit: SizeUnit = "chars") -> int:
    """
    Length of ``text`` in the given unit:
      chars  code points (len of the str)
      bytes  UTF-8 encoded length
    """
    check_unit(unit)
    if unit == "bytes":
        return len(text.encode("utf-8", errors="surrogatepass"))
    return len(text)

def compression_ratio(original_size: int, compressed_size: int) -> float:
    # percentage points saved; negative when the encoding expanded
    if original_size == 0:
        return 0.0
    return 100.0 - (compressed_size / original_size) * 100.0

def expansion_ratio(compressed_size: int, decompressed_size: int) -> float:
    if compressed_size == 0:
        return 0.0
    return (decompressed_size / compressed_size) * 100.0 - 100.0
