# rlelib/formats/summary.py
from __future__ import annotations
from typing import Union

from rlelib.metrics.ratios import SizeUnit, check_unit
from rlelib.models.results import CompressionResult, DecompressionResult

def format_kb(size: int) -> str:
    return f"{size / 1024:.2f} KB"

def _line(ratio: float, before: int, after: int, unit: SizeUnit) -> str:
    check_unit(unit)
    return f"{ratio:.2f}% ({before} → {after} {unit})"

def compression_summary(result: CompressionResult, unit: SizeUnit = "chars") -> str:
    """``75.00% (40 → 10 chars)``, or ``N/A`` when there was nothing to compress."""
    if result.original_size == 0:
        return "N/A"
    return _line(result.compression_ratio, result.original_size, result.compressed_size, unit)

def expansion_summary(result: DecompressionResult, unit: SizeUnit = "chars") -> str:
    if result.compressed_size == 0:
        return "N/A"
    return _line(result.expansion_ratio, result.compressed_size, result.decompressed_size, unit)

def summarize(result: Union[CompressionResult, DecompressionResult], unit: SizeUnit = "chars") -> str:
    """Two-line report: sizes in KB, then the ratio line."""
    if isinstance(result, CompressionResult):
        sizes = f"original {format_kb(result.original_size)}, compressed {format_kb(result.compressed_size)}"
        return f"{sizes}\ncompression ratio: {compression_summary(result, unit)}"
    if isinstance(result, DecompressionResult):
        sizes = f"compressed {format_kb(result.compressed_size)}, decompressed {format_kb(result.decompressed_size)}"
        return f"{sizes}\nexpansion ratio: {expansion_summary(result, unit)}"
    raise TypeError(f"Unsupported result type {type(result).__name__}")
