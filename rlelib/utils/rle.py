# rlelib/utils/rle.py
from __future__ import annotations

import re
import sys
from logging import getLogger
from typing import Iterator, Optional, Tuple

__all__ = [
    "RleDecodeError",
    "RleOutputLimitError",
    "iter_runs",
    "rle_encode",
    "rle_decode",
    "decode_with_stats",
]

logger = getLogger(__name__)

# one maximal run of a single character; DOTALL so newlines collapse too
_RUN = re.compile(r"(.)\1*", re.DOTALL)

_DIGITS = frozenset("0123456789")

# counts above the native size limit are treated as unparseable
MAX_COUNT = sys.maxsize
_MAX_COUNT_DIGITS = len(str(MAX_COUNT))


class RleDecodeError(ValueError):
    """Raised by the strict decoder for a unit it cannot read as count+character."""

    def __init__(self, position: int, reason: str):
        super().__init__(f"{reason} at position {position}")
        self.position = position
        self.reason = reason


class RleOutputLimitError(ValueError):
    """Raised when a token would grow the decoded output past ``max_output``."""

    def __init__(self, limit: int, position: int):
        super().__init__(f"decoded output exceeds {limit} characters (token at position {position})")
        self.limit = limit
        self.position = position


def iter_runs(input_string: str) -> Iterator[Tuple[int, str]]:
    """Yield (count, char) for each maximal run of identical characters."""
    for m in _RUN.finditer(input_string):
        yield len(m.group(0)), m.group(1)


def rle_encode(input_string: str) -> str:
    """
    Collapse every run into ``<count><char>``, singletons included:

        rle_encode("aaaabbbcca") == "4a3b2c1a"
    """
    return _RUN.sub(lambda m: str(len(m.group(0))) + m.group(1), input_string)


def _parse_count(digits: str) -> Optional[int]:
    # None means "failed or overflowed"; leading zeros never overflow
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_COUNT_DIGITS:
        return None
    count = int(digits)
    return count if count <= MAX_COUNT else None


def decode_with_stats(
    input_string: str,
    *,
    strict: bool = False,
    max_output: Optional[int] = None,
) -> Tuple[str, int]:
    """
    Decode ``<count><char>`` tokens and return (text, dropped_units).

    Default (fail-soft) behaviour never raises on malformed input:
      - a character with no digits before it is skipped,
      - trailing digits with nothing after them are skipped,
      - a count that overflows is read as 0 (the character is consumed).
    With ``strict=True`` each of those raises RleDecodeError instead.
    ``max_output`` bounds the decoded length (RleOutputLimitError).
    """
    out: list[str] = []
    out_len = 0
    dropped = 0
    i = 0
    n = len(input_string)
    while i < n:
        j = i
        while j < n and input_string[j] in _DIGITS:
            j += 1

        if j < n and j > i:
            count = _parse_count(input_string[i:j])
            if count is None:
                if strict:
                    raise RleDecodeError(i, "count overflows")
                count = 0
            if max_output is not None and out_len + count > max_output:
                raise RleOutputLimitError(max_output, i)
            if count:
                out.append(input_string[j] * count)
                out_len += count
            i = j + 1
        else:
            if strict:
                reason = "trailing count without a character" if j > i else "character without a count"
                raise RleDecodeError(i, reason)
            # drop one unit: the bare character, or the trailing digits
            dropped += 1
            i = j + 1

    if dropped:
        logger.debug("Dropped %d unparseable unit(s) while decoding %d characters", dropped, n)
    return "".join(out), dropped


def rle_decode(
    input_string: str,
    *,
    strict: bool = False,
    max_output: Optional[int] = None,
) -> str:
    """Inverse of rle_encode for text without digits; see decode_with_stats."""
    text, _ = decode_with_stats(input_string, strict=strict, max_output=max_output)
    return text
