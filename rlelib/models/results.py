from __future__ import annotations
from dataclasses import dataclass, asdict, fields
from typing import Any, Mapping, Type, TypeVar

R = TypeVar("R", "CompressionResult", "DecompressionResult")


def _check_sizes(obj: Any, *names: str) -> None:
    for name in names:
        if getattr(obj, name) < 0:
            raise ValueError(f"{name} must be ≥ 0.")


def _from_mapping(cls: Type[R], data: Mapping[str, Any]) -> R:
    names = [f.name for f in fields(cls)]
    missing = [k for k in names if k not in data]
    if missing:
        raise ValueError(f"{cls.__name__} is missing key(s): {', '.join(missing)}")
    return cls(**{k: data[k] for k in names})


@dataclass(slots=True)
class CompressionResult:
    """
    Statistics for one compress() call.

    Conventions:
      - Both sizes are measured in the same unit (chars or UTF-8 bytes).
      - compression_ratio is percentage points saved:
            100 - compressed_size / original_size * 100
        negative when the encoding is longer than the input, 0.0 for empty input.
    """

    original_size: int
    compressed_size: int
    compressed_content: str
    compression_ratio: float

    def __post_init__(self) -> None:
        _check_sizes(self, "original_size", "compressed_size")

    @property
    def expanded(self) -> bool:
        return self.compressed_size > self.original_size

    def to_dict(self) -> dict[str, Any]:
        """Field order is the order the host displays them in."""
        return asdict(self)

    def to_json(self, indent: int | None = None) -> str:
        import json
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CompressionResult":
        return _from_mapping(cls, data)

    def __repr__(self) -> str:
        import json
        return json.dumps(asdict(self), indent=4)


@dataclass(slots=True)
class DecompressionResult:
    """
    Statistics for one decompress() call.

    expansion_ratio is percentage points gained:
        decompressed_size / compressed_size * 100 - 100
    and 0.0 when the input was empty.
    """

    compressed_size: int
    decompressed_size: int
    decompressed_content: str
    expansion_ratio: float

    def __post_init__(self) -> None:
        _check_sizes(self, "compressed_size", "decompressed_size")

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self, indent: int | None = None) -> str:
        import json
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DecompressionResult":
        return _from_mapping(cls, data)

    def __repr__(self) -> str:
        import json
        return json.dumps(asdict(self), indent=4)
