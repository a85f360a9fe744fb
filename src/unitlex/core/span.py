# unitlex.core.span

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Byte range ``[start, end)`` inside one code source."""

    code_source_index: int
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < 0:
            raise ValueError("span offsets must be non-negative")
        if self.start > self.end:
            raise ValueError(f"span start ({self.start}) is past its end ({self.end})")

    @classmethod
    def dummy(cls) -> Span:
        return cls(0, 0, 0)

    @property
    def byte_range(self) -> range:
        return range(self.start, self.end)

    def __len__(self) -> int:
        return self.end - self.start


__all__ = ["Span"]
