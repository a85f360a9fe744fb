# unitlex.core.prefix

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Literal

PrefixKind = Literal["none", "metric", "binary"]

_KINDS = ("none", "metric", "binary")
_BASES = {"none": 1, "metric": 10, "binary": 2}


@dataclass(frozen=True, slots=True)
class Prefix:
    """
    A unit prefix: metric (power of ten), binary (power of two) or none.

    Equality is structural, so ``Prefix.metric(3) == Prefix.kilo()``.
    """

    kind: PrefixKind
    exponent: int = 0

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"Unknown prefix kind: {self.kind!r}")
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise ValueError("prefix exponent must be an int")
        if self.kind == "none" and self.exponent != 0:
            raise ValueError("the 'none' prefix must have exponent 0")

    # --- constructors ---
    @classmethod
    def none(cls) -> Prefix:
        return cls("none", 0)

    @classmethod
    def metric(cls, exponent: int) -> Prefix:
        return cls("metric", exponent)

    @classmethod
    def binary(cls, exponent: int) -> Prefix:
        return cls("binary", exponent)

    @classmethod
    def milli(cls) -> Prefix:
        return cls.metric(-3)

    @classmethod
    def kilo(cls) -> Prefix:
        return cls.metric(3)

    @classmethod
    def mega(cls) -> Prefix:
        return cls.metric(6)

    @classmethod
    def kibi(cls) -> Prefix:
        return cls.binary(10)

    @classmethod
    def mebi(cls) -> Prefix:
        return cls.binary(20)

    # --- helpers ---
    @property
    def is_metric(self) -> bool:
        return self.kind == "metric"

    @property
    def is_binary(self) -> bool:
        return self.kind == "binary"

    @property
    def is_none(self) -> bool:
        return self.kind == "none"

    @property
    def factor(self) -> Fraction:
        """Exact multiplier: 10^e for metric, 2^e for binary, 1 for none."""
        return Fraction(_BASES[self.kind]) ** self.exponent

    def __float__(self) -> float:
        return float(self.factor)

    def __repr__(self) -> str:
        if self.is_none:
            return "Prefix.none()"
        return f"Prefix.{self.kind}({self.exponent})"


__all__ = ["Prefix", "PrefixKind"]
