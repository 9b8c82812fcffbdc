"""Arithmetic over the secp256k1 prime field.

Every :class:`FieldElement` holds the canonical representative in ``[0, PRIME)``
and every operation returns a new, reduced element. Secret sharing only needs
one field, so the modulus is a module constant rather than a parameter.
"""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Protocol

from .errors import DivisionByZero, MalformedInput

# 2^256 - 2^32 - 2^9 - 2^8 - 2^7 - 2^6 - 2^4 - 1
PRIME = (1 << 256) - (1 << 32) - (1 << 9) - (1 << 8) - (1 << 7) - (1 << 6) - (1 << 4) - 1

ELEMENT_BYTES = 32
_HEX_DIGITS = frozenset(string.hexdigits)


class ByteSource(Protocol):
    def read(self, size: int) -> bytes:  # pragma: no cover - protocol
        ...


@dataclass(frozen=True, slots=True, order=True)
class FieldElement:
    """Integer modulo :data:`PRIME`."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"FieldElement requires an int, got {type(self.value).__name__}")
        if not 0 <= self.value < PRIME:
            object.__setattr__(self, "value", self.value % PRIME)

    @classmethod
    def zero(cls) -> "FieldElement":
        return cls(0)

    @classmethod
    def one(cls) -> "FieldElement":
        return cls(1)

    @classmethod
    def random(cls, source: ByteSource) -> "FieldElement":
        """Draw 256 random bits and reduce them into the field.

        PRIME sits just below 2^256, so values below ``2^256 mod PRIME`` are
        slightly more likely than the rest. The skew is around 2^-224 and is
        left uncorrected.
        """
        raw = source.read(ELEMENT_BYTES)
        return cls(int.from_bytes(raw, "big") % PRIME)

    @classmethod
    def from_hex(cls, text: str) -> "FieldElement":
        cleaned = text.strip()
        if cleaned[:2].lower() == "0x":
            cleaned = cleaned[2:]
        if not cleaned:
            raise MalformedInput("Empty hex value")
        if not all(char in _HEX_DIGITS for char in cleaned):
            raise MalformedInput(f"Invalid hex value: {text!r}")
        return cls(int(cleaned, 16))

    def to_hex(self) -> str:
        return format(self.value, "x")

    def is_zero(self) -> bool:
        return self.value == 0

    def inverse(self) -> "FieldElement":
        """Modular inverse via the extended Euclidean algorithm."""
        if self.value == 0:
            raise DivisionByZero("Attempted division by zero")

        t, new_t = 0, 1
        r, new_r = PRIME, self.value
        while new_r != 0:
            quotient = r // new_r
            t, new_t = new_t, t - quotient * new_t
            r, new_r = new_r, r - quotient * new_r

        # PRIME is prime, so a non-unit gcd means the arithmetic above is broken.
        if r > 1:
            raise AssertionError(f"unable to invert {self.value}")
        if t < 0:
            t += PRIME
        return FieldElement(t)

    def __add__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value + other.value) % PRIME)

    def __sub__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        if other.value <= self.value:
            return FieldElement(self.value - other.value)
        return FieldElement(PRIME - other.value + self.value)

    def __neg__(self) -> "FieldElement":
        return FieldElement.zero() - self

    def __mul__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value * other.value) % PRIME)

    def __truediv__(self, other: "FieldElement") -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self * other.inverse()

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"FieldElement(0x{self.to_hex()})"


__all__ = ["PRIME", "ELEMENT_BYTES", "ByteSource", "FieldElement"]
