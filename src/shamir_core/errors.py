"""Central exception hierarchy for shamir-core."""
from __future__ import annotations


class ShamirError(Exception):
    """Base exception for all failures"""


class InvalidArgument(ShamirError, ValueError):
    """Raised when sharing parameters are out of range"""


class DivisionByZero(ShamirError, ZeroDivisionError):
    """Raised when the zero field element is inverted"""


class MalformedInput(ShamirError, ValueError):
    """Raised when a secret or share record cannot be decoded"""


class RandomnessUnavailable(ShamirError):
    """Raised when the secure randomness source cannot supply data"""


__all__ = [
    "ShamirError",
    "InvalidArgument",
    "DivisionByZero",
    "MalformedInput",
    "RandomnessUnavailable",
]
