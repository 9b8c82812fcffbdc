"""Shamir secret sharing over the secp256k1 prime field."""
from .errors import DivisionByZero, InvalidArgument, MalformedInput, RandomnessUnavailable, ShamirError
from .field import PRIME, FieldElement
from .sampler import RandomSource, random_nonzero_elements
from .sharing import Share, generate_shares, lagrange_basis_at_zero, reconstruct_secret
from .version import __version__

__all__ = [
    "PRIME",
    "FieldElement",
    "Share",
    "RandomSource",
    "random_nonzero_elements",
    "generate_shares",
    "lagrange_basis_at_zero",
    "reconstruct_secret",
    "ShamirError",
    "InvalidArgument",
    "DivisionByZero",
    "MalformedInput",
    "RandomnessUnavailable",
    "__version__",
]
