"""Shamir secret sharing (t-of-n) over the secp256k1 prime field.

``generate_shares(secret, threshold, count)`` hides ``secret`` as the constant
term of a random polynomial of degree ``threshold - 1`` and evaluates it at
``count`` random nonzero points. ``reconstruct_secret(shares)`` recovers the
constant term by Lagrange interpolation at x = 0.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import structlog

from .errors import InvalidArgument
from .field import ByteSource, FieldElement
from .sampler import RandomSource, random_nonzero_elements

logger = structlog.get_logger("shamir_core.sharing")


@dataclass(frozen=True, slots=True)
class Share:
    """One point ``(x, P(x))`` of the secret polynomial."""

    x: FieldElement
    y: FieldElement


def _coerce(secret: Union[FieldElement, int]) -> FieldElement:
    if isinstance(secret, FieldElement):
        return secret
    return FieldElement(secret)


def _evaluate(secret: FieldElement, coefficients: Sequence[FieldElement], x: FieldElement) -> FieldElement:
    out = secret
    x_to_the = x
    for coeff in coefficients:
        out = out + coeff * x_to_the
        x_to_the = x_to_the * x
    return out


def generate_shares(
    secret: Union[FieldElement, int],
    threshold: int,
    count: int,
    source: Optional[ByteSource] = None,
) -> List[Share]:
    if threshold <= 1:
        raise InvalidArgument(f"Threshold must be greater than 1, got {threshold}")
    if threshold > count:
        raise InvalidArgument(f"Threshold {threshold} exceeds share count {count}")

    secret = _coerce(secret)
    rng = source or RandomSource()

    coefficients = random_nonzero_elements(threshold - 1, rng)

    if _evaluate(secret, coefficients, FieldElement.zero()) != secret:
        raise AssertionError("secret not embedded in the polynomial correctly")

    xs = random_nonzero_elements(count, rng, distinct=True)
    shares = [Share(x=x, y=_evaluate(secret, coefficients, x)) for x in xs]
    logger.debug("shares.generated", threshold=threshold, count=count)
    return shares


def lagrange_basis_at_zero(j: int, shares: Sequence[Share]) -> FieldElement:
    """Evaluate the ``j``-th Lagrange basis polynomial at zero.

    A repeated x-coordinate makes a denominator zero and raises
    :class:`~shamir_core.errors.DivisionByZero`.
    """
    xj = shares[j].x
    numerator = FieldElement.one()
    denominator = FieldElement.one()
    for i, share in enumerate(shares):
        if i == j:
            continue
        numerator = numerator * (FieldElement.zero() - share.x)
        denominator = denominator * (xj - share.x)
    # a repeated x leaves the denominator at zero
    return numerator / denominator


def reconstruct_secret(shares: Sequence[Share]) -> FieldElement:
    """Interpolate ``shares`` and return the polynomial's constant term.

    The caller supplies at least ``threshold`` shares from one sharing. Fewer
    shares, or shares from different polynomials, yield an unrelated value
    without any error.
    """
    if not shares:
        raise InvalidArgument("At least one share is required")
    accum = FieldElement.zero()
    for j, share in enumerate(shares):
        accum = accum + share.y * lagrange_basis_at_zero(j, shares)
    logger.debug("secret.reconstructed", shares=len(shares))
    return accum


__all__ = ["Share", "generate_shares", "lagrange_basis_at_zero", "reconstruct_secret"]
