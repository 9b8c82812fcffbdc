"""Secure sampling of nonzero field elements."""
from __future__ import annotations

import os
from typing import List, Optional

import structlog

from .errors import InvalidArgument, RandomnessUnavailable
from .field import ByteSource, FieldElement

logger = structlog.get_logger("shamir_core.sampler")


class RandomSource:
    """Operating system CSPRNG exposed through ``read(size)``."""

    def read(self, size: int) -> bytes:
        try:
            data = os.urandom(size)
        except (OSError, NotImplementedError) as exc:
            raise RandomnessUnavailable("Failed to acquire secure randomness") from exc
        if len(data) != size:
            raise RandomnessUnavailable(f"Short read from randomness source: {len(data)}/{size} bytes")
        return data


def random_nonzero_elements(
    count: int,
    source: Optional[ByteSource] = None,
    *,
    distinct: bool = False,
) -> List[FieldElement]:
    """Draw ``count`` independent uniformly random nonzero elements.

    A batch containing a zero (or, when ``distinct`` is set, a repeated value)
    is thrown away as a whole and redrawn. Resampling just the offending
    entries would give the same distribution with fewer reads.
    """
    if count < 0:
        raise InvalidArgument(f"Element count must be non-negative, got {count}")
    if count == 0:
        return []
    rng = source or RandomSource()
    attempts = 0
    while True:
        attempts += 1
        batch = [FieldElement.random(rng) for _ in range(count)]
        if any(element.is_zero() for element in batch):
            logger.debug("sampler.batch_rejected", reason="zero", size=count, attempt=attempts)
            continue
        if distinct and len(set(batch)) != count:
            logger.debug("sampler.batch_rejected", reason="duplicate", size=count, attempt=attempts)
            continue
        return batch


__all__ = ["RandomSource", "random_nonzero_elements"]
