"""
Seed provider: manual and automatic seeding.

Two entry points with no shared state:

- manual_seed(value): returns an explicit seed unchanged
- automatic_seed(): asks an entropy source, falling back to fallback_seed()
"""

from __future__ import annotations

import logging

from loguniform.errors import InvalidParameter
from loguniform.seeds.entropy import EntropySource, SystemEntropySource, fallback_seed

logger = logging.getLogger(__name__)

SEED_MAX = 2**32 - 1


def _check_seed(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameter(
            "seed",
            f"seed must be an unsigned 32-bit integer, got {type(value).__name__}",
        )
    if value < 0 or value > SEED_MAX:
        raise InvalidParameter(
            "seed",
            f"seed must be in range [0, {SEED_MAX}], got {value}",
        )
    return value


def manual_seed(value: int) -> int:
    """
    Return *value* as the seed, unchanged.

    Gives callers a named, explicit alternative to automatic seeding.

    Args:
        value: An unsigned 32-bit integer.

    Returns:
        The same integer.

    Raises:
        InvalidParameter: If *value* is not an unsigned 32-bit integer.
    """
    return _check_seed(value)


def automatic_seed(source: EntropySource | None = None) -> int:
    """
    Produce a seed from hardware entropy, or a best-effort fallback.

    If the source reports a nonzero entropy estimate, one raw value is drawn
    from it. Otherwise fallback_seed() is used, which is NOT
    cryptographically secure.

    Args:
        source: Entropy source to query (default: SystemEntropySource()).

    Returns:
        An unsigned 32-bit integer seed.
    """
    source = source if source is not None else SystemEntropySource()

    estimate = source.entropy()
    if estimate:
        seed = source() & SEED_MAX
        logger.debug(f"Seeded from {source!r} (entropy estimate: {estimate} bits)")
        return seed

    seed = fallback_seed()
    logger.debug("No hardware entropy available; using fallback seed")
    return seed
