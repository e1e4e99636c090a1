"""
Log-uniform sampling.

Values are drawn uniformly over [min, max] in log-space and exponentiated
back, so a LogUniform(min, max) yields samples in [exp(min), exp(max)],
denser near the lower end of that range.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from loguniform.engine import MersenneTwister
from loguniform.errors import InvalidParameter
from loguniform.seeds.provider import manual_seed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogUniform:
    """Log-uniform distribution; exp(U) for U uniform over [low, high]."""

    low: float
    high: float

    def validate(self) -> None:
        """
        Check that both bounds have a real logarithm.

        Raises:
            InvalidParameter: If a bound is non-positive or not finite, or
                if low exceeds high.
        """
        if not self.low > 0:
            raise InvalidParameter(
                "min",
                "minimum value parameter in log-uniform distribution must be "
                f"greater than zero (got {self.low}; there is no logarithm "
                "of zero or negative values)",
            )
        if not self.high > 0:
            raise InvalidParameter(
                "max",
                "maximum value parameter in log-uniform distribution must be "
                f"greater than zero (got {self.high}; there is no logarithm "
                "of zero or negative values)",
            )
        if math.isinf(self.low):
            raise InvalidParameter("min", "minimum value parameter must be finite")
        if math.isinf(self.high):
            raise InvalidParameter("max", "maximum value parameter must be finite")
        if self.low > self.high:
            raise InvalidParameter(
                "min",
                f"minimum value parameter ({self.low}) must not exceed "
                f"maximum value parameter ({self.high})",
            )

    @property
    def support(self) -> tuple[float, float]:
        """The range (exp(low), exp(high)) covered by samples."""
        return (math.exp(self.low), math.exp(self.high))

    def sample(self, engine: MersenneTwister, count: int) -> tuple[float, ...]:
        """Draw *count* values from *engine*, in draw order."""
        if count == 0:
            return ()
        draws = engine.uniform(self.low, self.high, count)
        return tuple(math.exp(x) for x in draws.tolist())

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dict representation."""
        return {"type": "LogUniform", "low": self.low, "high": self.high}


def _check_count(count: object) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidParameter(
            "count", f"count must be an integer, got {type(count).__name__}"
        )
    if count < 0:
        raise InvalidParameter("count", f"count must be non-negative, got {count}")
    return count


def generate_samples(
    min: float,
    max: float,
    count: int,
    seed: int,
) -> tuple[float, ...]:
    """
    Draw *count* log-uniform samples.

    All parameters are validated before any value is drawn, so either every
    sample is produced or an error is raised.

    Args:
        min: Lower bound of the uniform draw (log-space), > 0.
        max: Upper bound of the uniform draw (log-space), > 0.
        count: Number of samples.
        seed: Unsigned 32-bit seed for the engine.

    Returns:
        A tuple of exactly *count* floats in [exp(min), exp(max)].

    Raises:
        InvalidParameter: If any parameter is invalid.

    Example:
        samples = generate_samples(1.5, 20.06, 100, seed=42)
    """
    distribution = LogUniform(low=min, high=max)
    distribution.validate()
    count = _check_count(count)
    seed = manual_seed(seed)

    logger.debug(f"Drawing {count} samples from {distribution} with seed {seed}")
    return distribution.sample(MersenneTwister(seed), count)
