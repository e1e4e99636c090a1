"""
loguniform: Reproducible log-uniform sampling.

A sample is exp(U) where U is uniform over [min, max]; samples therefore
cover [exp(min), exp(max)] and are denser towards the lower end. Seeds come
either from the caller (manual_seed) or from OS entropy with a best-effort
fallback (automatic_seed).

Example:
    import loguniform

    seed = loguniform.automatic_seed()
    samples = loguniform.generate_samples(1.5, 20.06, 100, seed)

    # Reproducible run
    again = loguniform.generate_samples(1.5, 20.06, 100, loguniform.manual_seed(42))
"""

__version__ = "0.1.0"

from loguniform.config import SamplerSettings, load_settings
from loguniform.engine import MersenneTwister
from loguniform.errors import InvalidParameter
from loguniform.sampler import LogUniform, generate_samples
from loguniform.seeds import (
    EntropySource,
    SystemEntropySource,
    automatic_seed,
    fallback_seed,
    manual_seed,
)

__all__ = [
    "EntropySource",
    "InvalidParameter",
    "LogUniform",
    "MersenneTwister",
    "SamplerSettings",
    "SystemEntropySource",
    "automatic_seed",
    "fallback_seed",
    "generate_samples",
    "load_settings",
    "manual_seed",
]
