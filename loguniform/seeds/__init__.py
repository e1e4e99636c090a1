"""
Seeds module: where sampling seeds come from.

Provides:

- manual_seed: Explicit, caller-supplied seed
- automatic_seed: OS entropy with a best-effort fallback
- EntropySource / SystemEntropySource: Pluggable entropy backends
- fallback_seed: Non-cryptographic seed used when no entropy is available
"""

from loguniform.seeds.entropy import EntropySource, SystemEntropySource, fallback_seed
from loguniform.seeds.provider import SEED_MAX, automatic_seed, manual_seed

__all__ = [
    "SEED_MAX",
    "EntropySource",
    "SystemEntropySource",
    "automatic_seed",
    "fallback_seed",
    "manual_seed",
]
