"""
Entropy sources for automatic seeding.

An EntropySource reports how much randomness it can supply (in bits) and
hands out raw 32-bit values. SystemEntropySource wraps the operating
system's pool. When no source is available, fallback_seed() mixes a few
weakly-random process signals into a usable (but NOT cryptographically
secure) seed.
"""

from __future__ import annotations

import hashlib
import itertools
import os
import secrets
import threading
import time
from pathlib import Path
from typing import Protocol

ENTROPY_AVAIL_PATH = Path("/proc/sys/kernel/random/entropy_avail")

_WALL_CLOCK_MODULUS = 10_000_000_000
_MASK_32 = 0xFFFFFFFF

# Distinguishes fallback seeds requested within the same clock tick.
_fallback_counter = itertools.count()


class EntropySource(Protocol):
    """Protocol for sources of true randomness."""

    def entropy(self) -> float:
        """Return the entropy estimate in bits (0 means unavailable)."""
        ...

    def __call__(self) -> int:
        """Return one raw unsigned 32-bit value."""
        ...


class SystemEntropySource:
    """
    Entropy source backed by the operating system.

    On Linux the kernel's own estimate is reported. Elsewhere the estimate
    is 32 bits when the OS randomness source answers, and 0 when Python
    reports that no source exists.
    """

    def __init__(self, entropy_path: Path | None = ENTROPY_AVAIL_PATH) -> None:
        self._entropy_path = entropy_path

    def entropy(self) -> float:
        if self._entropy_path is not None:
            try:
                return float(int(self._entropy_path.read_text().strip()))
            except (OSError, ValueError):
                pass  # Not Linux, or procfs unavailable: probe instead

        try:
            os.urandom(4)
        except NotImplementedError:
            return 0.0
        return 32.0

    def __call__(self) -> int:
        return secrets.randbits(32)

    def __repr__(self) -> str:
        return f"SystemEntropySource(entropy_path={self._entropy_path!r})"


def _identity_hash() -> int:
    """32-bit hash of signals that differ between processes and calls."""
    data = (
        f"{os.getpid()}:{time.monotonic_ns()}:"
        f"{threading.get_ident()}:{next(_fallback_counter)}"
    )
    h = hashlib.sha256(data.encode("utf-8")).digest()
    return int.from_bytes(h[:4], "big")


def fallback_seed() -> int:
    """
    Build a best-effort seed without any entropy source.

    Combines (XOR) a hash of process-local identity signals with the
    wall-clock time in seconds, reduced modulo 10**10 and truncated to 32
    bits. Not suitable for anything security related.

    Returns:
        An unsigned 32-bit integer.
    """
    now = int(time.time()) % _WALL_CLOCK_MODULUS
    return (_identity_hash() ^ now) & _MASK_32
