"""
Sampler settings and the optional TOML settings file.

This module provides:

- SamplerSettings: Bounds, count and seed for one sampling run
- load_settings: Read a settings file plus its local override

A settings file holds a single ``[sampler]`` table::

    [sampler]
    min = 1.5
    max = 20.06
    count = 100
    seed = 42        # optional; omit for automatic seeding

If a sibling ``<stem>.local.toml`` exists (e.g. ``loguniform.local.toml``
next to ``loguniform.toml``), its ``[sampler]`` keys override the base
file. Resolution order is:

    built-in defaults → settings file → local overrides → CLI options
"""

from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_MIN = 1.5
DEFAULT_MAX = 20.06
DEFAULT_COUNT = 100

SECTION = "sampler"


@dataclass(frozen=True)
class SamplerSettings:
    """
    Parameters for one sampling run.

    Attributes:
        min: Lower log-space bound.
        max: Upper log-space bound.
        count: Number of samples.
        seed: Explicit seed, or ``None`` for automatic seeding.
    """

    min: float = DEFAULT_MIN
    max: float = DEFAULT_MAX
    count: int = DEFAULT_COUNT
    seed: int | None = None

    def with_overrides(self, **overrides: Any) -> SamplerSettings:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SamplerSettings:
        """
        Create settings from a parsed ``[sampler]`` table.

        Raises:
            ValueError: If the table contains unknown keys.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(
                f"Unknown [{SECTION}] settings: {', '.join(unknown)}. "
                f"Available settings: {', '.join(sorted(known))}"
            )
        return cls().with_overrides(**data)


def local_path_for(path: Path) -> Path:
    """Return the local override path for a settings file."""
    return path.with_name(f"{path.stem}.local{path.suffix}")


def load_settings(path: Path) -> SamplerSettings:
    """
    Load sampler settings from *path*, applying local overrides.

    Args:
        path: Path to a TOML settings file.

    Returns:
        The resolved SamplerSettings.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the ``[sampler]`` table contains unknown keys.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with open(path, "rb") as f:
        table = tomllib.load(f).get(SECTION, {})

    local_path = local_path_for(path)
    if local_path.is_file():
        with open(local_path, "rb") as f:
            table = table | tomllib.load(f).get(SECTION, {})

    return SamplerSettings.from_dict(table)
