"""
loguniform CLI: Draw log-uniform samples and print them.

With no arguments, draws 100 samples over the log-space bounds
(1.5, 20.06) using an automatically chosen seed, one value per line.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from loguniform.config import SamplerSettings, load_settings
from loguniform.errors import InvalidParameter
from loguniform.sampler import generate_samples
from loguniform.seeds import automatic_seed, manual_seed

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loguniform",
        description="Draw samples from a log-uniform distribution",
    )
    parser.add_argument(
        "--min",
        type=float,
        help="Lower bound in log-space (default: 1.5)",
    )
    parser.add_argument(
        "--max",
        type=float,
        help="Upper bound in log-space (default: 20.06)",
    )
    parser.add_argument(
        "--count", "-n",
        type=int,
        help="Number of samples (default: 100)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        help="Explicit seed (default: automatic)",
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        help="TOML settings file with a [sampler] table",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def resolve_settings(args: argparse.Namespace) -> SamplerSettings:
    """Combine defaults, the optional settings file and CLI options."""
    settings = load_settings(args.config) if args.config else SamplerSettings()
    return settings.with_overrides(
        min=args.min,
        max=args.max,
        count=args.count,
        seed=args.seed,
    )


def run(settings: SamplerSettings) -> int:
    """Seed, sample and print one value per line."""
    if settings.seed is None:
        seed = automatic_seed()
    else:
        seed = manual_seed(settings.seed)

    samples = generate_samples(settings.min, settings.max, settings.count, seed)
    for value in samples:
        print(value)

    logger.debug(f"Wrote {len(samples)} samples (seed {seed})")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Keep stderr quiet on success unless asked for more
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        settings = resolve_settings(args)
        return run(settings)
    except (InvalidParameter, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception:
        logger.debug("Unclassified failure", exc_info=True)
        print("Error: uncaught exception detected", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
