"""Timing harness comparing the uniform and fast pair samplers.

Usage::

    pair-sampler-bench
    pair-sampler-bench --strategy fast --length 1000 --deny 10 11
    python -m pair_sampler --iterations 1000000 --seed 7

Defaults come from :class:`~pair_sampler.config.PairSamplerConfig`, so
``PAIR_BENCH_*`` environment variables apply as well.
"""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pair_sampler.config import PairSamplerConfig
from pair_sampler.exceptions import PreconditionViolation
from pair_sampler.rng.registry import RandomSourceRegistry
from pair_sampler.sampling.registry import PairSamplerRegistry
from pair_sampler.validation import validate_inputs

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pair_sampler.rng.base import RandomSource
    from pair_sampler.sampling.base import PairSampler

logger = logging.getLogger("pair_sampler")

# Display names used in the benchmark report.
_LABELS = {"uniform": "Uniform", "fast": "Non-Uniform"}


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """Timing of one strategy.

    Attributes:
        name: Strategy name.
        iterations: Number of timed calls.
        total_ns: Wall time spent in the timed calls.
    """

    name: str
    iterations: int
    total_ns: int

    @property
    def ns_per_call(self) -> float:
        return self.total_ns / self.iterations


def run_benchmark(
    sampler: PairSampler,
    length: int,
    deny: tuple[int, int],
    rng: RandomSource,
    iterations: int,
    warmup: int = 0,
) -> BenchmarkResult:
    """Time *iterations* calls of ``sampler.sample(length, deny, rng)``.

    Args:
        sampler: Strategy under test.
        length: Domain size.
        deny: Forbidden pair.
        rng: Random source, shared across all calls.
        iterations: Number of timed calls (must be positive).
        warmup: Untimed calls made first.

    Returns:
        BenchmarkResult for the timed calls.

    Raises:
        PreconditionViolation: On invalid *length* or *deny*.
        ValueError: If *iterations* is not positive.
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    validate_inputs(length, deny)

    sample = sampler.sample
    for _ in range(warmup):
        sample(length, deny, rng)

    start = time.perf_counter_ns()
    for _ in range(iterations):
        sample(length, deny, rng)
    total_ns = time.perf_counter_ns() - start
    return BenchmarkResult(sampler.name, iterations, total_ns)


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {value}")
    return value


def _build_parser(defaults: PairSamplerConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pair-sampler-bench",
        description="Benchmark the uniform and fast pair samplers",
    )
    parser.add_argument(
        "--strategy",
        choices=[*PairSamplerRegistry.list_registered(), "all"],
        default="all",
        help="Strategy to time (default: all)",
    )
    parser.add_argument("--length", type=int, default=defaults.bench_length, help="Domain size")
    parser.add_argument(
        "--deny",
        type=int,
        nargs=2,
        metavar=("A", "B"),
        default=[defaults.bench_deny_a, defaults.bench_deny_b],
        help="Forbidden pair",
    )
    parser.add_argument(
        "--iterations",
        type=_positive_int,
        default=defaults.bench_iterations,
        help="Timed calls per strategy",
    )
    parser.add_argument(
        "--warmup", type=_non_negative_int, default=defaults.bench_warmup, help="Untimed calls"
    )
    parser.add_argument(
        "--seed", type=int, default=defaults.seed if defaults.seed is not None else 1
    )
    parser.add_argument(
        "--source",
        default=defaults.random_source_type,
        choices=RandomSourceRegistry.list_available(),
        help="Random source name (default: %(default)s)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmark CLI.

    Returns:
        Process exit code: 0 on success, 2 on invalid sampling arguments
        or an unknown configured random source.
    """
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    defaults = PairSamplerConfig()
    args = _build_parser(defaults).parse_args(argv)

    names = PairSamplerRegistry.list_registered() if args.strategy == "all" else [args.strategy]
    deny = (args.deny[0], args.deny[1])
    try:
        validate_inputs(args.length, deny)
    except PreconditionViolation as exc:
        logger.error("Invalid benchmark arguments: %s", exc)
        return 2
    try:
        RandomSourceRegistry.get(args.source)
    except KeyError as exc:
        logger.error("Invalid benchmark arguments: %s", exc.args[0])
        return 2

    config = defaults.model_copy(update={"random_source_type": args.source, "seed": args.seed})
    for name in names:
        # A fresh, identically seeded source per strategy keeps runs comparable.
        rng = RandomSourceRegistry.build(config)
        sampler = PairSamplerRegistry.get(name)()
        result = run_benchmark(sampler, args.length, deny, rng, args.iterations, args.warmup)
        logger.info(
            "Tuples/%s len=%d deny=%s: %.1f ns/call over %d calls",
            _LABELS.get(name, name),
            args.length,
            deny,
            result.ns_per_call,
            result.iterations,
        )
        rng.close()
    return 0
