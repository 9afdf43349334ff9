"""Diagnostic logger for per-call sampling events.

Uses the standard ``logging`` module with the ``"pair_sampler"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pair_sampler.config import PairSamplerConfig
    from pair_sampler.logging.types import PairSamplingRecord

logger = logging.getLogger("pair_sampler")


class SamplingLogger:
    """Per-call diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per pair with the result, draws and timing.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: PairSamplerConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[PairSamplingRecord] = []

    def log_pair(
        self,
        record: PairSamplingRecord,
        config: PairSamplerConfig | None = None,
    ) -> None:
        """Log a single sampling event.

        Args:
            record: Immutable record of the call.
            config: Per-call config whose ``log_level`` and
                ``diagnostic_mode`` take precedence over the defaults.
        """
        if config is None:
            level, diagnostic_mode = self._log_level, self._diagnostic_mode
        else:
            level, diagnostic_mode = config.log_level, config.diagnostic_mode

        if diagnostic_mode:
            self._records.append(record)

        if level == "none":
            return

        if level == "summary":
            logger.info(
                "pair=(%d, %d) deny=(%d, %d) len=%d strategy=%s source=%s draws=%d elapsed=%.2fus",
                record.low,
                record.high,
                record.deny_low,
                record.deny_high,
                record.length,
                record.strategy,
                record.random_source,
                record.draws,
                record.elapsed_us,
            )
        elif level == "full":
            logger.info("sampling_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[PairSamplingRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        draws = [r.draws for r in self._records]
        elapsed = [r.elapsed_us for r in self._records]
        pair_counts = Counter((r.low, r.high) for r in self._records)

        n = len(self._records)
        return {
            "total_pairs": n,
            "distinct_pairs": len(pair_counts),
            "most_common_pair": pair_counts.most_common(1)[0][0],
            "mean_draws": sum(draws) / n,
            "max_draws": max(draws),
            "rejections": sum(draws) - n,
            "mean_elapsed_us": sum(elapsed) / n,
            "max_elapsed_us": max(elapsed),
        }

    def clear(self) -> None:
        """Drop all stored records."""
        self._records.clear()
