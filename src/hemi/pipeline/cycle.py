"""
HEMI - Cycle Pipeline Orchestration

Flow: ingest -> normalize -> composite -> classify -> outcome

DashboardPipeline.run() is the single async entry point.
All processing after ingest is synchronous. OutcomeStore keeps only
the outcome of the most recently started cycle.
"""

from __future__ import annotations

import asyncio
import itertools
import logging
from datetime import date
from typing import Mapping, Optional

from hemi.classifier.engine import classify_status, classify_trend_agreement
from hemi.config import HemiConfig
from hemi.errors import HemiError
from hemi.ingest.fetcher import LiveSeriesFetcher
from hemi.ingest.sample import generate_sample_series
from hemi.scoring.composite import compute_composite_index
from hemi.scoring.normalizer import normalize_all
from hemi.types import CycleOutcome, DataSource, RawSeries, Role

logger = logging.getLogger(__name__)


class DashboardPipeline:
    """
    HEMI cycle pipeline.

    Orchestrates: ingest -> normalize -> composite -> classify
    """

    def __init__(
        self,
        config: HemiConfig | None = None,
        fetcher: LiveSeriesFetcher | None = None,
    ) -> None:
        self.config = config or HemiConfig()
        self.fetcher = fetcher or LiveSeriesFetcher(config=self.config.live)

    async def run(
        self,
        source: DataSource = DataSource.SAMPLE,
        cycle_id: int = 0,
        as_of_date: date | None = None,
    ) -> CycleOutcome:
        """
        Run one full cycle.

        Ingestion and scoring errors never escape: they become an
        outcome carrying a single user-facing message and no results.

        Args:
            source: Sample or live data.
            cycle_id: Token identifying this cycle.
            as_of_date: Last day of the data window (default: today).

        Returns:
            CycleOutcome with either results or an error.
        """
        logger.info(f"HEMI cycle {cycle_id} starting ({source.value})")

        try:
            raw_series = await self.ingest(source, as_of_date)
            outcome = self.process(raw_series, source, cycle_id)
        except HemiError as exc:
            logger.error(f"HEMI cycle {cycle_id} failed: {exc}")
            return CycleOutcome(
                cycle_id=cycle_id,
                source=source,
                error=f"Failed to load live data. {exc.user_message}",
            )

        logger.info(
            f"HEMI cycle {cycle_id}: {outcome.composite_index:.1f} "
            f"[{outcome.status.label}]"
        )
        return outcome

    async def ingest(
        self, source: DataSource, as_of_date: date | None = None
    ) -> dict[Role, RawSeries]:
        """Step 1: raw series from the selected source."""
        if source is DataSource.LIVE:
            return await self.fetcher.fetch(as_of_date)
        return generate_sample_series(today=as_of_date, config=self.config.sample)

    def process(
        self,
        raw_series: Mapping[Role, RawSeries],
        source: DataSource = DataSource.SAMPLE,
        cycle_id: int = 0,
    ) -> CycleOutcome:
        """
        Synchronous processing: normalize -> composite -> classify.

        Can be called independently for testing without async/API calls.

        Raises:
            MalformedSeriesError: a raw series cannot be normalized.
        """
        # Step 2: Normalization
        results = normalize_all(raw_series, self.config.inverted_roles)

        # Step 3: Composite
        composite = compute_composite_index(results, self.config.weights)

        # Step 4: Classification
        status = classify_status(composite, self.config.status)
        agreement = classify_trend_agreement(
            composite, results, self.config.status, self.config.inverted_roles
        )

        return CycleOutcome(
            cycle_id=cycle_id,
            source=source,
            results=results,
            composite_index=composite,
            status=status,
            agreement=agreement,
        )


class OutcomeStore:
    """
    Holds the single current outcome.

    Every cycle takes a token from begin_cycle(); only the holder of the
    newest token may publish. Outcomes of superseded cycles are dropped.
    """

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._latest_id = 0
        self._current: Optional[CycleOutcome] = None

    @property
    def current(self) -> Optional[CycleOutcome]:
        return self._current

    @property
    def latest_cycle_id(self) -> int:
        return self._latest_id

    def begin_cycle(self) -> int:
        """Issue a new cycle id, superseding all earlier ones."""
        self._latest_id = next(self._ids)
        return self._latest_id

    def is_current(self, cycle_id: int) -> bool:
        return cycle_id == self._latest_id

    def publish(self, outcome: CycleOutcome) -> bool:
        """Store outcome if its cycle is still the newest. Returns whether it was kept."""
        if not self.is_current(outcome.cycle_id):
            logger.warning(
                f"Discarding outcome of superseded cycle {outcome.cycle_id} "
                f"(latest is {self._latest_id})"
            )
            return False
        self._current = outcome
        return True


async def run_cycle(
    pipeline: DashboardPipeline,
    store: OutcomeStore,
    source: DataSource = DataSource.SAMPLE,
) -> CycleOutcome:
    """Start a cycle on the store, run it and publish the outcome if still current."""
    cycle_id = store.begin_cycle()
    outcome = await pipeline.run(source, cycle_id)
    store.publish(outcome)
    return outcome


def run_sync(source: DataSource = DataSource.SAMPLE) -> CycleOutcome:
    """Synchronous convenience wrapper for scripts and the dashboard."""
    pipeline = DashboardPipeline()
    return asyncio.run(pipeline.run(source))
