"""
core/weight_ledger.py
────────────────────────────────────────────────────────────────────────
Append-only weight log for one profile.

Responsibilities
----------------
1.   `record()` – append an observation dated today (no dedup per date).
2.   `latest()` – weight of the last *appended* observation.
3.   `history()` – newest-first DataFrame with a signed delta against the
     chronologically earlier neighbour.
4.   `goal_progress_percent()` – share of the initial→goal distance done.

The ledger never touches storage – `core.health.HealthStore` persists it.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, List

import pandas as pd

from core.models.weight import WeightObservation

_LOG = logging.getLogger(__name__)


def goal_progress_percent(initial: float, current: float, goal: float) -> float:
    """((initial − current) / (initial − goal)) × 100, clamped to [0, 100]."""
    if initial == goal:
        return 100.0
    progress = (initial - current) / (initial - goal) * 100
    return min(max(progress, 0.0), 100.0)


class WeightLedger:
    def __init__(
        self,
        observations: Iterable[WeightObservation] = (),
        today: Callable[[], date] = date.today,
    ) -> None:
        self._obs: List[WeightObservation] = list(observations)
        self._today = today

    def __len__(self) -> int:
        return len(self._obs)

    @property
    def observations(self) -> List[WeightObservation]:
        return list(self._obs)

    # ─────────────────────────────── write ────────────────────────── #
    def record(self, weight: float, on: date | None = None) -> WeightObservation:
        obs = WeightObservation(date=on or self._today(), weight=weight)
        self._obs.append(obs)
        _LOG.debug("recorded %.1f kg on %s (n=%d)", weight, obs.date, len(self._obs))
        return obs

    # ─────────────────────────────── read ─────────────────────────── #
    def latest(self, fallback: float) -> float:
        # append order, not date order
        return self._obs[-1].weight if self._obs else fallback

    def history(self) -> pd.DataFrame:
        """
        Observations sorted by date descending; same-date rows keep
        insertion order. `delta` = weight − next (older) row, NaN for the
        oldest row. Negative delta means weight lost.
        """
        if not self._obs:
            return pd.DataFrame(columns=["date", "weight", "delta"])

        df = pd.DataFrame([o.model_dump() for o in self._obs])
        df = df.sort_values("date", ascending=False, kind="stable").reset_index(drop=True)
        return df.assign(delta=(df["weight"] - df["weight"].shift(-1)).round(1))

    def progress(self, goal: float) -> float:
        """
        Progress-screen figure: first appended observation is the start,
        newest-by-date observation is the current weight.
        """
        if len(self._obs) < 2:
            return 0.0
        initial = self._obs[0].weight
        current = self.history().iloc[0]["weight"]
        return goal_progress_percent(initial, float(current), goal)
