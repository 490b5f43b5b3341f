# matching/selector.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from domain.user_profile import RecommendationInput
from domain.vehicle import Vehicle
from matching.catalog import Catalog
from matching.domain import ScoredCandidate

logger = logging.getLogger("carmatch.selector")


def rank(candidates: Sequence[ScoredCandidate]) -> List[ScoredCandidate]:
    """Best first. sorted() is stable, so equal scores keep catalog order."""
    return sorted(candidates, key=lambda c: c.normalized_score, reverse=True)


def alternative_score(vehicle: Vehicle, inp: RecommendationInput) -> float:
    """Light score for alternatives found outside the filtered candidates."""
    seat_score = min(vehicle.seats / inp.min_seats, 1.5) * 5
    trunk_score = vehicle.trunk_liters / 800 * 5 if inp.habits.trunk_preference else 0.0
    family_score = vehicle.family_friendly / 10 * 5 if inp.habits.has_kids else 0.0
    return (seat_score + trunk_score + family_score) / 3


# ---------------- Runner-up strategies ----------------
# Each gets (primary, ranked, catalog, inp) and returns a vehicle or None.

def best_other_candidate(primary: Vehicle, ranked: Sequence[ScoredCandidate],
                         catalog: Catalog, inp: RecommendationInput) -> Optional[Vehicle]:
    for c in ranked:
        if c.vehicle.name != primary.name:
            return c.vehicle
    return None


def best_other_type(primary: Vehicle, ranked: Sequence[ScoredCandidate],
                    catalog: Catalog, inp: RecommendationInput) -> Optional[Vehicle]:
    # Ignores the type filter on purpose, so the user still sees a real alternative
    pool = [v for v in catalog if v.seats >= inp.min_seats and v.type != primary.type]
    if not pool:
        return None
    return max(pool, key=lambda v: alternative_score(v, inp))


def any_other_vehicle(primary: Vehicle, ranked: Sequence[ScoredCandidate],
                      catalog: Catalog, inp: RecommendationInput) -> Optional[Vehicle]:
    return next((v for v in catalog if v.name != primary.name), None)


def same_as_primary(primary: Vehicle, ranked: Sequence[ScoredCandidate],
                    catalog: Catalog, inp: RecommendationInput) -> Optional[Vehicle]:
    return primary


RunnerUpStrategy = Callable[[Vehicle, Sequence[ScoredCandidate], Catalog, RecommendationInput], Optional[Vehicle]]

RUNNER_UP_CHAIN: Tuple[RunnerUpStrategy, ...] = (
    best_other_candidate,
    best_other_type,
    any_other_vehicle,
    same_as_primary,
)


def select(ranked: Sequence[ScoredCandidate], catalog: Catalog,
           inp: RecommendationInput) -> Tuple[ScoredCandidate, Vehicle]:
    """Return (primary candidate, runner-up vehicle). `ranked` must be sorted best first."""
    if not ranked:
        raise ValueError("select() needs at least one scored candidate")
    top = ranked[0]
    for strategy in RUNNER_UP_CHAIN:
        runner_up = strategy(top.vehicle, ranked, catalog, inp)
        if runner_up is not None:
            logger.debug("Runner-up %s via %s", runner_up.name, strategy.__name__)
            return top, runner_up
    return top, top.vehicle
