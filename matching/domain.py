from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Tuple

from domain.vehicle import Vehicle, Terrain

# Order matters: it is the tie-break when the summary picks its top factors.
SUB_SCORE_KEYS = ("range", "trunk", "family", "terrain", "efficiency")


@dataclass(frozen=True)
class SubScores:
    range: float
    trunk: float
    family: float
    terrain: float
    efficiency: float

    def items(self) -> List[Tuple[str, float]]:
        return [(k, getattr(self, k)) for k in SUB_SCORE_KEYS]


@dataclass(frozen=True)
class ScoredCandidate:
    vehicle: Vehicle
    normalized_score: float
    sub_scores: SubScores


@dataclass(frozen=True)
class TripMetrics:
    commute_distance_km: float
    holiday_distance_km: float
    total_distance_km: float
    terrain: Terrain  # applied weights, not vehicle ratings


@dataclass(frozen=True)
class PriceBreakdown:
    primary: float
    runner_up: float


@dataclass(frozen=True)
class RecommendationResult:
    primary: Vehicle
    runner_up: Vehicle
    summary: str
    price_breakdown: PriceBreakdown
    carbon_rating: int
    metrics: TripMetrics

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
