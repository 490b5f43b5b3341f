# matching/scoring.py
from __future__ import annotations

from typing import List, Sequence
import numpy as np

from domain.user_profile import Habits
from domain.vehicle import Terrain, Vehicle
from matching.catalog import vehicles_to_frame
from matching.domain import ScoredCandidate, SubScores

CITY_COMMUTE_KM = 30.0
LONG_HOLIDAY_KM = 200.0

# Typical efficiency ceilings used to put both units on one scale
ELECTRIC_EFFICIENCY_REF = 7.0   # km/kWh
COMBUSTION_EFFICIENCY_REF = 25.0  # km/L

RANGE_BUFFER = 1.2

WEIGHT_RANGE = 3
WEIGHT_TRUNK = 2
WEIGHT_FAMILY = 2
WEIGHT_TERRAIN = 2
WEIGHT_EFFICIENCY = 1


def terrain_weights(commute_km: float, holiday_km: float) -> Terrain:
    """Terrain preference derived from the shape of the trip (shared by all candidates)."""
    short_commute = commute_km < CITY_COMMUTE_KM
    return Terrain(
        city=0.7 if short_commute else 0.3,
        highway=0.3 if short_commute else 0.7,
        offroad=0.4 if holiday_km > LONG_HOLIDAY_KM else 0.2,
    )


def total_weight(habits: Habits) -> int:
    return (
        WEIGHT_RANGE
        + (WEIGHT_TRUNK if habits.trunk_preference else 0)
        + (WEIGHT_FAMILY if habits.has_kids else 0)
        + WEIGHT_TERRAIN
        + WEIGHT_EFFICIENCY
    )


def score_candidates(
    candidates: Sequence[Vehicle],
    commute_km: float,
    holiday_km: float,
    total_km: float,
    habits: Habits,
) -> List[ScoredCandidate]:
    """Score every candidate on a 0..10-ish scale. Output keeps input order."""
    if not candidates:
        return []

    df = vehicles_to_frame(candidates)
    terrain = terrain_weights(commute_km, holiday_km)

    # Zero-length trip: any range covers it
    if total_km == 0:
        range_score = np.full(len(df), 10.0)
    else:
        range_score = np.minimum(df["range_km"].to_numpy() / (total_km * RANGE_BUFFER), 1.0) * 10

    if habits.trunk_preference:
        trunk_score = df["trunk_liters"].to_numpy() / 1000 * 10
    else:
        trunk_score = np.zeros(len(df))

    if habits.has_kids:
        family_score = df["family_friendly"].to_numpy(dtype=float)
    else:
        family_score = np.zeros(len(df))

    terrain_score = (
        terrain.city * df["city"].to_numpy()
        + terrain.highway * df["highway"].to_numpy()
        + terrain.offroad * df["offroad"].to_numpy()
    )

    # Commute-heavy trips make running cost matter more
    efficiency_weight = 3 if commute_km > holiday_km else 1.5
    reference = np.where(df["type"] == "electric", ELECTRIC_EFFICIENCY_REF, COMBUSTION_EFFICIENCY_REF)
    efficiency_score = df["efficiency"].to_numpy() / reference * 10 * efficiency_weight

    weighted = (
        range_score * WEIGHT_RANGE
        + trunk_score * (WEIGHT_TRUNK if habits.trunk_preference else 0)
        + family_score * (WEIGHT_FAMILY if habits.has_kids else 0)
        + terrain_score * WEIGHT_TERRAIN
        + efficiency_score * WEIGHT_EFFICIENCY
    )
    normalized = weighted / total_weight(habits)

    out: List[ScoredCandidate] = []
    for i, vehicle in enumerate(candidates):
        out.append(ScoredCandidate(
            vehicle=vehicle,
            normalized_score=float(normalized[i]),
            sub_scores=SubScores(
                range=float(range_score[i]),
                trunk=float(trunk_score[i]),
                family=float(family_score[i]),
                terrain=float(terrain_score[i]),
                efficiency=float(efficiency_score[i]),
            ),
        ))
    return out
