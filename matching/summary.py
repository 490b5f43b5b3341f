# matching/summary.py
from __future__ import annotations

from typing import List, Tuple

from domain.user_profile import Habits
from domain.vehicle import Vehicle
from matching.domain import SubScores, TripMetrics


def _num(x: float) -> str:
    # 576.0 -> "576", 6.9 -> "6.9"
    return f"{x:g}"


def top_factors(sub_scores: SubScores, n: int = 2) -> List[Tuple[str, float]]:
    """Highest sub-scores first; equal values keep range/trunk/family/terrain/efficiency order."""
    return sorted(sub_scores.items(), key=lambda kv: kv[1], reverse=True)[:n]


def _main_reason(factor: str, v: Vehicle) -> str:
    if factor == "range":
        return f"it offers excellent range ({_num(v.range_km)} km) for your needs"
    if factor == "trunk":
        return f"it has spacious trunk capacity ({_num(v.trunk_liters)} liters) as you requested"
    if factor == "family":
        return "it's highly family-friendly with excellent child-safety features"
    if factor == "terrain":
        return "it performs well on your specific mix of city, highway and occasional off-road driving"
    return f"it offers excellent fuel efficiency ({_num(v.efficiency)} {v.efficiency_unit})"


def _second_reason(factor: str, v: Vehicle) -> str:
    if factor == "range":
        return f"provides sufficient range ({_num(v.range_km)} km) for your trips"
    if factor == "trunk":
        return f"offers good cargo space ({_num(v.trunk_liters)} liters)"
    if factor == "family":
        return "is well-suited for families with children"
    if factor == "terrain":
        return "handles your typical driving conditions well"
    energy = "energy" if v.is_electric else "fuel"
    return f"is cost-effective to operate with good {energy} efficiency"


def runner_up_reason(primary: Vehicle, runner_up: Vehicle) -> str:
    """First matching difference wins."""
    if runner_up.price < primary.price:
        return "is more affordable"
    if runner_up.type != primary.type:
        return f"offers a different powertrain option ({runner_up.type})"
    if runner_up.trunk_liters > primary.trunk_liters:
        return "provides more cargo space"
    if runner_up.seats > primary.seats:
        return "offers more seating capacity"
    if runner_up.efficiency > primary.efficiency:
        return "has better fuel efficiency"
    return "is a solid alternative"


def build_summary(
    metrics: TripMetrics,
    primary: Vehicle,
    primary_scores: SubScores,
    runner_up: Vehicle,
    monthly_commute_cost: float,
    habits: Habits,
) -> str:
    parts = [
        f"Based on your input, your daily commute is {metrics.commute_distance_km:.1f} km, "
        f"and your holiday trip is {metrics.holiday_distance_km:.1f} km, "
        f"totaling {metrics.total_distance_km:.1f} km. "
    ]

    factors = top_factors(primary_scores)
    parts.append(f"We recommend the {primary.name} as your primary option because ")
    parts.append(_main_reason(factors[0][0], primary))
    if len(factors) > 1:
        parts.append(" and " + _second_reason(factors[1][0], primary))
    parts.append(".")

    if runner_up.name != primary.name:
        parts.append(f" As a runner-up, we suggest the {runner_up.name}, which ")
        parts.append(runner_up_reason(primary, runner_up) + ".")

    parts.append(
        f" Your estimated monthly commute cost with the {primary.name} "
        f"would be ${monthly_commute_cost:.2f}"
    )
    if habits.has_kids:
        parts.append(". This recommendation accounts for your family needs")
    if habits.trunk_preference:
        parts.append(" and prioritizes vehicles with larger cargo capacity")
    parts.append(".")
    return "".join(parts)
