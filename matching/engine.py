# matching/engine.py
from __future__ import annotations

import logging
from typing import Optional

from domain.user_profile import RecommendationInput
from matching.carbon import carbon_rating
from matching.catalog import Catalog, default_catalog
from matching.costs import FuelPrices, monthly_commute_cost, trip_cost
from matching.domain import PriceBreakdown, RecommendationResult, TripMetrics
from matching.errors import MissingLocation
from matching.geo import trip_distances
from matching.scoring import score_candidates, terrain_weights
from matching.selector import rank, select
from matching.summary import build_summary

logger = logging.getLogger("carmatch.engine")


def _check_locations(inp: RecommendationInput) -> None:
    missing = [k for k in ("house", "workplace", "holiday") if getattr(inp, k) is None]
    if missing:
        raise MissingLocation(missing)


# ---------------- Public API ----------------
def recommend(
    inp: RecommendationInput,
    catalog: Optional[Catalog] = None,
    prices: Optional[FuelPrices] = None,
) -> RecommendationResult:
    """
    Pick a primary vehicle and a distinct runner-up for the given trip and habits.

    Pure computation: the catalog is only read, and nothing is kept between calls.
    Raises MissingLocation, NoVehiclesForType or NoVehiclesMeetingSeats.
    """
    _check_locations(inp)
    catalog = catalog if catalog is not None else default_catalog()
    prices = prices or FuelPrices()

    commute_km, holiday_km, total_km = trip_distances(inp)
    logger.debug("Distances commute=%.1f holiday=%.1f total=%.1f km", commute_km, holiday_km, total_km)

    candidates = catalog.filter(inp.min_seats, inp.type_filter)
    scored = score_candidates(candidates, commute_km, holiday_km, total_km, inp.habits)
    ranked = rank(scored)
    top, runner_up = select(ranked, catalog, inp)
    primary = top.vehicle

    metrics = TripMetrics(
        commute_distance_km=commute_km,
        holiday_distance_km=holiday_km,
        total_distance_km=total_km,
        terrain=terrain_weights(commute_km, holiday_km),
    )
    breakdown = PriceBreakdown(
        primary=trip_cost(primary, commute_km, holiday_km, prices),
        runner_up=trip_cost(runner_up, commute_km, holiday_km, prices),
    )
    summary = build_summary(
        metrics,
        primary,
        top.sub_scores,
        runner_up,
        monthly_commute_cost(primary, commute_km, prices),
        inp.habits,
    )

    logger.info(
        "Recommended %s (score %.3f), runner-up %s, out of %d candidates",
        primary.name, top.normalized_score, runner_up.name, len(candidates),
    )
    return RecommendationResult(
        primary=primary,
        runner_up=runner_up,
        summary=summary,
        price_breakdown=breakdown,
        carbon_rating=carbon_rating(primary),
        metrics=metrics,
    )
