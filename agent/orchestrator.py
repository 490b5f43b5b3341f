# agent/orchestrator.py
from __future__ import annotations
from typing import Dict, Any, Optional
import logging
import math

from domain.user_profile import Habits, RecommendationInput
from domain.vehicle import Coordinate, Vehicle
from matching.carbon import carbon_rating_label
from matching.catalog import Catalog, load_catalog
from matching.config import get_settings
from matching.costs import FuelPrices
from matching.engine import recommend
from matching.errors import CatalogError, InvalidLocation, RecommendationError

logger = logging.getLogger("carmatch.orchestrator")

LOCATIONS = ("house", "workplace", "holiday")


def _to_float_or_none(val: Any) -> float | None:
    if val in [None, "", "null"]:
        return None
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def _to_int_or_default(val: Any, default: int) -> int:
    try:
        v = int(val)
        return v if v > 0 else default
    except (TypeError, ValueError):
        return default


def _to_flag(val: Any) -> bool:
    """Query strings send "1"/"0"; forms send real booleans."""
    if isinstance(val, str):
        return val.strip().lower() in ("1", "true", "yes", "on")
    return bool(val)


def _normalize_vehicle_type(raw: Any) -> str:
    """
    Returns one of:
    'any' | 'electric' | 'hybrid' | 'suv' | 'sedan' | 'compact' | 'minivan'
    (unknown values pass through and are rejected by the catalog filter)
    """
    if raw is None:
        return "any"
    s = str(raw).strip().lower()
    type_map = {
        "": "any",
        "any": "any",
        "ev": "electric",
        "bev": "electric",
        "electric": "electric",
        "hev": "hybrid",
        "hybrid": "hybrid",
        "suv": "suv",
        "crossover": "suv",
        "sedan": "sedan",
        "saloon": "sedan",
        "compact": "compact",
        "hatchback": "compact",
        "minivan": "minivan",
        "van": "minivan",
    }
    return type_map.get(s, s)


def _coordinate(answers: Dict[str, Any], prefix: str) -> Coordinate | None:
    lat_raw = answers.get(f"{prefix}Lat")
    lng_raw = answers.get(f"{prefix}Lng")
    if lat_raw in (None, "") and lng_raw in (None, ""):
        return None  # left for the engine to report as missing
    lat = _to_float_or_none(lat_raw)
    lng = _to_float_or_none(lng_raw)
    if lat is None or lng is None or not (math.isfinite(lat) and math.isfinite(lng)):
        raise InvalidLocation(prefix)
    return Coordinate(lat=lat, lng=lng)


def build_input(answers: Dict[str, Any]) -> RecommendationInput:
    """Raw form / query values -> validated RecommendationInput."""
    return RecommendationInput(
        house=_coordinate(answers, "house"),
        workplace=_coordinate(answers, "workplace"),
        holiday=_coordinate(answers, "holiday"),
        min_seats=_to_int_or_default(answers.get("minSeats", 5), 5),
        habits=Habits(
            has_kids=_to_flag(answers.get("hasKids", False)),
            trunk_preference=_to_flag(answers.get("trunk", False)),
        ),
        preferred_type=_normalize_vehicle_type(answers.get("preferredType", "any")),
    )


def _vehicle_display(v: Vehicle) -> Dict[str, str]:
    return {
        "name": v.name,
        "type": v.type.upper(),
        "seats": str(v.seats),
        "range": f"{v.range_km:g} km",
        "trunk": f"{v.trunk_liters:g} liters",
        "efficiency": f"{v.efficiency:g} {v.efficiency_unit}",
        "base_price": f"${int(round(v.price)):,},000",
    }


def get_recommendation(
    answers: Dict[str, Any],
    catalog: Optional[Catalog] = None,
    catalog_path: str | None = None,
) -> Dict[str, Any]:
    """
    Turns UI answers into an input record, runs the engine and returns a
    plain dict ready for rendering.
    """
    settings = get_settings()
    try:
        inp = build_input(answers)
        if catalog is None:
            catalog = load_catalog(catalog_path or settings.catalog)
        result = recommend(inp, catalog=catalog, prices=FuelPrices.from_settings(settings))
    except RecommendationError as e:
        logger.warning("Recommendation failed: %s", e)
        raise
    except CatalogError as e:
        logger.error("Failed to load catalog: %s", e)
        raise

    m = result.metrics
    return {
        "input": inp.to_dict(),
        "result": result.to_dict(),
        "carbon_label": carbon_rating_label(result.carbon_rating),
        "display": {
            "primary": _vehicle_display(result.primary),
            "runner_up": _vehicle_display(result.runner_up),
            "commute_distance": f"{m.commute_distance_km:.1f} km",
            "holiday_distance": f"{m.holiday_distance_km:.1f} km",
            "primary_cost": f"${result.price_breakdown.primary:.2f}",
            "runner_up_cost": f"${result.price_breakdown.runner_up:.2f}",
        },
    }
