# scripts/smoke_recommendations.py
from __future__ import annotations
from typing import Dict, Any

from agent.orchestrator import get_recommendation
from matching.errors import RecommendationError

SF = ("37.77", "-122.42")
OAKLAND = ("37.80", "-122.27")
LA = ("34.05", "-118.24")


def _points(house, workplace, holiday) -> Dict[str, Any]:
    return {
        "houseLat": house[0], "houseLng": house[1],
        "workplaceLat": workplace[0], "workplaceLng": workplace[1],
        "holidayLat": holiday[0], "holidayLng": holiday[1],
    }


def show_case(title: str, answers: Dict[str, Any]) -> None:
    print(f"\n=== {title} ===")
    try:
        res = get_recommendation(answers)
    except RecommendationError as e:
        print("Error:", e)
        return

    d = res["display"]
    print(f"Primary:   {d['primary']['name']} ({d['primary']['type']}) | {d['primary_cost']}")
    print(f"Runner-up: {d['runner_up']['name']} ({d['runner_up']['type']}) | {d['runner_up_cost']}")
    print(f"Carbon:    {res['result']['carbon_rating']} - {res['carbon_label']}")
    print(f"Commute {d['commute_distance']}, holiday {d['holiday_distance']}")
    print("Summary:", res["result"]["summary"])


def main():
    base = _points(SF, OAKLAND, LA)

    # A) electric only, small household
    show_case("Electric commuter SF -> Oakland, holiday in LA", {**base, "preferredType": "electric"})

    # B) nothing in the catalog fits, expect an error message
    show_case("9-seat SUV", {**base, "minSeats": 9, "preferredType": "suv"})

    # C) zero-length trip
    show_case("Everything at one address", {**_points(SF, SF, SF)})

    # D) family with luggage
    show_case("Kids + trunk, any type", {**base, "minSeats": 7, "hasKids": "1", "trunk": "1"})

    # E) type filter collapses to one vehicle, runner-up comes from another type
    show_case("8-seat SUV", {**base, "minSeats": 8, "preferredType": "suv"})


if __name__ == "__main__":
    main()
