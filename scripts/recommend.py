import json
import argparse
import sys

from agent.orchestrator import get_recommendation
from matching.config import setup_logging
from matching.errors import CatalogError, RecommendationError


def _point(txt: str) -> tuple:
    lat, lng = txt.split(",")
    return lat.strip(), lng.strip()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="CarMatch: vehicle recommendation for a commute + holiday trip")
    parser.add_argument("--house", type=_point, required=True, help="lat,lng")
    parser.add_argument("--workplace", type=_point, required=True, help="lat,lng")
    parser.add_argument("--holiday", type=_point, required=True, help="lat,lng")
    parser.add_argument("--min_seats", type=int, default=5)
    parser.add_argument("--kids", action="store_true")
    parser.add_argument("--trunk", action="store_true")
    parser.add_argument("--type", type=str, default="any",
                        choices=["any", "electric", "hybrid", "suv", "sedan", "compact", "minivan"])
    parser.add_argument("--catalog", type=str, default=None, help="csv/json/parquet catalog file")
    parser.add_argument("--log_level", type=str, default=None)
    args = parser.parse_args()

    setup_logging(args.log_level)

    answers = {
        "houseLat": args.house[0], "houseLng": args.house[1],
        "workplaceLat": args.workplace[0], "workplaceLng": args.workplace[1],
        "holidayLat": args.holiday[0], "holidayLng": args.holiday[1],
        "minSeats": args.min_seats,
        "hasKids": args.kids,
        "trunk": args.trunk,
        "preferredType": args.type,
    }
    try:
        res = get_recommendation(answers, catalog_path=args.catalog)
    except RecommendationError as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)
    except CatalogError as e:
        print(f"Failed to load catalog: {e}", file=sys.stderr)
        sys.exit(1)
    print(json.dumps(res, indent=2))
