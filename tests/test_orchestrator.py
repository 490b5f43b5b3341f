import json
import pytest

from agent.orchestrator import build_input, get_recommendation
from matching.catalog import default_catalog
from matching.config import Settings, get_settings
from matching.errors import CatalogError, InvalidLocation, MissingLocation, NoVehiclesForType

ANSWERS = {
    "houseLat": "37.77", "houseLng": "-122.42",
    "workplaceLat": "37.80", "workplaceLng": "-122.27",
    "holidayLat": "34.05", "holidayLng": "-118.24",
}


def test_build_input_defaults():
    inp = build_input(ANSWERS)
    assert inp.house.lat == pytest.approx(37.77)
    assert inp.min_seats == 5
    assert inp.habits.has_kids is False
    assert inp.habits.trunk_preference is False
    assert inp.preferred_type == "any"
    assert inp.type_filter is None


def test_build_input_query_flags_and_type():
    inp = build_input({**ANSWERS, "minSeats": "7", "hasKids": "1", "trunk": "0", "preferredType": "EV"})
    assert inp.min_seats == 7
    assert inp.habits.has_kids is True
    assert inp.habits.trunk_preference is False
    assert inp.type_filter == "electric"


def test_bad_seat_count_falls_back_to_default():
    assert build_input({**ANSWERS, "minSeats": "zero"}).min_seats == 5


@pytest.mark.parametrize("bad", ["abc", "nan", "inf"])
def test_invalid_coordinate(bad):
    with pytest.raises(InvalidLocation) as exc:
        build_input({**ANSWERS, "holidayLat": bad})
    assert exc.value.field == "holiday"
    assert str(exc.value) == "Invalid location coordinates"


def test_missing_location_reaches_engine():
    answers = {k: v for k, v in ANSWERS.items() if not k.startswith("workplace")}
    with pytest.raises(MissingLocation):
        get_recommendation(answers)


def test_get_recommendation_shape():
    res = get_recommendation({**ANSWERS, "preferredType": "electric"})
    assert res["result"]["primary"]["type"] == "electric"
    assert res["result"]["carbon_rating"] == 5
    assert res["carbon_label"] == "Excellent (Near Zero Emissions)"
    d = res["display"]
    assert d["primary"]["type"] == "ELECTRIC"
    assert d["primary"]["efficiency"].endswith("km/kWh")
    assert d["primary"]["base_price"].endswith(",000")
    assert d["commute_distance"] == "13.6 km"
    assert d["primary_cost"].startswith("$")
    # plain data all the way down
    json.dumps(res)


def test_type_error_propagates():
    with pytest.raises(NoVehiclesForType):
        get_recommendation({**ANSWERS, "minSeats": 9, "preferredType": "suv"})


def test_prices_from_environment(monkeypatch):
    base = get_recommendation({**ANSWERS, "preferredType": "sedan"})
    monkeypatch.setenv("CARMATCH_FUEL_PRICE_PER_L", "3.0")
    get_settings.cache_clear()
    doubled = get_recommendation({**ANSWERS, "preferredType": "sedan"})
    assert doubled["result"]["price_breakdown"]["primary"] == pytest.approx(
        2 * base["result"]["price_breakdown"]["primary"])


def test_invalid_price_env_uses_default(monkeypatch):
    monkeypatch.setenv("CARMATCH_FUEL_PRICE_PER_L", "cheap")
    get_settings.cache_clear()
    assert get_settings().fuel_price_per_l == 1.5


def test_catalog_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "hybrids.csv"
    df = default_catalog().to_frame()
    df[df["type"] == "hybrid"].to_csv(path, index=False)
    monkeypatch.setenv("CARMATCH_CATALOG", str(path))
    get_settings.cache_clear()
    res = get_recommendation(ANSWERS)
    assert res["result"]["primary"]["type"] == "hybrid"
    assert res["result"]["runner_up"]["type"] == "hybrid"


def test_missing_catalog_from_environment_is_catalog_error(tmp_path, monkeypatch):
    monkeypatch.setenv("CARMATCH_CATALOG", str(tmp_path / "missing.csv"))
    get_settings.cache_clear()
    with pytest.raises(CatalogError, match="Catalog not found"):
        get_recommendation(ANSWERS)


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("CARMATCH_ELECTRICITY_PRICE_PER_KWH", "0.4")
    monkeypatch.setenv("CARMATCH_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CARMATCH_CATALOG", "")
    s = Settings()
    assert s.electricity_price_per_kwh == 0.4
    assert s.fuel_price_per_l == 1.5
    assert s.log_level == "DEBUG"
    assert s.catalog is None
