import pytest

from domain.user_profile import Habits, RecommendationInput
from domain.vehicle import Coordinate, Terrain, Vehicle
from matching.catalog import Catalog
from matching.config import get_settings


def _vehicle(name="Test Car", type="sedan", range_km=600, seats=5, trunk_liters=400,
             efficiency=15.0, family_friendly=6, price=25, city=8, highway=8, offroad=2):
    return Vehicle(
        name=name, type=type, range_km=range_km, seats=seats, trunk_liters=trunk_liters,
        efficiency=efficiency, family_friendly=family_friendly, price=price,
        terrain=Terrain(city=city, highway=highway, offroad=offroad),
    )


@pytest.fixture
def make_vehicle():
    return _vehicle


@pytest.fixture
def make_input():
    def _make(house=(37.77, -122.42), workplace=(37.80, -122.27), holiday=(34.05, -118.24),
              min_seats=5, has_kids=False, trunk=False, preferred_type="any"):
        def _pt(p):
            return None if p is None else Coordinate(lat=p[0], lng=p[1])
        return RecommendationInput(
            house=_pt(house), workplace=_pt(workplace), holiday=_pt(holiday),
            min_seats=min_seats,
            habits=Habits(has_kids=has_kids, trunk_preference=trunk),
            preferred_type=preferred_type,
        )
    return _make


@pytest.fixture
def small_catalog():
    return Catalog([
        _vehicle("Volt Mini", "electric", range_km=300, seats=4, efficiency=6.5, price=30),
        _vehicle("Family Hauler", "minivan", range_km=700, seats=8, trunk_liters=1000,
                 efficiency=11.0, family_friendly=10, price=35),
        _vehicle("Daily Sedan", "sedan", range_km=750, seats=5, efficiency=16.0, price=22),
        _vehicle("Trail SUV", "suv", range_km=650, seats=5, trunk_liters=700,
                 efficiency=10.0, family_friendly=8, price=40, offroad=9),
    ])


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("CARMATCH_CATALOG", "CARMATCH_FUEL_PRICE_PER_L",
                 "CARMATCH_ELECTRICITY_PRICE_PER_KWH", "CARMATCH_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
