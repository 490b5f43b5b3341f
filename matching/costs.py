# matching/costs.py
from __future__ import annotations

from dataclasses import dataclass

from domain.vehicle import Vehicle
from matching.config import (
    DEFAULT_ELECTRICITY_PRICE_PER_KWH,
    DEFAULT_FUEL_PRICE_PER_L,
    Settings,
)

WORKING_DAYS_PER_MONTH = 22


@dataclass(frozen=True)
class FuelPrices:
    per_liter: float = DEFAULT_FUEL_PRICE_PER_L
    per_kwh: float = DEFAULT_ELECTRICITY_PRICE_PER_KWH

    @classmethod
    def from_settings(cls, settings: Settings) -> "FuelPrices":
        return cls(per_liter=settings.fuel_price_per_l, per_kwh=settings.electricity_price_per_kwh)


def estimate_fuel_cost(vehicle: Vehicle, distance_km: float, prices: FuelPrices = FuelPrices()) -> float:
    unit_price = prices.per_kwh if vehicle.is_electric else prices.per_liter
    return distance_km / vehicle.efficiency * unit_price


def monthly_commute_km(commute_km: float) -> float:
    # round trip, every working day
    return commute_km * 2 * WORKING_DAYS_PER_MONTH


def holiday_trip_km(holiday_km: float) -> float:
    return holiday_km * 2


def monthly_commute_cost(vehicle: Vehicle, commute_km: float, prices: FuelPrices = FuelPrices()) -> float:
    return estimate_fuel_cost(vehicle, monthly_commute_km(commute_km), prices)


def trip_cost(vehicle: Vehicle, commute_km: float, holiday_km: float,
              prices: FuelPrices = FuelPrices()) -> float:
    """One month of commuting plus one holiday round trip."""
    return (
        monthly_commute_cost(vehicle, commute_km, prices)
        + estimate_fuel_cost(vehicle, holiday_trip_km(holiday_km), prices)
    )
