from dataclasses import dataclass
from typing import Literal

VehicleType = Literal["electric", "hybrid", "suv", "sedan", "compact", "minivan"]

VEHICLE_TYPES = ("electric", "hybrid", "suv", "sedan", "compact", "minivan")


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float


@dataclass(frozen=True)
class Terrain:
    city: float
    highway: float
    offroad: float


@dataclass(frozen=True)
class Vehicle:
    name: str
    type: VehicleType
    range_km: float
    seats: int
    trunk_liters: float
    efficiency: float  # km/kWh for electric, km/L otherwise
    family_friendly: float  # 1-10
    price: float  # thousands
    terrain: Terrain

    @property
    def is_electric(self) -> bool:
        return self.type == "electric"

    @property
    def efficiency_unit(self) -> str:
        return "km/kWh" if self.is_electric else "km/L"
