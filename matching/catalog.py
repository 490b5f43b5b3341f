# matching/catalog.py
from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from domain.catalog_data import VEHICLE_ROWS
from domain.vehicle import VEHICLE_TYPES, Terrain, Vehicle
from matching.config import get_settings
from matching.errors import (
    CatalogError,
    CatalogNotFound,
    NoVehiclesForType,
    NoVehiclesMeetingSeats,
)

logger = logging.getLogger("carmatch.catalog")

REQUIRED_COLUMNS = [
    "name", "type", "range_km", "seats", "trunk_liters", "efficiency",
    "family_friendly", "price", "city", "highway", "offroad",
]


def vehicles_to_frame(vehicles: Sequence[Vehicle]) -> pd.DataFrame:
    rows = []
    for v in vehicles:
        rows.append({
            "name": v.name, "type": v.type, "range_km": v.range_km, "seats": v.seats,
            "trunk_liters": v.trunk_liters, "efficiency": v.efficiency,
            "family_friendly": v.family_friendly, "price": v.price,
            "city": v.terrain.city, "highway": v.terrain.highway, "offroad": v.terrain.offroad,
        })
    return pd.DataFrame(rows, columns=REQUIRED_COLUMNS)


class Catalog:
    """Read-only, ordered set of vehicles. Order is the tie-break everywhere."""

    def __init__(self, vehicles: Iterable[Vehicle]):
        self._vehicles: Tuple[Vehicle, ...] = tuple(vehicles)
        seen = set()
        for v in self._vehicles:
            if v.name in seen:
                raise CatalogError(f"Duplicate vehicle name in catalog: {v.name}")
            seen.add(v.name)

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self):
        return iter(self._vehicles)

    @property
    def vehicles(self) -> Tuple[Vehicle, ...]:
        return self._vehicles

    def to_frame(self) -> pd.DataFrame:
        """Fresh DataFrame view (one row per vehicle, catalog order)."""
        return vehicles_to_frame(self._vehicles)

    def filter(self, min_seats: int, preferred_type: Optional[str] = None) -> List[Vehicle]:
        """Hard constraints: seats >= min_seats and, unless "any", matching type."""
        df = self.to_frame()
        df = df[df["seats"] >= int(min_seats)]

        vtype = (preferred_type or "").strip().lower()
        if vtype and vtype != "any":
            df = df[df["type"] == vtype]
            if df.empty:
                raise NoVehiclesForType(vtype, min_seats)

        if df.empty:
            raise NoVehiclesMeetingSeats(min_seats)

        logger.debug("Catalog filter seats>=%s type=%s -> %d vehicles", min_seats, vtype or "any", len(df))
        return [self._vehicles[i] for i in df.index]

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "Catalog":
        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise CatalogError(f"Catalog is missing columns: {', '.join(missing)}")
        df = df.reset_index(drop=True)
        if df[REQUIRED_COLUMNS].isna().any().any():
            raise CatalogError("Catalog has empty values in required columns")
        for col in ("range_km", "seats", "efficiency"):
            bad = df.loc[pd.to_numeric(df[col], errors="coerce").fillna(0) <= 0, "name"]
            if not bad.empty:
                raise CatalogError(f"{col} must be positive (check {', '.join(map(str, bad))})")

        vehicles = []
        for _, row in df.iterrows():
            vtype = str(row["type"]).strip().lower()
            if vtype not in VEHICLE_TYPES:
                raise CatalogError(f"Unknown vehicle type {row['type']!r} for {row['name']}")
            vehicles.append(Vehicle(
                name=str(row["name"]),
                type=vtype,
                range_km=float(row["range_km"]),
                seats=int(row["seats"]),
                trunk_liters=float(row["trunk_liters"]),
                efficiency=float(row["efficiency"]),
                family_friendly=float(row["family_friendly"]),
                price=float(row["price"]),
                terrain=Terrain(
                    city=float(row["city"]),
                    highway=float(row["highway"]),
                    offroad=float(row["offroad"]),
                ),
            ))
        return cls(vehicles)

    @classmethod
    def from_rows(cls, rows: Sequence[dict]) -> "Catalog":
        return cls.from_frame(pd.DataFrame(list(rows)))


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    return Catalog.from_rows(VEHICLE_ROWS)


def load_catalog(path: str | None = None) -> Catalog:
    """Catalog from a .csv / .json / .parquet file; built-in catalog when no path."""
    path = path or get_settings().catalog
    if not path:
        return default_catalog()
    if not os.path.exists(path):
        raise CatalogNotFound(path)

    ext = os.path.splitext(path)[1].lower()
    readers = {
        ".csv": pd.read_csv,
        ".json": lambda p: pd.read_json(p, orient="records"),
        ".parquet": pd.read_parquet,
    }
    if ext not in readers:
        raise CatalogError(f"Unsupported catalog format: {ext or path}")
    try:
        df = readers[ext](path)
    except (ValueError, OSError) as e:
        raise CatalogError(f"Could not read catalog {path}: {e}") from e

    catalog = Catalog.from_frame(df)
    logger.info("Loaded %d vehicles from %s", len(catalog), path)
    return catalog
