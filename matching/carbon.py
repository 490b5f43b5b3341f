from domain.vehicle import Vehicle

CARBON_LABELS = {
    5: "Excellent (Near Zero Emissions)",
    4: "Very Good (Low Carbon Footprint)",
    3: "Good (Moderate Environmental Impact)",
    2: "Fair (Higher Carbon Emissions)",
    1: "Poor (High Carbon Footprint)",
}


def carbon_rating(vehicle: Vehicle) -> int:
    """1 (worst) .. 5 (best), from type and efficiency only."""
    if vehicle.type == "electric":
        return 5
    if vehicle.type == "hybrid":
        return 4 if vehicle.efficiency > 18 else 3
    if vehicle.type in ("suv", "minivan"):
        return 2 if vehicle.efficiency > 12 else 1
    return 2 if vehicle.efficiency > 14 else 1


def carbon_rating_label(rating: int) -> str:
    return CARBON_LABELS.get(rating, "Unknown")
