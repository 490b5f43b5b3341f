# matching/errors.py


class RecommendationError(ValueError):
    """Base class for everything that aborts a recommendation call."""
    pass


class MissingLocation(RecommendationError):
    def __init__(self, missing=None):
        self.missing = list(missing or [])
        super().__init__("Not enough location data to provide a recommendation.")


class InvalidLocation(RecommendationError):
    def __init__(self, field: str | None = None):
        self.field = field
        super().__init__("Invalid location coordinates")


class NoVehiclesForType(RecommendationError):
    def __init__(self, vehicle_type: str, min_seats: int):
        self.vehicle_type = vehicle_type
        self.min_seats = min_seats
        super().__init__(
            f"No {vehicle_type} vehicles found that meet your minimum seating "
            f"requirement of {min_seats}. Try adjusting your preferences."
        )


class NoVehiclesMeetingSeats(RecommendationError):
    def __init__(self, min_seats: int):
        self.min_seats = min_seats
        super().__init__("No vehicles found with your minimum seat requirement.")


class CatalogError(RuntimeError):
    """Catalog file or rows could not be turned into vehicles."""
    pass


class CatalogNotFound(CatalogError, FileNotFoundError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Catalog not found: {path}")
