from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any

from domain.vehicle import Coordinate


@dataclass(frozen=True)
class Habits:
    has_kids: bool = False
    trunk_preference: bool = False


@dataclass(frozen=True)
class RecommendationInput:
    house: Optional[Coordinate]
    workplace: Optional[Coordinate]
    holiday: Optional[Coordinate]
    min_seats: int = 5
    habits: Habits = field(default_factory=Habits)
    preferred_type: Optional[str] = None  # vehicle type, "any" or None

    @property
    def type_filter(self) -> Optional[str]:
        """The effective type filter, or None when every type is accepted."""
        if not self.preferred_type:
            return None
        t = self.preferred_type.strip().lower()
        return None if t in ("", "any") else t

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
