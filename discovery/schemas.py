from enum import Enum
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_MAX_DISTANCE_KM


class ServiceCategory(str, Enum):
    HOME = "home"      # therapists visiting the customer
    PLACES = "places"  # fixed venues


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)


class DayHours(BaseModel):
    model_config = ConfigDict(frozen=True)

    open: Optional[str] = None   # "HH:MM"
    close: Optional[str] = None


class OpeningHours(BaseModel):
    model_config = ConfigDict(frozen=True)

    monday: Optional[DayHours] = None
    tuesday: Optional[DayHours] = None
    wednesday: Optional[DayHours] = None
    thursday: Optional[DayHours] = None
    friday: Optional[DayHours] = None
    saturday: Optional[DayHours] = None
    sunday: Optional[DayHours] = None


class ProviderRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: ServiceCategory
    available: bool = False  # "online" for therapists, "open" for places
    service_tags: FrozenSet[str] = frozenset()
    rating: float = 0.0
    coordinate: Optional[Coordinate] = None
    distance_km: Optional[float] = None  # unset means unknown, never 0
    name: Optional[str] = None
    phone: Optional[str] = None
    opening_hours: Optional[OpeningHours] = None


class FilterSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: ServiceCategory = ServiceCategory.HOME
    availability_only: bool = False
    required_service_tags: FrozenSet[str] = frozenset()
    max_distance_km: float = DEFAULT_MAX_DISTANCE_KM
    min_rating: float = 0.0


class HoursSummaryKind(str, Enum):
    # values are the keys of the presentation layer's string table
    CLOSED_TODAY = "placeCard.closedToday"
    OPEN_TODAY = "placeCard.openToday"


class HoursSummary(BaseModel):
    kind: HoursSummaryKind
    params: Dict[str, str] = {}


class AvailabilityCounts(BaseModel):
    available: int
    total: int
