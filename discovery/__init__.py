from .filters import apply_filters, availability_counts
from .geo import distance_km, with_distance
from .hours import generate_time_options, is_open_now, todays_hours_summary
from .schemas import (
    AvailabilityCounts,
    Coordinate,
    FilterSpec,
    HoursSummary,
    HoursSummaryKind,
    OpeningHours,
    ProviderRecord,
    ServiceCategory,
)

__all__ = [
    "apply_filters",
    "availability_counts",
    "distance_km",
    "with_distance",
    "generate_time_options",
    "is_open_now",
    "todays_hours_summary",
    "AvailabilityCounts",
    "Coordinate",
    "FilterSpec",
    "HoursSummary",
    "HoursSummaryKind",
    "OpeningHours",
    "ProviderRecord",
    "ServiceCategory",
]
