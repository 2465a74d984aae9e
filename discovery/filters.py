import logging
from typing import Iterable, List, Optional

from .geo import with_distance
from .schemas import AvailabilityCounts, Coordinate, FilterSpec, ProviderRecord

log = logging.getLogger(__name__)


def matches_category(record: ProviderRecord, spec: FilterSpec) -> bool:
    return record.category == spec.category


def matches_availability(record: ProviderRecord, spec: FilterSpec) -> bool:
    return record.available or not spec.availability_only


def matches_tags(record: ProviderRecord, spec: FilterSpec) -> bool:
    if not spec.required_service_tags:
        return True
    return not record.service_tags.isdisjoint(spec.required_service_tags)


def within_distance(record: ProviderRecord, spec: FilterSpec) -> bool:
    # unknown distance is never excluded by the ceiling
    if record.distance_km is None:
        return True
    return record.distance_km <= spec.max_distance_km


def meets_rating(record: ProviderRecord, spec: FilterSpec) -> bool:
    return record.rating >= spec.min_rating


PREDICATES = (matches_category, matches_availability, matches_tags, within_distance, meets_rating)


def _distance_key(record: ProviderRecord):
    return (record.distance_km is None, record.distance_km or 0.0)


def apply_filters(
    providers: Iterable[ProviderRecord],
    spec: FilterSpec,
    viewer: Optional[Coordinate] = None,
) -> List[ProviderRecord]:
    """
    Filter a roster snapshot and rank it by distance from the viewer.

    Returns a new list. Input order is kept unless ``viewer`` is given, in
    which case the result is stable-sorted nearest first with unknown
    distances last.
    """
    # distances left over from an earlier pass are dropped when the viewer is unknown
    snapshot = [with_distance(p, viewer) for p in providers]

    hits = [p for p in snapshot if all(pred(p, spec) for pred in PREDICATES)]

    if viewer is not None:
        hits.sort(key=_distance_key)

    log.debug("apply_filters: %d of %d %s providers kept", len(hits), len(snapshot), spec.category.value)
    return hits


def availability_counts(providers: Iterable[ProviderRecord]) -> AvailabilityCounts:
    roster = list(providers)
    return AvailabilityCounts(available=sum(1 for p in roster if p.available), total=len(roster))
