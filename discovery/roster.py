"""
Roster data source: normalises stored therapist and place rows into the
``ProviderRecord`` shape the filter engine reads.
"""

import logging
from typing import List, Optional, Union

from pydantic import ValidationError
from sqlalchemy.orm import Session

from .hours import coerce_opening_hours
from .models import Place, Therapist
from .schemas import Coordinate, ProviderRecord, ServiceCategory

log = logging.getLogger(__name__)

ACTIVE = "active"


def _coordinate(row: Union[Therapist, Place]) -> Optional[Coordinate]:
    if row.lat is None or row.lng is None:
        return None
    try:
        return Coordinate(lat=row.lat, lng=row.lng)
    except ValidationError:
        log.warning("%s %s has out-of-range coordinates (%s, %s)", row.__tablename__, row.id, row.lat, row.lng)
        return None


def therapist_to_record(row: Therapist) -> ProviderRecord:
    return ProviderRecord(
        id=row.id,
        category=ServiceCategory.HOME,
        available=bool(row.is_online),
        service_tags=frozenset(row.massage_types or ()),
        rating=row.rating or 0.0,
        coordinate=_coordinate(row),
        name=row.name,
        phone=row.phone,
    )


def place_to_record(row: Place) -> ProviderRecord:
    return ProviderRecord(
        id=row.id,
        category=ServiceCategory.PLACES,
        available=bool(row.is_online),
        service_tags=frozenset(row.services or ()),
        rating=row.rating or 0.0,
        coordinate=_coordinate(row),
        name=row.name,
        phone=row.phone,
        opening_hours=coerce_opening_hours(row.opening_hours),
    )


def load_roster(db: Session, category: ServiceCategory) -> List[ProviderRecord]:
    """Active providers of one category, oldest first with ties broken by id."""
    if category == ServiceCategory.HOME:
        model, to_record = Therapist, therapist_to_record
    else:
        model, to_record = Place, place_to_record

    rows = db.query(model).filter(model.status == ACTIVE).order_by(model.created_at, model.id).all()
    log.debug("Loaded %d active %s", len(rows), model.__tablename__)
    return [to_record(r) for r in rows]
