import logging

from sqlalchemy.orm import Session

from .config import LOG_LEVEL
from .db import SessionLocal
from .models import Place, Therapist

log = logging.getLogger(__name__)

_BALI_HOURS = {
    "monday": {"open": "09:00", "close": "21:00"},
    "tuesday": {"open": "09:00", "close": "21:00"},
    "wednesday": {"open": "09:00", "close": "21:00"},
    "thursday": {"open": "09:00", "close": "21:00"},
    "friday": {"open": "09:00", "close": "23:00"},
    "saturday": {"open": "18:00", "close": "02:00"},
    "sunday": None,
}


def demo_therapists():
    return [
        Therapist(
            id="seed-therapist-1",
            account_number="T-0001",
            name="Made Wirawan",
            phone="+62 812-3456-7890",
            city="Denpasar",
            status="active",
            is_online=True,
            massage_types=["balinese", "deep-tissue"],
            rating=4.8,
            review_count=32,
            lat=-8.6705,
            lng=115.2126,
        ),
        Therapist(
            id="seed-therapist-2",
            account_number="T-0002",
            name="Ketut Sari",
            phone="+62 813-1111-2222",
            city="Ubud",
            status="active",
            is_online=False,
            massage_types=["swedish", "reflexology"],
            rating=4.5,
            review_count=12,
            lat=-8.5069,
            lng=115.2625,
        ),
        Therapist(
            id="seed-therapist-3",
            account_number="T-0003",
            name="Wayan Putra",
            phone="+62 811-0000-3333",
            city="Canggu",
            status="pending",
            is_online=True,
            massage_types=["thai"],
        ),
    ]


def demo_places():
    return [
        Place(
            id="seed-place-1",
            account_number="P-0001",
            name="Seminyak Spa & Wellness",
            phone="+62 361-730-000",
            address="Jl. Kayu Aya 10",
            city="Seminyak",
            status="active",
            is_online=True,
            services=["balinese", "hot-stone", "swedish"],
            opening_hours=_BALI_HOURS,
            rating=4.6,
            review_count=88,
            lat=-8.6913,
            lng=115.1682,
        ),
    ]


def seed_roster(db: Session) -> bool:
    """Insert the demo roster into empty tables. Returns True when rows were added."""
    if db.query(Therapist).count() or db.query(Place).count():
        log.info("Roster already present; skipping seed")
        return False
    try:
        db.add_all(demo_therapists() + demo_places())
        db.commit()
    except Exception:
        db.rollback()
        raise
    log.info("Seeded demo roster")
    return True


def run():
    logging.basicConfig(level=LOG_LEVEL)
    db = SessionLocal()
    try:
        seed_roster(db)
    finally:
        db.close()


if __name__ == "__main__":
    run()
