"""Test configuration and fixtures"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from discovery.models import Base
from discovery.schemas import Coordinate, ProviderRecord, ServiceCategory


@pytest.fixture
def make_provider():
    """Factory for home-service provider records with permissive defaults"""

    def _make(id, lat=None, lng=None, **fields):
        fields.setdefault("category", ServiceCategory.HOME)
        coordinate = Coordinate(lat=lat, lng=lng) if lat is not None else None
        return ProviderRecord(id=id, coordinate=coordinate, **fields)

    return _make


@pytest.fixture
def roster(make_provider):
    """A small mixed roster around Denpasar, one provider without an address"""
    return [
        make_provider("far", -8.5069, 115.2625, available=True, service_tags={"swedish"}, rating=4.9),
        make_provider("near", -8.6705, 115.2126, available=True, service_tags={"balinese", "deep-tissue"}, rating=4.2),
        make_provider("offline", -8.6500, 115.2200, available=False, service_tags={"thai"}, rating=3.1),
        make_provider("no-address", available=True, service_tags={"deep-tissue"}, rating=4.0),
        make_provider("jakarta", -6.2088, 106.8456, available=True, service_tags={"swedish", "thai"}, rating=5.0),
    ]


@pytest.fixture
def viewer():
    """Viewer in central Denpasar"""
    return Coordinate(lat=-8.6700, lng=115.2100)


@pytest.fixture
def db():
    """In-memory SQLite session with the roster tables created"""
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()
