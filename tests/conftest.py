"""
Pytest configuration and shared fixtures for bus-tracker-api tests.
"""
import random
from typing import List

import pytest
from fastapi.testclient import TestClient

from bus_tracker.config import TrackerConfig
from bus_tracker.application import create_app
from bus_tracker.models.fleet_models import GeoPoint, Route, Stop, Vehicle
from bus_tracker.services.fleet_tracker import FleetTracker


# ============================================================
# CATALOG FIXTURES
# ============================================================

@pytest.fixture
def routes() -> List[Route]:
    return [
        Route(
            id="r1",
            name="Línea 1 - Centro",
            code="L1",
            fare=1.40,
            color="blue",
            path=[GeoPoint(lat=41.6205, lon=0.6150), GeoPoint(lat=41.6158, lon=0.6244)],
        ),
        Route(id="r2", name="Línea 2 - Universitat", code="L2", fare=1.40, color="green"),
    ]


@pytest.fixture
def stops() -> List[Stop]:
    return [
        Stop(id="s1", name="Pl. Ricard Viñes", point=GeoPoint(lat=41.6183, lon=0.6218), route_codes=["L1"]),
        Stop(id="s2", name="Hospital Arnau", point=GeoPoint(lat=41.6265, lon=0.6127), route_codes=["L2"]),
    ]


@pytest.fixture
def vehicles() -> List[Vehicle]:
    return [
        Vehicle(
            id="v1",
            route_code="L1",
            point=GeoPoint(lat=41.6176, lon=0.6200),
            direction="Centro",
            next_stop="Pl. Ricard Viñes",
            eta_minutes=3,
        ),
        Vehicle(
            id="v2",
            route_code="L2",
            point=GeoPoint(lat=41.6165, lon=0.6210),
            direction="Universitat",
            next_stop="Hospital Arnau",
            eta_minutes=1,
        ),
    ]


@pytest.fixture
def tracker(routes, stops, vehicles) -> FleetTracker:
    t = FleetTracker(rng=random.Random(42))
    t.load_routes(routes)
    t.load_stops(stops)
    t.load_vehicles(vehicles)
    return t


# ============================================================
# HTTP FIXTURES
# ============================================================

@pytest.fixture
def client():
    # Long interval: ticks in API tests are driven by hand.
    app = create_app(TrackerConfig(tick_interval_seconds=3600, seed=7))
    with TestClient(app) as c:
        yield c
