# path: bus-tracker-api/bus_tracker/services/fleet_tracker.py

"""
Fleet tracker: the single owner of routes, stops and vehicles.

Routes and stops are loaded once and never mutated. Vehicles advance on
tick(), which rebuilds the whole fleet and publishes it as one immutable
snapshot, so a reader sees either the fleet before a tick or after it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Protocol, Tuple
import logging
import random
import threading

from bus_tracker.config import TrackerConfig
from bus_tracker.errors import ConfigError
from bus_tracker.models.fleet_models import (
    BBoxWGS84,
    GeoPoint,
    Route,
    RouteExtent,
    Stop,
    TicketType,
    Vehicle,
)
from bus_tracker.utils.geo import (
    bbox_center,
    bbox_wgs84,
    clamp_point,
    haversine_m,
    polyline_length_m,
)

logger = logging.getLogger(__name__)


DEFAULT_JITTER_DEG = 0.001
DEFAULT_ETA_FLOOR = 1


class FleetSnapshot(NamedTuple):
    tick_count: int
    vehicles: Tuple[Vehicle, ...]


class RouteCatalog(NamedTuple):
    routes: Tuple[Route, ...]
    by_code: Mapping[str, Route]


class FleetView(Protocol):
    """Read side of the tracker; all a map renderer is allowed to see."""

    def list_vehicles(self) -> Tuple[Vehicle, ...]: ...

    def find_routes(self, query: str) -> List[Route]: ...

    def vehicles_for_route(self, code: str) -> List[Vehicle]: ...

    def nearest_stop(self, point: GeoPoint) -> Optional[Stop]: ...

    def snapshot(self) -> FleetSnapshot: ...

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]: ...

    def route_extent(self, code: str) -> Optional[RouteExtent]: ...

    def ticket_types(self) -> Tuple[TicketType, ...]: ...


def _check_stops(stops: Iterable[Stop], codes: Mapping[str, Route]) -> None:
    for stop in stops:
        for code in stop.route_codes:
            if code not in codes:
                raise ConfigError(f"Stop {stop.name!r} references unknown route code {code!r}")


def _check_vehicles(vehicles: Iterable[Vehicle], codes: Mapping[str, Route]) -> None:
    seen_ids = set()
    for vehicle in vehicles:
        if vehicle.route_code not in codes:
            raise ConfigError(
                f"Vehicle {vehicle.id!r} references unknown route code {vehicle.route_code!r}"
            )
        if vehicle.id in seen_ids:
            raise ConfigError(f"Duplicate vehicle id: {vehicle.id!r}")
        seen_ids.add(vehicle.id)


class FleetTracker:
    def __init__(
        self,
        jitter_degrees: float = DEFAULT_JITTER_DEG,
        eta_floor: int = DEFAULT_ETA_FLOOR,
        rng: Optional[random.Random] = None,
    ) -> None:
        if jitter_degrees < 0:
            raise ValueError("jitter_degrees must be non-negative")
        if eta_floor < 1:
            raise ValueError("eta_floor must be at least 1")
        self.jitter_degrees = float(jitter_degrees)
        self.eta_floor = int(eta_floor)
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

        self._catalog = RouteCatalog(routes=(), by_code=MappingProxyType({}))
        self._stops: Tuple[Stop, ...] = ()
        self._ticket_types: Tuple[TicketType, ...] = ()
        self._fleet = FleetSnapshot(tick_count=0, vehicles=())

    @classmethod
    def from_config(cls, config: TrackerConfig) -> "FleetTracker":
        return cls(
            jitter_degrees=config.jitter_degrees,
            eta_floor=config.eta_floor,
            rng=random.Random(config.seed),
        )

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_routes(self, routes: Iterable[Route]) -> None:
        routes = tuple(routes)
        by_code: Dict[str, Route] = {}
        for route in routes:
            if route.code in by_code:
                raise ConfigError(f"Duplicate route code: {route.code!r}")
            by_code[route.code] = route

        with self._lock:
            # Anything already loaded must still point at a known route.
            _check_stops(self._stops, by_code)
            _check_vehicles(self._fleet.vehicles, by_code)
            self._catalog = RouteCatalog(routes=routes, by_code=MappingProxyType(by_code))
        logger.info("Loaded %d routes", len(routes))

    def load_stops(self, stops: Iterable[Stop]) -> None:
        stops = tuple(stops)
        with self._lock:
            _check_stops(stops, self._catalog.by_code)
            self._stops = stops
        logger.info("Loaded %d stops", len(stops))

    def load_vehicles(self, vehicles: Iterable[Vehicle]) -> None:
        vehicles = tuple(vehicles)
        with self._lock:
            _check_vehicles(vehicles, self._catalog.by_code)
            self._fleet = FleetSnapshot(tick_count=self._fleet.tick_count, vehicles=vehicles)
        logger.info("Loaded %d vehicles", len(vehicles))

    def load_ticket_types(self, ticket_types: Iterable[TicketType]) -> None:
        ticket_types = tuple(ticket_types)
        with self._lock:
            self._ticket_types = ticket_types

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def _advance(self, vehicle: Vehicle) -> Vehicle:
        j = self.jitter_degrees
        point = clamp_point(
            vehicle.point.lat + self._rng.uniform(-j, j),
            vehicle.point.lon + self._rng.uniform(-j, j),
        )
        eta = max(self.eta_floor, vehicle.eta_minutes - 1)
        return vehicle.model_copy(update={"point": point, "eta_minutes": eta})

    def tick(self) -> None:
        with self._lock:
            advanced = []
            for vehicle in self._fleet.vehicles:
                try:
                    advanced.append(self._advance(vehicle))
                except Exception:
                    logger.exception("Tick failed for vehicle %s, keeping previous state", vehicle.id)
                    advanced.append(vehicle)
            fleet = FleetSnapshot(
                tick_count=self._fleet.tick_count + 1,
                vehicles=tuple(advanced),
            )
            self._fleet = fleet
        logger.debug("Tick %d advanced %d vehicles", fleet.tick_count, len(fleet.vehicles))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def tick_count(self) -> int:
        return self._fleet.tick_count

    def snapshot(self) -> FleetSnapshot:
        return self._fleet

    def list_vehicles(self) -> Tuple[Vehicle, ...]:
        return self._fleet.vehicles

    def get_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self._fleet.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def list_routes(self) -> Tuple[Route, ...]:
        return self._catalog.routes

    def get_route(self, code: str) -> Optional[Route]:
        return self._catalog.by_code.get(code)

    def find_routes(self, query: str) -> List[Route]:
        needle = (query or "").strip().casefold()
        if not needle:
            return list(self._catalog.routes)
        return [
            r for r in self._catalog.routes
            if needle in r.name.casefold() or needle in r.code.casefold()
        ]

    def vehicles_for_route(self, code: str) -> List[Vehicle]:
        return [v for v in self._fleet.vehicles if v.route_code == code]

    def list_stops(self) -> Tuple[Stop, ...]:
        return self._stops

    def nearest_stop(self, point: GeoPoint) -> Optional[Stop]:
        best: Optional[Stop] = None
        best_d = float("inf")
        for stop in self._stops:
            d = haversine_m(point, stop.point)
            # Strict comparison: on a tie the earlier stop stays.
            if d < best_d:
                best, best_d = stop, d
        return best

    def route_extent(self, code: str) -> Optional[RouteExtent]:
        route = self._catalog.by_code.get(code)
        if route is None or not route.path:
            return None
        bbox = bbox_wgs84(route.path)
        lat, lon = bbox_center(bbox)
        return RouteExtent(
            code=route.code,
            bbox_wgs84=BBoxWGS84(**bbox),
            center=GeoPoint(lat=lat, lon=lon),
            length_m=polyline_length_m(route.path),
        )

    def ticket_types(self) -> Tuple[TicketType, ...]:
        return self._ticket_types
