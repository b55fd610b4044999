# path: bus-tracker-api/bus_tracker/models/fleet_models.py

from __future__ import annotations

from typing import List, Optional, Tuple
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_id() -> str:
    return str(uuid.uuid4())


class GeoPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str = Field(min_length=1, max_length=80)
    code: str = Field(min_length=1, max_length=16)  # e.g. "L1"
    path: Tuple[GeoPoint, ...] = ()
    fare: float = Field(ge=0)
    color: str = "gray"


class Stop(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str = Field(min_length=1, max_length=80)
    point: GeoPoint
    route_codes: Tuple[str, ...] = ()

    @field_validator("route_codes")
    @classmethod
    def dedupe_route_codes(cls, codes: Tuple[str, ...]):
        # Keep first occurrence order; a stop is served by a set of routes.
        seen = []
        for code in codes:
            if code not in seen:
                seen.append(code)
        return tuple(seen)


class Vehicle(BaseModel):
    """
    One bus of the fleet. Frozen: the tracker swaps in a new instance on
    every tick instead of mutating this one.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    route_code: str = Field(min_length=1)
    point: GeoPoint
    direction: str = ""
    next_stop: str = ""
    eta_minutes: int = Field(ge=0)


class TicketType(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    price: float = Field(ge=0)


class BBoxWGS84(BaseModel):
    min_lat: float
    min_lon: float
    max_lat: float
    max_lon: float


class RouteExtent(BaseModel):
    code: str
    bbox_wgs84: BBoxWGS84
    center: GeoPoint
    length_m: float = Field(ge=0)


class Catalog(BaseModel):
    """Static input document: everything the tracker needs at startup."""

    routes: List[Route] = Field(default_factory=list)
    stops: List[Stop] = Field(default_factory=list)
    vehicles: List[Vehicle] = Field(default_factory=list)
    ticket_types: List[TicketType] = Field(default_factory=list)


class FleetResponse(BaseModel):
    tick_count: int = Field(ge=0)
    vehicles: List[Vehicle]


class NearestStopResponse(BaseModel):
    stop: Optional[Stop] = None
    distance_m: Optional[float] = None
