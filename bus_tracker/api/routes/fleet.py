# path: bus-tracker-api/bus_tracker/api/routes/fleet.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from bus_tracker.models.fleet_models import (
    FleetResponse,
    GeoPoint,
    NearestStopResponse,
    Route,
    RouteExtent,
    TicketType,
    Vehicle,
)
from bus_tracker.services.fleet_tracker import FleetView
from bus_tracker.utils.geo import haversine_m

router = APIRouter(tags=["fleet"])


def get_tracker(request: Request) -> FleetView:
    return request.app.state.tracker


@router.get("/vehicles", response_model=FleetResponse)
def list_vehicles(tracker: FleetView = Depends(get_tracker)) -> FleetResponse:
    # One snapshot so tick_count and positions always belong together.
    snap = tracker.snapshot()
    return FleetResponse(tick_count=snap.tick_count, vehicles=list(snap.vehicles))


@router.get("/vehicles/{vehicle_id}", response_model=Vehicle)
def get_vehicle(vehicle_id: str, tracker: FleetView = Depends(get_tracker)) -> Vehicle:
    vehicle = tracker.get_vehicle(vehicle_id)
    if vehicle is None:
        raise HTTPException(status_code=404, detail=f"Unknown vehicle: {vehicle_id}")
    return vehicle


@router.get("/routes", response_model=List[Route])
def find_routes(
    q: str = Query(default="", max_length=80),
    tracker: FleetView = Depends(get_tracker),
) -> List[Route]:
    return tracker.find_routes(q)


@router.get("/routes/{code}/vehicles", response_model=List[Vehicle])
def vehicles_for_route(code: str, tracker: FleetView = Depends(get_tracker)) -> List[Vehicle]:
    return tracker.vehicles_for_route(code)


@router.get("/routes/{code}/extent", response_model=RouteExtent)
def route_extent(code: str, tracker: FleetView = Depends(get_tracker)) -> RouteExtent:
    extent = tracker.route_extent(code)
    if extent is None:
        raise HTTPException(status_code=404, detail=f"No path for route: {code}")
    return extent


@router.get("/stops/nearest", response_model=NearestStopResponse)
def nearest_stop(
    lat: float = Query(ge=-90.0, le=90.0),
    lon: float = Query(ge=-180.0, le=180.0),
    tracker: FleetView = Depends(get_tracker),
) -> NearestStopResponse:
    point = GeoPoint(lat=lat, lon=lon)
    stop = tracker.nearest_stop(point)
    if stop is None:
        return NearestStopResponse()
    return NearestStopResponse(stop=stop, distance_m=haversine_m(point, stop.point))


@router.get("/tickets", response_model=List[TicketType])
def ticket_types(tracker: FleetView = Depends(get_tracker)) -> List[TicketType]:
    return list(tracker.ticket_types())
