# path: bus-tracker-api/bus_tracker/application.py

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from bus_tracker.api.routes.fleet import router as fleet_router
from bus_tracker.config import TrackerConfig
from bus_tracker.services.catalog_loader import apply_catalog, read_catalog
from bus_tracker.services.fleet_tracker import FleetTracker
from bus_tracker.services.tick_scheduler import TickScheduler


def create_app(config: Optional[TrackerConfig] = None) -> FastAPI:
    config = config or TrackerConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # A bad catalog raises ConfigError here and aborts startup.
        tracker = apply_catalog(FleetTracker.from_config(config), read_catalog(config.catalog_path))
        scheduler = TickScheduler(tracker, interval_seconds=config.tick_interval_seconds)
        app.state.tracker = tracker
        app.state.scheduler = scheduler
        scheduler.start()
        try:
            yield
        finally:
            await scheduler.stop()

    app = FastAPI(title="bus-tracker-api", lifespan=lifespan)
    app.include_router(fleet_router)
    return app
