# path: bus-tracker-api/bus_tracker/services/catalog_loader.py

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import copy
import json
import logging

from pydantic import ValidationError

from bus_tracker.errors import ConfigError
from bus_tracker.models.fleet_models import Catalog
from bus_tracker.services.default_catalog import LLEIDA_CATALOG
from bus_tracker.services.fleet_tracker import FleetTracker

logger = logging.getLogger(__name__)


def parse_catalog(doc: Dict[str, Any]) -> Catalog:
    if not isinstance(doc, dict):
        raise ConfigError("Catalog document must be a JSON object")
    try:
        return Catalog.model_validate(doc)
    except ValidationError as e:
        raise ConfigError(f"Invalid catalog: {e}") from e


def read_catalog(path: Optional[Path] = None) -> Catalog:
    """
    Read a catalog JSON document, or the built-in Lleida catalog when no
    path is given.
    """
    if path is None:
        return parse_catalog(copy.deepcopy(LLEIDA_CATALOG))

    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            doc = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Catalog {path} is not valid JSON: {e}") from e
    logger.info("Read catalog from %s", path)
    return parse_catalog(doc)


def apply_catalog(tracker: FleetTracker, catalog: Catalog) -> FleetTracker:
    # Routes first: stops and vehicles are checked against the route codes.
    tracker.load_routes(catalog.routes)
    tracker.load_stops(catalog.stops)
    tracker.load_vehicles(catalog.vehicles)
    tracker.load_ticket_types(catalog.ticket_types)
    return tracker
