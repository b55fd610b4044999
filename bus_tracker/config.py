# path: bus-tracker-api/bus_tracker/config.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class TrackerConfig:
    """Centralized configuration"""

    # Tick settings
    tick_interval_seconds: float = 5.0
    jitter_degrees: float = 0.001  # uniform, per axis
    eta_floor: int = 1  # ETA shown to riders never drops below this

    # Catalog JSON document; None loads the built-in Lleida catalog
    catalog_path: Optional[Path] = None

    # Seed for the jitter RNG, for reproducible runs
    seed: Optional[int] = None

    def __post_init__(self):
        if self.tick_interval_seconds <= 0:
            raise ValueError("tick_interval_seconds must be positive")
        if self.jitter_degrees < 0:
            raise ValueError("jitter_degrees must be non-negative")
        if self.eta_floor < 1:
            raise ValueError("eta_floor must be at least 1")
        if self.catalog_path is not None:
            self.catalog_path = Path(self.catalog_path)
