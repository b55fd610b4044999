# path: bus-tracker-api/bus_tracker/main.py

# Server entry point: uvicorn bus_tracker.main:app

import logging

from bus_tracker.application import create_app

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

app = create_app()
