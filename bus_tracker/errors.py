# path: bus-tracker-api/bus_tracker/errors.py


class ConfigError(ValueError):
    """Malformed or inconsistent catalog. Raised at load time, never retried."""
