import importlib
import logging

import bus_tracker.application


def test_importing_factory_leaves_logging_alone(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda *a, **kw: calls.append(kw))
    importlib.reload(bus_tracker.application)
    assert calls == []


def test_create_app_registers_routes():
    app = bus_tracker.application.create_app()
    paths = {route.path for route in app.routes}
    assert {"/vehicles", "/routes", "/stops/nearest", "/tickets"} <= paths
