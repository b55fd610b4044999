# path: bus-tracker-api/bus_tracker/services/default_catalog.py

# Built-in catalog for the Lleida demo. Same shape as a catalog JSON document.

LLEIDA_CENTER = {"lat": 41.6176, "lon": 0.6200}

SINGLE_FARE = 1.35

LLEIDA_CATALOG = {
    "routes": [
        {
            "id": "route-l1",
            "name": "Línea 1 - Centro",
            "code": "L1",
            "color": "blue",
            "fare": SINGLE_FARE,
            "path": [
                {"lat": 41.6205, "lon": 0.6150},
                {"lat": 41.6180, "lon": 0.6195},
                {"lat": 41.6183, "lon": 0.6218},
                {"lat": 41.6158, "lon": 0.6244},
            ],
        },
        {
            "id": "route-l2",
            "name": "Línea 2 - Universitat",
            "code": "L2",
            "color": "green",
            "fare": SINGLE_FARE,
            "path": [
                {"lat": 41.6148, "lon": 0.6262},
                {"lat": 41.6165, "lon": 0.6210},
                {"lat": 41.6230, "lon": 0.6160},
                {"lat": 41.6265, "lon": 0.6127},
            ],
        },
        {
            "id": "route-l3",
            "name": "Línea 3 - Estació",
            "code": "L3",
            "color": "red",
            "fare": SINGLE_FARE,
            "path": [
                {"lat": 41.6190, "lon": 0.6180},
                {"lat": 41.6148, "lon": 0.6262},
                {"lat": 41.6206, "lon": 0.6332},
            ],
        },
        {
            "id": "route-l4",
            "name": "Línea 4 - Zona Alta",
            "code": "L4",
            "color": "orange",
            "fare": SINGLE_FARE,
            "path": [
                {"lat": 41.6158, "lon": 0.6244},
                {"lat": 41.6155, "lon": 0.6225},
                {"lat": 41.6102, "lon": 0.6168},
            ],
        },
    ],
    "stops": [
        {
            "id": "stop-ricard-vines",
            "name": "Pl. Ricard Viñes",
            "point": {"lat": 41.6183, "lon": 0.6218},
            "route_codes": ["L1"],
        },
        {
            "id": "stop-hospital-arnau",
            "name": "Hospital Arnau",
            "point": {"lat": 41.6265, "lon": 0.6127},
            "route_codes": ["L2"],
        },
        {
            "id": "stop-av-catalunya",
            "name": "Av. Catalunya",
            "point": {"lat": 41.6148, "lon": 0.6262},
            "route_codes": ["L2", "L3"],
        },
        {
            "id": "stop-sant-joan",
            "name": "Pl. Sant Joan",
            "point": {"lat": 41.6158, "lon": 0.6244},
            "route_codes": ["L1", "L4"],
        },
        {
            "id": "stop-estacio",
            "name": "Estació",
            "point": {"lat": 41.6206, "lon": 0.6332},
            "route_codes": ["L3"],
        },
    ],
    "vehicles": [
        {
            "id": "bus-1",
            "route_code": "L1",
            "point": {"lat": 41.6180, "lon": 0.6195},
            "direction": "Centro",
            "next_stop": "Pl. Ricard Viñes",
            "eta_minutes": 3,
        },
        {
            "id": "bus-2",
            "route_code": "L2",
            "point": {"lat": 41.6165, "lon": 0.6210},
            "direction": "Universitat",
            "next_stop": "Hospital Arnau",
            "eta_minutes": 5,
        },
        {
            "id": "bus-3",
            "route_code": "L3",
            "point": {"lat": 41.6190, "lon": 0.6180},
            "direction": "Estació",
            "next_stop": "Av. Catalunya",
            "eta_minutes": 2,
        },
        {
            "id": "bus-4",
            "route_code": "L4",
            "point": {"lat": 41.6155, "lon": 0.6225},
            "direction": "Zona Alta",
            "next_stop": "Pl. Sant Joan",
            "eta_minutes": 7,
        },
    ],
    "ticket_types": [
        {"name": "Billete Simple", "price": SINGLE_FARE},
        {"name": "Billete Día", "price": 4.20},
        {"name": "Billete Semanal", "price": 12.00},
    ],
}
