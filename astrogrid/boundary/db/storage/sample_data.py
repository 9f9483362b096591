"""
Fixed sample datasets served by CannedStorage.

Timestamps are computed relative to the call time so "latest first"
orderings stay meaningful.

Dependencies: datetime (stdlib)
System role: Canned rows for environments without a reachable store
"""

from datetime import datetime, timedelta, timezone
from typing import Any


def _ago(**delta: float) -> str:
    moment = datetime.now(timezone.utc) - timedelta(**delta)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_sample_tables() -> dict[str, list[dict[str, Any]]]:
    """Return a fresh copy of every canned table, keyed by table name."""
    return {
        "users": [
            {"id": 1, "name": "Admin User", "email": "admin@astrogrid.com", "role": "Admin"},
            {"id": 2, "name": "Mission Controller", "email": "mission@astrogrid.com", "role": "Controller"},
            {"id": 3, "name": "Observer", "email": "observer@astrogrid.com", "role": "Observer"},
        ],
        "satellites": [
            {
                "id": 1,
                "name": "AstroSat-1",
                "description": "Earth observation satellite for environmental monitoring",
                "status": "Operational",
                "altitude": 650,
                "operator": "ISRO",
                "type": "Earth Observation",
                "orbit": "LEO",
                "launch_date": "2023-01-15",
                "mass": 1500,
                "mission_life": "5",
            },
            {
                "id": 2,
                "name": "Resourcesat-2A",
                "description": "Resource monitoring satellite with multispectral imaging",
                "status": "Operational",
                "altitude": 817,
                "operator": "ISRO",
                "type": "Earth Observation",
                "orbit": "LEO",
                "launch_date": "2022-03-22",
                "mass": 1200,
                "mission_life": "5",
            },
            {
                "id": 3,
                "name": "GSAT-19",
                "description": "Communications satellite providing internet and broadcasting services",
                "status": "Operational",
                "altitude": 35786,
                "operator": "ISRO",
                "type": "Communication",
                "orbit": "GEO",
                "launch_date": "2021-11-05",
                "mass": 3500,
                "mission_life": "12",
            },
        ],
        "ground_stations": [
            {
                "id": 1,
                "name": "Bangalore Station",
                "location": "Bangalore, India",
                "latitude": 12.9716,
                "longitude": 77.5946,
                "elevation": 920,
                "status": "Operational",
                "description": "Primary ground station for LEO satellite tracking and communications",
            },
            {
                "id": 2,
                "name": "Chennai Station",
                "location": "Chennai, India",
                "latitude": 13.0827,
                "longitude": 80.2707,
                "elevation": 6.7,
                "status": "Operational",
                "description": "Secondary ground station focused on weather satellite tracking",
            },
            {
                "id": 3,
                "name": "Lucknow Station",
                "location": "Lucknow, India",
                "latitude": 26.8467,
                "longitude": 80.9462,
                "elevation": 123,
                "status": "Maintenance",
                "description": "Tertiary ground station currently undergoing equipment upgrades",
            },
        ],
        "missions": [
            {
                "id": 1,
                "name": "Earth Observation Mission",
                "status": "Active",
                "description": "Monitoring Earth's climate and resources",
                "start_date": "2023-01-01",
                "end_date": "2026-12-31",
            },
            {
                "id": 2,
                "name": "Communication Relay",
                "status": "Planned",
                "description": "Establishing new communication network",
                "start_date": "2024-06-01",
                "end_date": "2029-05-31",
            },
            {
                "id": 3,
                "name": "Mars Orbital Survey",
                "status": "Completed",
                "description": "Detailed mapping of Mars surface",
                "start_date": "2018-03-15",
                "end_date": "2022-12-31",
            },
        ],
        "commands": [
            {
                "id": 1,
                "satellite_id": 1,
                "command_type": "Orbital Adjust",
                "status": "Pending",
                "timestamp": _ago(seconds=0),
                "user_id": 1,
            },
            {
                "id": 2,
                "satellite_id": 2,
                "command_type": "Restart System",
                "status": "Completed",
                "timestamp": _ago(days=1),
                "user_id": 2,
            },
        ],
        "anomalies": [
            {
                "id": 1,
                "satellite_id": 3,
                "description": "Power fluctuation detected",
                "severity": "Critical",
                "status": "Open",
                "timestamp": _ago(seconds=0),
            },
            {
                "id": 2,
                "satellite_id": 1,
                "description": "Minor telemetry issue",
                "severity": "Low",
                "status": "Resolved",
                "timestamp": _ago(days=2),
            },
        ],
        "telemetry": [
            {
                "id": 1,
                "satellite_id": 1,
                "timestamp": _ago(seconds=0),
                "data": {"power": 95, "temperature": 23, "signal": 87},
            },
            {
                "id": 2,
                "satellite_id": 1,
                "timestamp": _ago(hours=1),
                "data": {"power": 96, "temperature": 22, "signal": 89},
            },
        ],
    }
