"""
Database models package.

Exports one ORM model per logical collection. The models declare each
table's column set; the registry validates payloads against them.

Dependencies: sqlalchemy, astrogrid.boundary.db.base
System role: Database model definitions for domain entities
"""

from astrogrid.boundary.db.models.satellite_model import SatelliteModel
from astrogrid.boundary.db.models.ground_station_model import GroundStationModel
from astrogrid.boundary.db.models.user_model import UserModel
from astrogrid.boundary.db.models.telemetry_model import TelemetryModel
from astrogrid.boundary.db.models.command_model import CommandModel
from astrogrid.boundary.db.models.anomaly_model import AnomalyModel
from astrogrid.boundary.db.models.mission_model import MissionModel

__all__ = [
    "SatelliteModel",
    "GroundStationModel",
    "UserModel",
    "TelemetryModel",
    "CommandModel",
    "AnomalyModel",
    "MissionModel",
]
