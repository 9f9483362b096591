"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from astrogrid.boundary.db.CRUD import satellite_crud

    rows = await satellite_crud.get_by_status(storage, "Operational")
"""

from astrogrid.boundary.db.CRUD.base_crud import BaseCRUD, FilterRoute
from astrogrid.boundary.db.CRUD.satellite_crud import SatelliteCRUD, satellite_crud
from astrogrid.boundary.db.CRUD.ground_station_crud import GroundStationCRUD, ground_station_crud
from astrogrid.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from astrogrid.boundary.db.CRUD.telemetry_crud import TelemetryCRUD, telemetry_crud
from astrogrid.boundary.db.CRUD.command_crud import CommandCRUD, command_crud
from astrogrid.boundary.db.CRUD.anomaly_crud import AnomalyCRUD, anomaly_crud
from astrogrid.boundary.db.CRUD.mission_crud import MissionCRUD, mission_crud

__all__ = [
    "BaseCRUD",
    "FilterRoute",
    "SatelliteCRUD",
    "satellite_crud",
    "GroundStationCRUD",
    "ground_station_crud",
    "UserCRUD",
    "user_crud",
    "TelemetryCRUD",
    "telemetry_crud",
    "CommandCRUD",
    "command_crud",
    "AnomalyCRUD",
    "anomaly_crud",
    "MissionCRUD",
    "mission_crud",
]
