"""Data models for upstream envelopes and canonical results."""

from pygmapi.models._base import FieldType, GmResultModel, TypedField, parse_number, to_payload
from pygmapi.models.energy import UNAVAILABLE, EnergyLevel
from pygmapi.models.engine import ActionStatus, EngineAction, EngineCommand, EngineResult
from pygmapi.models.envelope import UpstreamEnvelope
from pygmapi.models.error import ErrorResult
from pygmapi.models.security import DoorsStatus, DoorStatus
from pygmapi.models.vehicle import UNKNOWN_DOOR_COUNT, DoorCount, VehicleInfo

__all__ = [
    "ActionStatus",
    "DoorCount",
    "DoorStatus",
    "DoorsStatus",
    "EnergyLevel",
    "EngineAction",
    "EngineCommand",
    "EngineResult",
    "ErrorResult",
    "FieldType",
    "GmResultModel",
    "TypedField",
    "UNAVAILABLE",
    "UNKNOWN_DOOR_COUNT",
    "UpstreamEnvelope",
    "VehicleInfo",
    "parse_number",
    "to_payload",
]
