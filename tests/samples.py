"""Upstream GM API responses shared by the test modules."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

VEHICLE_INFO: dict[str, Any] = {
    "service": "getVehicleInfo",
    "status": "200",
    "data": {
        "vin": {"type": "String", "value": "123123412412"},
        "color": {"type": "String", "value": "Metallic Silver"},
        "fourDoorSedan": {"type": "Boolean", "value": "True"},
        "twoDoorCoupe": {"type": "Boolean", "value": "False"},
        "driveTrain": {"type": "String", "value": "v8"},
    },
}

SECURITY_STATUS: dict[str, Any] = {
    "service": "getSecurityStatus",
    "status": "200",
    "data": {
        "doors": {
            "type": "Array",
            "values": [
                {
                    "location": {"type": "String", "value": "frontLeft"},
                    "locked": {"type": "Boolean", "value": "False"},
                },
                {
                    "location": {"type": "String", "value": "frontRight"},
                    "locked": {"type": "Boolean", "value": "True"},
                },
            ],
        }
    },
}

ENERGY_NO_BATTERY: dict[str, Any] = {
    "service": "getEnergyService",
    "status": "200",
    "data": {
        "tankLevel": {"type": "Number", "value": "30"},
        "batteryLevel": {"type": "Null", "value": "null"},
    },
}

ENERGY_HYBRID: dict[str, Any] = {
    "service": "getEnergyService",
    "status": "200",
    "data": {
        "tankLevel": {"type": "Number", "value": "30"},
        "batteryLevel": {"type": "Number", "value": "50"},
    },
}

ENGINE_EXECUTED: dict[str, Any] = {
    "service": "actionEngine",
    "status": "200",
    "actionResult": {"status": "EXECUTED"},
}

ENGINE_FAILED: dict[str, Any] = {
    "service": "actionEngine",
    "status": "200",
    "actionResult": {"status": "FAILED"},
}

NOT_FOUND: dict[str, Any] = {
    "status": "404",
    "reason": "Vehicle id: 1337 not found.",
}

CONNECTION_ERROR: dict[str, Any] = {"status": "Failed", "reason": "Connection error"}


def vehicle_info(four_door: str = "True", two_door: str = "False") -> dict[str, Any]:
    """Vehicle info response with the given body-style flags."""
    response = copy.deepcopy(VEHICLE_INFO)
    response["data"]["fourDoorSedan"]["value"] = four_door
    response["data"]["twoDoorCoupe"]["value"] = two_door
    return response


@dataclass
class FakeTransport:
    """Records upstream calls and answers from a path -> response table."""

    responses: dict[str, Any] = field(default_factory=dict)
    error: Exception | None = None
    calls: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    async def post_json(self, path: str, payload: Any) -> dict[str, Any]:
        self.calls.append((path, dict(payload)))
        if self.error is not None:
            raise self.error
        if path not in self.responses:
            raise AssertionError(f"Unexpected path: {path}")
        return copy.deepcopy(self.responses[path])


def default_responses() -> dict[str, Any]:
    return {
        "/getVehicleInfoService": VEHICLE_INFO,
        "/getSecurityStatusService": SECURITY_STATUS,
        "/getEnergyService": ENERGY_NO_BATTERY,
        "/actionEngineService": ENGINE_EXECUTED,
    }
