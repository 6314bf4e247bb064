"""Vehicle info service: /getVehicleInfoService."""

from __future__ import annotations

from pygmapi._api._common import build_request, post_service, validate_vehicle_id
from pygmapi._constants import VEHICLE_INFO_PATH
from pygmapi._transport import Transport
from pygmapi.config import GmConfig
from pygmapi.models.envelope import UpstreamEnvelope
from pygmapi.models.vehicle import UNKNOWN_DOOR_COUNT, DoorCount, VehicleInfo


def _door_count(envelope: UpstreamEnvelope) -> DoorCount:
    if envelope.field("fourDoorSedan").decode() is True:
        return 4
    if envelope.field("twoDoorCoupe").decode() is True:
        return 2
    return UNKNOWN_DOOR_COUNT


def parse_vehicle_info(envelope: UpstreamEnvelope) -> VehicleInfo:
    """Translate a successful vehicle info envelope."""
    return VehicleInfo(
        vin=envelope.field("vin").decode(),
        color=envelope.field("color").decode(),
        door_count=_door_count(envelope),
        drive_train=envelope.field("driveTrain").decode(),
    )


async def fetch_vehicle_info(config: GmConfig, transport: Transport, vehicle_id: str) -> VehicleInfo:
    """Fetch basic facts (VIN, color, doors, drive train) for a vehicle.

    Raises
    ------
    GmValidationError
        If *vehicle_id* is not a four digit string.
    GmApiError
        If the upstream reports a failure.
    """
    vehicle_id = validate_vehicle_id(vehicle_id)
    envelope = await post_service(
        path=VEHICLE_INFO_PATH,
        transport=transport,
        payload=build_request(config, vehicle_id),
    )
    return parse_vehicle_info(envelope)
