"""Security status service: /getSecurityStatusService."""

from __future__ import annotations

from pygmapi._api._common import build_request, post_service, validate_vehicle_id
from pygmapi._constants import SECURITY_STATUS_PATH
from pygmapi._transport import Transport
from pygmapi.config import GmConfig
from pygmapi.models.envelope import UpstreamEnvelope
from pygmapi.models.security import DoorsStatus, DoorStatus


def parse_doors(envelope: UpstreamEnvelope) -> DoorsStatus:
    """Translate a successful security envelope, keeping the upstream door order."""
    doors = envelope.field("doors").decode()
    if not isinstance(doors, list):
        raise TypeError(f"upstream doors field is not an array: {doors!r}")
    return DoorsStatus([DoorStatus(location=door["location"], locked=door["locked"]) for door in doors])


async def fetch_doors(config: GmConfig, transport: Transport, vehicle_id: str) -> DoorsStatus:
    """Fetch the lock state of every door of a vehicle."""
    vehicle_id = validate_vehicle_id(vehicle_id)
    envelope = await post_service(
        path=SECURITY_STATUS_PATH,
        transport=transport,
        payload=build_request(config, vehicle_id),
    )
    return parse_doors(envelope)
