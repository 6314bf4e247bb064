"""Energy service: /getEnergyService.

Fuel and battery readings come from the same upstream payload; only
the field read differs.
"""

from __future__ import annotations

import enum

from pygmapi._api._common import build_request, post_service, validate_vehicle_id
from pygmapi._constants import ENERGY_PATH
from pygmapi._transport import Transport
from pygmapi.config import GmConfig
from pygmapi.models.energy import UNAVAILABLE, EnergyLevel
from pygmapi.models.envelope import UpstreamEnvelope


class EnergySource(enum.StrEnum):
    """Upstream field holding each reading."""

    FUEL = "tankLevel"
    BATTERY = "batteryLevel"


def parse_energy_level(envelope: UpstreamEnvelope, source: EnergySource) -> EnergyLevel:
    """Translate a successful energy envelope into a percentage reading."""
    percent = envelope.field(source.value).decode()
    return EnergyLevel(percent=UNAVAILABLE if percent is None else percent)


async def fetch_energy_level(
    config: GmConfig,
    transport: Transport,
    vehicle_id: str,
    source: EnergySource,
) -> EnergyLevel:
    """Fetch the fuel or battery level of a vehicle."""
    vehicle_id = validate_vehicle_id(vehicle_id)
    envelope = await post_service(
        path=ENERGY_PATH,
        transport=transport,
        payload=build_request(config, vehicle_id),
    )
    return parse_energy_level(envelope, source)
