"""High-level async client for the GM vehicle API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pygmapi._api import energy as _energy_api
from pygmapi._api import engine as _engine_api
from pygmapi._api import security as _security_api
from pygmapi._api import vehicle as _vehicle_api
from pygmapi._transport import HttpTransport, Transport
from pygmapi.config import GmConfig
from pygmapi.exceptions import GmError
from pygmapi.models.energy import EnergyLevel
from pygmapi.models.engine import EngineAction, EngineResult
from pygmapi.models.security import DoorsStatus
from pygmapi.models.vehicle import VehicleInfo

_logger = logging.getLogger(__name__)


class GmClient:
    """Async client for the GM vehicle API.

    Every method raises a :class:`~pygmapi.exceptions.GmError` subclass
    on failure; see :class:`~pygmapi.adapter.VehicleAdapter` for the
    non-raising variant used by the HTTP server.

    Usage::

        async with GmClient(config) as client:
            info = await client.get_vehicle_info("1234")
    """

    def __init__(
        self,
        config: GmConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or GmConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    @property
    def config(self) -> GmConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> GmClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise GmError("Client not initialized. Use 'async with GmClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Vehicle services
    # ------------------------------------------------------------------

    async def get_vehicle_info(self, vehicle_id: str) -> VehicleInfo:
        """VIN, color, door count and drive train of a vehicle."""
        return await _vehicle_api.fetch_vehicle_info(self._config, self._require_transport(), vehicle_id)

    async def get_doors(self, vehicle_id: str) -> DoorsStatus:
        """Lock state of every door, in upstream order."""
        return await _security_api.fetch_doors(self._config, self._require_transport(), vehicle_id)

    async def get_fuel(self, vehicle_id: str) -> EnergyLevel:
        """Fuel tank level in percent."""
        return await _energy_api.fetch_energy_level(
            self._config,
            self._require_transport(),
            vehicle_id,
            _energy_api.EnergySource.FUEL,
        )

    async def get_battery(self, vehicle_id: str) -> EnergyLevel:
        """Battery level in percent."""
        return await _energy_api.fetch_energy_level(
            self._config,
            self._require_transport(),
            vehicle_id,
            _energy_api.EnergySource.BATTERY,
        )

    async def action_engine(self, vehicle_id: str, action: EngineAction | str | None) -> EngineResult:
        """Start or stop the engine (``action`` is ``"start"`` or ``"stop"``)."""
        _logger.debug("Engine %s requested for vehicle %s", action, vehicle_id)
        return await _engine_api.action_engine(self._config, self._require_transport(), vehicle_id, action)
