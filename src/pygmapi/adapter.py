"""Vehicle adapter: the non-raising facade used by the HTTP server.

Each operation validates its input, calls the upstream through
:class:`~pygmapi.client.GmClient` and translates the outcome.  Every
failure is returned as an :class:`~pygmapi.models.error.ErrorResult`:

* upstream business errors keep the upstream ``reason``;
* invalid input, transport faults and anything unexpected become
  ``"Connection error"``.  A rejected identifier is deliberately
  indistinguishable from an unreachable upstream; ``ErrorResult.kind``
  still tells them apart.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

from pygmapi.client import GmClient
from pygmapi.exceptions import GmApiError
from pygmapi.models.energy import EnergyLevel
from pygmapi.models.engine import EngineResult
from pygmapi.models.error import ErrorResult
from pygmapi.models.security import DoorsStatus
from pygmapi.models.vehicle import VehicleInfo

_logger = logging.getLogger(__name__)

T = TypeVar("T")

AdapterResult = VehicleInfo | DoorsStatus | EnergyLevel | EngineResult | ErrorResult


class Operation(enum.StrEnum):
    """Closed set of vehicle operations exposed over HTTP."""

    INFO = "info"
    DOORS = "doors"
    FUEL = "fuel"
    BATTERY = "battery"
    ENGINE = "engine"


class VehicleAdapter:
    """Runs vehicle operations and folds every failure into :class:`ErrorResult`."""

    def __init__(self, client: GmClient) -> None:
        self._client = client

    async def _guard(self, operation: Operation, vehicle_id: Any, call: Awaitable[T]) -> T | ErrorResult:
        try:
            return await call
        except GmApiError as exc:
            _logger.info("Upstream rejected %s for vehicle %r: %s", operation, vehicle_id, exc.reason)
            return ErrorResult.from_exception(exc)
        except Exception as exc:  # noqa: BLE001
            _logger.warning("%s for vehicle %r failed: %s", operation, vehicle_id, exc)
            return ErrorResult.from_exception(exc)

    async def info(self, vehicle_id: Any) -> VehicleInfo | ErrorResult:
        return await self._guard(Operation.INFO, vehicle_id, self._client.get_vehicle_info(vehicle_id))

    async def doors(self, vehicle_id: Any) -> DoorsStatus | ErrorResult:
        return await self._guard(Operation.DOORS, vehicle_id, self._client.get_doors(vehicle_id))

    async def fuel(self, vehicle_id: Any) -> EnergyLevel | ErrorResult:
        return await self._guard(Operation.FUEL, vehicle_id, self._client.get_fuel(vehicle_id))

    async def battery(self, vehicle_id: Any) -> EnergyLevel | ErrorResult:
        return await self._guard(Operation.BATTERY, vehicle_id, self._client.get_battery(vehicle_id))

    async def engine(self, vehicle_id: Any, action: Any) -> EngineResult | ErrorResult:
        return await self._guard(Operation.ENGINE, vehicle_id, self._client.action_engine(vehicle_id, action))

    async def run(self, operation: Operation, vehicle_id: Any, action: Any = None) -> AdapterResult:
        """Execute *operation*; ``action`` is only used by :attr:`Operation.ENGINE`."""
        match operation:
            case Operation.INFO:
                return await self.info(vehicle_id)
            case Operation.DOORS:
                return await self.doors(vehicle_id)
            case Operation.FUEL:
                return await self.fuel(vehicle_id)
            case Operation.BATTERY:
                return await self.battery(vehicle_id)
            case Operation.ENGINE:
                return await self.engine(vehicle_id, action)
