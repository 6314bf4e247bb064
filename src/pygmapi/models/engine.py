"""Engine start/stop models."""

from __future__ import annotations

import enum
from typing import Literal

from pygmapi.models._base import GmResultModel


class EngineAction(enum.StrEnum):
    """Action token accepted from callers of ``POST /vehicles/{id}/engine``."""

    START = "start"
    STOP = "stop"

    @property
    def command(self) -> EngineCommand:
        return _ACTION_TO_COMMAND[self]


class EngineCommand(enum.StrEnum):
    """``command`` values sent to ``/actionEngineService``."""

    START_VEHICLE = "START_VEHICLE"
    STOP_VEHICLE = "STOP_VEHICLE"


_ACTION_TO_COMMAND: dict[EngineAction, EngineCommand] = {
    EngineAction.START: EngineCommand.START_VEHICLE,
    EngineAction.STOP: EngineCommand.STOP_VEHICLE,
}


class ActionStatus(enum.StrEnum):
    """``actionResult.status`` reported by the upstream.

    Statuses without a mapped member resolve to ``UNKNOWN``.
    """

    EXECUTED = "EXECUTED"
    FAILED = "FAILED"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value: object) -> ActionStatus:
        return cls.UNKNOWN


class EngineResult(GmResultModel):
    """Outcome of an engine start/stop command."""

    status: Literal["success", "error"]
