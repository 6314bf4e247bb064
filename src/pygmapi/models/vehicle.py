"""Vehicle info model."""

from __future__ import annotations

from typing import Literal

from pygmapi.models._base import GmResultModel

UNKNOWN_DOOR_COUNT = "Unknown"

DoorCount = Literal[4, 2, "Unknown"]
"""Door count derived from the body-style flags; ``"Unknown"`` when neither is set."""


class VehicleInfo(GmResultModel):
    """Basic vehicle facts returned by ``GET /vehicles/{id}``."""

    vin: str | None = None
    color: str | None = None
    door_count: DoorCount = UNKNOWN_DOOR_COUNT
    drive_train: str | None = None
