"""Fuel and battery level model."""

from __future__ import annotations

from typing import Literal

from pygmapi.models._base import GmResultModel

UNAVAILABLE = "Unavailable"


class EnergyLevel(GmResultModel):
    """A percentage reading of the fuel tank or the traction battery.

    ``percent`` is ``"Unavailable"`` when the vehicle does not report the
    reading (e.g. battery level of a combustion car).
    """

    percent: int | float | Literal["Unavailable"]
