from __future__ import annotations

import pytest

from pygmapi._api.energy import EnergySource, parse_energy_level
from pygmapi._api.engine import parse_engine_result, resolve_engine_command
from pygmapi._api.security import parse_doors
from pygmapi._api.vehicle import parse_vehicle_info
from pygmapi.exceptions import GmValidationError
from pygmapi.models import EngineAction, EngineCommand, UpstreamEnvelope, to_payload
from tests.samples import (
    ENERGY_HYBRID,
    ENERGY_NO_BATTERY,
    ENGINE_EXECUTED,
    ENGINE_FAILED,
    SECURITY_STATUS,
    vehicle_info,
)


def _envelope(response: dict) -> UpstreamEnvelope:
    return UpstreamEnvelope.model_validate(response)


def test_vehicle_info_translation() -> None:
    info = parse_vehicle_info(_envelope(vehicle_info()))

    assert to_payload(info) == {
        "vin": "123123412412",
        "color": "Metallic Silver",
        "doorCount": 4,
        "driveTrain": "v8",
    }


@pytest.mark.parametrize(
    ("four_door", "two_door", "expected"),
    [
        ("True", "False", 4),
        ("True", "True", 4),
        ("False", "True", 2),
        ("False", "False", "Unknown"),
        ("true", "TRUE", "Unknown"),
    ],
)
def test_door_count(four_door: str, two_door: str, expected: int | str) -> None:
    info = parse_vehicle_info(_envelope(vehicle_info(four_door, two_door)))
    assert info.door_count == expected


def test_vehicle_info_missing_field_raises() -> None:
    response = vehicle_info()
    del response["data"]["driveTrain"]

    with pytest.raises(KeyError):
        parse_vehicle_info(_envelope(response))


def test_doors_translation_preserves_order() -> None:
    doors = parse_doors(_envelope(SECURITY_STATUS))

    assert to_payload(doors) == [
        {"location": "frontLeft", "locked": False},
        {"location": "frontRight", "locked": True},
    ]


def test_doors_field_must_be_an_array() -> None:
    response = {"status": "200", "data": {"doors": {"type": "String", "value": "frontLeft"}}}

    with pytest.raises(TypeError):
        parse_doors(_envelope(response))


def test_fuel_translation_is_numeric() -> None:
    level = parse_energy_level(_envelope(ENERGY_NO_BATTERY), EnergySource.FUEL)

    assert to_payload(level) == {"percent": 30}
    assert isinstance(level.percent, int)


def test_battery_null_is_unavailable() -> None:
    level = parse_energy_level(_envelope(ENERGY_NO_BATTERY), EnergySource.BATTERY)

    assert to_payload(level) == {"percent": "Unavailable"}


def test_battery_translation() -> None:
    level = parse_energy_level(_envelope(ENERGY_HYBRID), EnergySource.BATTERY)

    assert to_payload(level) == {"percent": 50}


def test_fractional_level() -> None:
    response = {"status": "200", "data": {"tankLevel": {"type": "Number", "value": "12.75"}}}
    level = parse_energy_level(_envelope(response), EnergySource.FUEL)

    assert level.percent == pytest.approx(12.75)


def test_unparseable_level_raises() -> None:
    response = {"status": "200", "data": {"tankLevel": {"type": "Number", "value": "full"}}}

    with pytest.raises(ValueError):
        parse_energy_level(_envelope(response), EnergySource.FUEL)


def test_engine_executed_is_success() -> None:
    assert to_payload(parse_engine_result(_envelope(ENGINE_EXECUTED))) == {"status": "success"}


def test_engine_failed_is_error() -> None:
    assert to_payload(parse_engine_result(_envelope(ENGINE_FAILED))) == {"status": "error"}


def test_engine_unknown_status_is_error() -> None:
    response = {"status": "200", "actionResult": {"status": "QUEUED"}}
    assert parse_engine_result(_envelope(response)).status == "error"


def test_engine_missing_action_result_raises() -> None:
    with pytest.raises(KeyError):
        parse_engine_result(_envelope({"status": "200"}))


@pytest.mark.parametrize(
    ("action", "command"),
    [
        ("start", EngineCommand.START_VEHICLE),
        ("stop", EngineCommand.STOP_VEHICLE),
        (EngineAction.STOP, EngineCommand.STOP_VEHICLE),
    ],
)
def test_resolve_engine_command(action: object, command: EngineCommand) -> None:
    assert resolve_engine_command(action) == command


@pytest.mark.parametrize("action", ["NOT_OK", "START", "", None, 1])
def test_resolve_engine_command_rejects(action: object) -> None:
    with pytest.raises(GmValidationError):
        resolve_engine_command(action)
