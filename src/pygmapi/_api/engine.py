"""Engine action service: /actionEngineService."""

from __future__ import annotations

from typing import Any

from pygmapi._api._common import build_request, post_service, validate_vehicle_id
from pygmapi._constants import ACTION_ENGINE_PATH
from pygmapi._transport import Transport
from pygmapi.config import GmConfig
from pygmapi.exceptions import GmValidationError
from pygmapi.models.engine import ActionStatus, EngineAction, EngineCommand, EngineResult
from pygmapi.models.envelope import UpstreamEnvelope


def resolve_engine_command(action: Any) -> EngineCommand:
    """Map a caller action token (``start``/``stop``) to the upstream command.

    Raises :class:`GmValidationError` for any other token.
    """
    if isinstance(action, EngineAction):
        return action.command
    if isinstance(action, str):
        try:
            return EngineAction(action).command
        except ValueError:
            pass
    raise GmValidationError(f"Bad engine command: {action!r}")


def parse_engine_result(envelope: UpstreamEnvelope) -> EngineResult:
    """Translate a successful action envelope; unknown statuses count as errors."""
    if envelope.action_result is None:
        raise KeyError("upstream response has no actionResult")
    status = ActionStatus(str(envelope.action_result.get("status", "")))
    if status == ActionStatus.EXECUTED:
        return EngineResult(status="success")
    return EngineResult(status="error")


async def action_engine(
    config: GmConfig,
    transport: Transport,
    vehicle_id: str,
    action: Any,
) -> EngineResult:
    """Start or stop the engine of a vehicle.

    Both the identifier and the action are validated before anything
    is sent upstream.
    """
    vehicle_id = validate_vehicle_id(vehicle_id)
    command = resolve_engine_command(action)
    envelope = await post_service(
        path=ACTION_ENGINE_PATH,
        transport=transport,
        payload=build_request(config, vehicle_id, command=command.value),
    )
    return parse_engine_result(envelope)
