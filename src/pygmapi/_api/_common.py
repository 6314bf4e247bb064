"""Shared helpers for GM API service modules.

This module centralizes the patterns every service call repeats:
- validating the vehicle identifier
- building the ``{id, responseType}`` request body
- posting it and mapping a non-success envelope to :class:`GmApiError`

It is internal to pygmapi and may change at any time.
"""

from __future__ import annotations

import logging
from typing import Any

from pygmapi._constants import VEHICLE_ID_PATTERN
from pygmapi._transport import Transport
from pygmapi.config import GmConfig
from pygmapi.exceptions import GmApiError, GmValidationError
from pygmapi.models.envelope import UpstreamEnvelope

_logger = logging.getLogger(__name__)


def validate_vehicle_id(vehicle_id: Any) -> str:
    """Return *vehicle_id* if it is a four digit string, else raise :class:`GmValidationError`."""
    if not isinstance(vehicle_id, str) or VEHICLE_ID_PATTERN.fullmatch(vehicle_id) is None:
        raise GmValidationError(f"Invalid vehicle id: {vehicle_id!r}")
    return vehicle_id


def build_request(config: GmConfig, vehicle_id: str, **extra: str) -> dict[str, str]:
    """Build the request body shared by all upstream services."""
    payload: dict[str, str] = {"id": vehicle_id, "responseType": config.response_type}
    payload.update(extra)
    return payload


async def post_service(
    *,
    path: str,
    transport: Transport,
    payload: dict[str, str],
) -> UpstreamEnvelope:
    """Post *payload* to *path* and return the envelope if it reports success.

    Raises
    ------
    GmApiError
        If the upstream ``status`` is not ``"200"``; ``reason`` is kept verbatim.
    """
    response = await transport.post_json(path, payload)
    envelope = UpstreamEnvelope.model_validate(response)
    if not envelope.is_success:
        _logger.debug("%s answered status=%s reason=%s", path, envelope.status, envelope.reason)
        raise GmApiError(
            f"{path} failed: status={envelope.status} reason={envelope.reason}",
            status=envelope.status,
            reason=envelope.reason,
            path=path,
        )
    return envelope
