"""aiohttp.web application routing ``/vehicles`` requests to the adapter.

Every response is HTTP 200: business, validation and transport failures
are reported in the JSON body only.  Requests outside the vehicle routes
get a plain-text liveness message.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Any

from aiohttp import web

from pygmapi._constants import LIVENESS_TEXT
from pygmapi.adapter import AdapterResult, Operation, VehicleAdapter
from pygmapi.client import GmClient
from pygmapi.config import GmConfig
from pygmapi.exceptions import GmDispatchError
from pygmapi.models._base import to_payload
from pygmapi.models.error import ErrorResult

_logger = logging.getLogger(__name__)

ADAPTER_KEY = web.AppKey("adapter", VehicleAdapter)

# Operations reachable through GET /vehicles/{id}/{action}.
_GET_ACTIONS: frozenset[Operation] = frozenset({Operation.DOORS, Operation.FUEL, Operation.BATTERY})


def _respond(result: AdapterResult) -> web.Response:
    return web.json_response(to_payload(result))


def _dispatch_failure(exc: Exception) -> web.Response:
    _logger.error("Unable to process request: %s", exc)
    return _respond(ErrorResult.dispatch_error())


def _get_operation(action: str) -> Operation:
    try:
        operation = Operation(action)
    except ValueError as exc:
        raise GmDispatchError(f"Invalid endpoint: {action!r}") from exc
    if operation not in _GET_ACTIONS:
        raise GmDispatchError(f"Invalid endpoint: {action!r}")
    return operation


async def _read_engine_action(request: web.Request) -> Any:
    """Return the ``action`` member of the JSON body (``None`` if absent)."""
    if not request.can_read_body:
        return None
    try:
        text = await request.text()
        if not text.strip():
            return None
        body = json.loads(text)
    except (ValueError, LookupError, RecursionError) as exc:
        # ValueError covers both UnicodeDecodeError and JSONDecodeError.
        raise GmDispatchError(f"Request body is not JSON: {exc}") from exc
    if not isinstance(body, dict):
        raise GmDispatchError("Request body must be a JSON object")
    return body.get("action")


async def _run(request: web.Request, operation: Operation, action: Any = None) -> web.Response:
    adapter = request.app[ADAPTER_KEY]
    try:
        result = await adapter.run(operation, request.match_info["id"], action)
    except Exception as exc:  # noqa: BLE001
        return _dispatch_failure(exc)
    return _respond(result)


async def get_vehicle(request: web.Request) -> web.Response:
    return await _run(request, Operation.INFO)


async def get_vehicle_action(request: web.Request) -> web.Response:
    try:
        operation = _get_operation(request.match_info["action"])
    except GmDispatchError as exc:
        return _dispatch_failure(exc)
    return await _run(request, operation)


async def post_vehicle_action(request: web.Request) -> web.Response:
    try:
        if request.match_info["action"] != Operation.ENGINE:
            raise GmDispatchError("Invalid POST request")
        action = await _read_engine_action(request)
    except GmDispatchError as exc:
        return _dispatch_failure(exc)
    return await _run(request, Operation.ENGINE, action)


@web.middleware
async def liveness_fallback(
    request: web.Request,
    handler: Callable[[web.Request], Awaitable[web.StreamResponse]],
) -> web.StreamResponse:
    """Answer unrouted paths and methods with the liveness text.

    Any other failure escaping a handler (an oversized body included)
    becomes the dispatch error so no request ends in an HTTP error status.
    """
    try:
        return await handler(request)
    except (web.HTTPNotFound, web.HTTPMethodNotAllowed):
        return web.Response(text=LIVENESS_TEXT)
    except Exception as exc:  # noqa: BLE001
        return _dispatch_failure(exc)


def create_app(config: GmConfig | None = None, *, adapter: VehicleAdapter | None = None) -> web.Application:
    """Build the HTTP application.

    When *adapter* is omitted a :class:`GmClient` is created from
    *config* and its HTTP session lives as long as the application.
    """
    app = web.Application(middlewares=[liveness_fallback])

    if adapter is None:
        client = GmClient(config or GmConfig.from_env())
        adapter = VehicleAdapter(client)

        async def _client_ctx(_app: web.Application) -> AsyncIterator[None]:
            async with client:
                yield

        app.cleanup_ctx.append(_client_ctx)

    app[ADAPTER_KEY] = adapter
    app.router.add_get("/vehicles/{id}", get_vehicle)
    app.router.add_get("/vehicles/{id}/{action}", get_vehicle_action)
    app.router.add_post("/vehicles/{id}/{action}", post_vehicle_action)
    return app
