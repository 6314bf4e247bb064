"""HTTP transport for the upstream GM API."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pygmapi.config import GmConfig
from pygmapi.exceptions import GmTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def post_json(self, path: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        ...


class HttpTransport:
    """JSON-over-HTTP transport: one POST per upstream service call."""

    def __init__(self, config: GmConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = (
            aiohttp.ClientTimeout(total=config.request_timeout) if config.request_timeout is not None else None
        )

    async def post_json(self, path: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """POST *payload* as JSON and return the decoded JSON object.

        The upstream HTTP status is not inspected; the envelope's own
        ``status`` field carries the outcome.
        """
        url = f"{self._config.base_url}{path}"
        _logger.debug("POST %s", url)

        kwargs: dict[str, Any] = {"json": dict(payload)}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        try:
            async with self._http.post(url, **kwargs) as resp:
                text = await resp.text()
        except aiohttp.ClientError as exc:
            raise GmTransportError(f"Request to {path} failed: {exc}", path=path) from exc
        except asyncio.TimeoutError as exc:
            raise GmTransportError(f"Request to {path} timed out", path=path) from exc
        except UnicodeDecodeError as exc:
            raise GmTransportError(f"Undecodable body from {path}: {exc}", path=path) from exc

        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            raise GmTransportError(f"Invalid JSON from {path}: {text[:200]}", path=path) from exc

        if not isinstance(body, dict):
            raise GmTransportError(f"Unexpected JSON document from {path}: {text[:200]}", path=path)

        return body
