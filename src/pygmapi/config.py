"""Client and server configuration for pygmapi."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pygmapi._constants import BASE_URL, DEFAULT_HOST, DEFAULT_PORT, RESPONSE_TYPE
from pygmapi.exceptions import GmConfigError


def _env_number(env_key: str, value: str, cast: type[int] | type[float]) -> int | float:
    try:
        return cast(value)
    except ValueError as exc:
        raise GmConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class GmConfig:
    """Service configuration.

    Parameters
    ----------
    base_url : str
        Upstream GM API base URL.
    response_type : str
        ``responseType`` marker sent with every upstream request.
    request_timeout : float or None
        Total seconds allowed for one upstream call.  ``None`` keeps
        aiohttp's default session timeout.
    host : str
        Interface the HTTP server binds to.
    port : int
        Port the HTTP server listens on.
    log_level : str
        Logging level name used by the command line entry point.
    """

    base_url: str = BASE_URL
    response_type: str = RESPONSE_TYPE
    request_timeout: float | None = None
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise GmConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        if not 0 < self.port < 65536:
            raise GmConfigError(f"port must be between 1 and 65535, got {self.port}")

    @classmethod
    def from_env(cls, **overrides: Any) -> GmConfig:
        """Create configuration from environment variables.

        Reads ``GM_API_BASE_URL``, ``GM_API_REQUEST_TIMEOUT``,
        ``GM_HOST``, ``PORT`` and ``GM_LOG_LEVEL``.  Explicit keyword
        arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        _ENV_CONFIG_MAP = {
            "GM_API_BASE_URL": "base_url",
            "GM_HOST": "host",
            "GM_LOG_LEVEL": "log_level",
        }
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("GM_API_REQUEST_TIMEOUT")
        if timeout_env and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_number("GM_API_REQUEST_TIMEOUT", timeout_env, float)

        port_env = env.get("PORT")
        if port_env and "port" not in overrides:
            config_kwargs["port"] = _env_number("PORT", port_env, int)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
