from __future__ import annotations

import pytest

from pygmapi.__main__ import _build_parser
from pygmapi.config import GmConfig
from pygmapi.exceptions import GmConfigError


def test_defaults() -> None:
    config = GmConfig()

    assert config.base_url == "https://gmapi.azurewebsites.net"
    assert config.response_type == "JSON"
    assert config.request_timeout is None
    assert config.port == 3000


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GM_API_BASE_URL", "http://localhost:9000")
    monkeypatch.setenv("GM_API_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GM_LOG_LEVEL", "DEBUG")

    config = GmConfig.from_env()

    assert config.base_url == "http://localhost:9000"
    assert config.request_timeout == pytest.approx(2.5)
    assert config.port == 8080
    assert config.log_level == "DEBUG"


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("GM_API_REQUEST_TIMEOUT", "2.5")

    config = GmConfig.from_env(port=9090, request_timeout=1.0)

    assert config.port == 9090
    assert config.request_timeout == pytest.approx(1.0)


@pytest.mark.parametrize(("env_key", "value"), [("PORT", "http"), ("GM_API_REQUEST_TIMEOUT", "soon")])
def test_from_env_rejects_non_numeric(monkeypatch: pytest.MonkeyPatch, env_key: str, value: str) -> None:
    monkeypatch.setenv(env_key, value)

    with pytest.raises(GmConfigError, match=env_key):
        GmConfig.from_env()


@pytest.mark.parametrize("kwargs", [{"request_timeout": 0}, {"port": 0}, {"port": 70000}])
def test_rejects_out_of_range(kwargs: dict[str, float]) -> None:
    with pytest.raises(GmConfigError):
        GmConfig(**kwargs)


def test_cli_parser() -> None:
    args = _build_parser().parse_args(["--port", "4000", "--timeout", "3", "--log-level", "DEBUG"])

    assert args.port == 4000
    assert args.timeout == pytest.approx(3.0)
    assert args.log_level == "DEBUG"
    assert args.base_url is None
