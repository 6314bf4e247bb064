"""pygmapi - Async adapter turning the GM vehicle API into a compact HTTP API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pygmapi")
except PackageNotFoundError:
    __version__ = "0+local"
from pygmapi.adapter import Operation, VehicleAdapter
from pygmapi.client import GmClient
from pygmapi.config import GmConfig
from pygmapi.exceptions import (
    ErrorKind,
    GmApiError,
    GmConfigError,
    GmDispatchError,
    GmError,
    GmTransportError,
    GmValidationError,
)
from pygmapi.models import (
    DoorsStatus,
    DoorStatus,
    EnergyLevel,
    EngineAction,
    EngineCommand,
    EngineResult,
    ErrorResult,
    UpstreamEnvelope,
    VehicleInfo,
)

__all__ = [
    "__version__",
    "DoorStatus",
    "DoorsStatus",
    "EnergyLevel",
    "EngineAction",
    "EngineCommand",
    "EngineResult",
    "ErrorKind",
    "ErrorResult",
    "GmApiError",
    "GmClient",
    "GmConfig",
    "GmConfigError",
    "GmDispatchError",
    "GmError",
    "GmTransportError",
    "GmValidationError",
    "Operation",
    "UpstreamEnvelope",
    "VehicleAdapter",
    "VehicleInfo",
]
