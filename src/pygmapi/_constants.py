"""Internal constants shared across the library."""

import re

BASE_URL = "https://gmapi.azurewebsites.net"
RESPONSE_TYPE = "JSON"
SUCCESS_STATUS = "200"

# ------------------------------------------------------------------
# Upstream service paths
# ------------------------------------------------------------------

VEHICLE_INFO_PATH = "/getVehicleInfoService"
SECURITY_STATUS_PATH = "/getSecurityStatusService"
ENERGY_PATH = "/getEnergyService"
ACTION_ENGINE_PATH = "/actionEngineService"

# The upstream only knows fixed-width numeric vehicle ids.
VEHICLE_ID_PATTERN = re.compile(r"\d{4}", re.ASCII)

# ------------------------------------------------------------------
# Fixed error reasons returned to callers
# ------------------------------------------------------------------

CONNECTION_ERROR_REASON = "Connection error"
DISPATCH_ERROR_REASON = "Unable to process request"
FAILED_STATUS = "Failed"

LIVENESS_TEXT = "API server is live"
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
