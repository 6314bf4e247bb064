#!/usr/bin/env python3
"""Dump everything pygmapi can read for one vehicle.

Calls every read-only service (and optionally the engine action) through
:class:`pygmapi.VehicleAdapter`, printing the translated result next to
the upstream's raw reply so mismatches in the typed-field format are
easy to spot.

Usage
-----
::

    python scripts/dump_vehicle.py 1234
    python scripts/dump_vehicle.py 1234 --json --engine start

Environment: ``GM_API_BASE_URL`` and ``GM_API_REQUEST_TIMEOUT`` are
honoured as by the server.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pygmapi import GmClient, GmConfig, Operation, VehicleAdapter  # noqa: E402
from pygmapi._constants import ENERGY_PATH, SECURITY_STATUS_PATH, VEHICLE_INFO_PATH  # noqa: E402
from pygmapi.models import ErrorResult, to_payload  # noqa: E402

_RAW_PATHS: dict[Operation, str] = {
    Operation.INFO: VEHICLE_INFO_PATH,
    Operation.DOORS: SECURITY_STATUS_PATH,
    Operation.FUEL: ENERGY_PATH,
    Operation.BATTERY: ENERGY_PATH,
}


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


async def _raw_reply(client: GmClient, path: str, vehicle_id: str) -> Any:
    """Fetch the untranslated upstream reply, or the error text."""
    transport = client._require_transport()
    try:
        return await transport.post_json(path, {"id": vehicle_id, "responseType": client.config.response_type})
    except Exception as exc:  # noqa: BLE001
        return {"error": str(exc)}


async def dump_vehicle(
    client: GmClient,
    vehicle_id: str,
    *,
    engine: str | None,
    json_mode: bool,
) -> dict[str, Any]:
    adapter = VehicleAdapter(client)
    out: list[str] = []
    data: dict[str, Any] = {"id": vehicle_id}

    for operation, path in _RAW_PATHS.items():
        result = await adapter.run(operation, vehicle_id)
        raw = await _raw_reply(client, path, vehicle_id)
        entry: dict[str, Any] = {"result": to_payload(result), "raw": raw}
        if isinstance(result, ErrorResult):
            entry["kind"] = result.kind.value
        data[operation.value] = entry

        out.append(_section(f"{operation.value.upper()}  id={vehicle_id}"))
        out.append(json.dumps(entry["result"], indent=2, ensure_ascii=False))
        out.append(f"\n  ── {path} (raw JSON) ──")
        out.append(json.dumps(raw, indent=2, default=str, ensure_ascii=False))

    if engine is not None:
        result = await adapter.engine(vehicle_id, engine)
        data["engine"] = {"action": engine, "result": to_payload(result)}
        out.append(_section(f"ENGINE {engine}  id={vehicle_id}"))
        out.append(json.dumps(data["engine"]["result"], indent=2))

    if not json_mode:
        print("\n".join(out))
    return data


async def main() -> None:
    parser = argparse.ArgumentParser(description="Dump all data pygmapi can fetch for one vehicle.")
    parser.add_argument("vehicle_id", help="Four digit vehicle id")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--engine", choices=["start", "stop"], help="Also send an engine command")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    async with GmClient(GmConfig.from_env()) as client:
        data = await dump_vehicle(client, args.vehicle_id, engine=args.engine, json_mode=args.json_mode)

    if args.json_mode:
        print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


if __name__ == "__main__":
    asyncio.run(main())
