#!/usr/bin/env python3
"""Print connectivity changes reported by a platform agent over MQTT.

This script wires a pynetmon monitor to an MQTT notification source and
prints every network state change:

1) connect to the broker named by --host or NETMON_MQTT_HOST,
2) subscribe to the agent topic,
3) print CONNECTED / NOT_CONNECTED each time the verdict changes.

Use this to check what an agent publishes without a GUI attached.
"""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import signal
import sys
from pathlib import Path
from typing import Any

# Allow running from repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pynetmon import NetMonConfig, NetMonError, create_monitor  # noqa: E402

_LOG = logging.getLogger("watch_network")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Watch network connectivity reported over MQTT.",
    )
    parser.add_argument("--host", help="MQTT broker host (default: NETMON_MQTT_HOST).")
    parser.add_argument("--port", type=int, help="MQTT broker port (default: NETMON_MQTT_PORT or 1883).")
    parser.add_argument("--topic", help="Agent topic (default: NETMON_MQTT_TOPIC or netmon/events).")
    parser.add_argument("--tls", action="store_true", help="Connect with TLS.")
    parser.add_argument(
        "--duration",
        type=int,
        default=0,
        help="Maximum runtime in seconds (0 = run until Ctrl+C).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG logging.",
    )
    return parser.parse_args()


def _build_config(args: argparse.Namespace) -> NetMonConfig:
    mqtt_overrides: dict[str, Any] = {}
    if args.host:
        mqtt_overrides["host"] = args.host
    if args.port is not None:
        mqtt_overrides["port"] = args.port
    if args.topic:
        mqtt_overrides["topic"] = args.topic
    if args.tls:
        mqtt_overrides["tls"] = True
    return NetMonConfig.from_env(mqtt=mqtt_overrides)


async def _watch(config: NetMonConfig, duration: int) -> None:
    monitor = create_monitor(config)
    stop_event = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except NotImplementedError:  # pragma: no cover - Windows
            pass

    async def _print_changes() -> None:
        async for state in monitor.network_state.changes():
            print(f"{state} (connected={monitor.is_network_connected})", flush=True)
            _LOG.debug("current network=%s", monitor.current_network)

    with monitor:
        printer = asyncio.create_task(_print_changes())
        try:
            if duration > 0:
                try:
                    await asyncio.wait_for(stop_event.wait(), duration)
                except TimeoutError:
                    pass
            else:
                await stop_event.wait()
        finally:
            printer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await printer


def main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = _build_config(args)
        asyncio.run(_watch(config, args.duration))
    except NetMonError as exc:
        _LOG.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
