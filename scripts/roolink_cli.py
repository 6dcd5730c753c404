"""
RooLink CLI: call the API from the shell using ROOLINK_* settings.

Usage examples:
  python -m scripts.roolink_cli limit
  python -m scripts.roolink_cli parse --file script.js
  python -m scripts.roolink_cli sensor --abck ABCK --bm-sz BMSZ --index 3
  python -m scripts.roolink_cli sbsd --vid VID --cookie BM_O --static
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from roolink import ApiClient, ConfigError, RooLinkError, SensorOptions, Settings


def _read_file(path: str) -> str:
    with open(path, encoding="utf-8") as fh:
        return fh.read()


async def run(client: ApiClient, args: argparse.Namespace) -> Any:
    if args.cmd == "limit":
        return await client.request_limit()
    if args.cmd == "parse":
        return await client.parse_script_data(_read_file(args.file))
    if args.cmd == "sensor":
        options = SensorOptions(
            script_data=_read_file(args.script_file) if args.script_file else None,
            sec_cpt=args.sec_cpt,
            stepper=args.stepper,
            index=args.index,
            flags=args.flags,
        )
        return await client.generate_sensor_data(args.abck, args.bm_sz, options)
    if args.cmd == "sbsd":
        return await client.generate_sbsd_body(args.vid, args.cookie, args.static)
    if args.cmd == "pixel":
        return await client.generate_pixel_data(args.id, args.hash)
    if args.cmd == "sec-cpt":
        return await client.generate_sec_cpt_answers(
            args.token, args.timestamp, args.nonce, args.difficulty, args.cookie
        )
    raise ValueError(f"unknown command: {args.cmd}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Call the RooLink API")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("limit", help="Show the remaining request quota")

    p_parse = sub.add_parser("parse", help="Parse a bot-manager script")
    p_parse.add_argument("--file", required=True, help="Path to the script body")

    p_sensor = sub.add_parser("sensor", help="Generate sensor data")
    p_sensor.add_argument("--abck", required=True, help="_abck cookie value")
    p_sensor.add_argument("--bm-sz", required=True, help="bm_sz cookie value")
    p_sensor.add_argument("--script-file", help="Path to parsed script data")
    p_sensor.add_argument("--sec-cpt", action="store_true", help="Generate for a sec-cpt flow")
    p_sensor.add_argument("--stepper", action="store_true", help="Enable stepper mode")
    p_sensor.add_argument("--index", type=int, default=2, help="Sensor index (default: 2)")
    p_sensor.add_argument("--flags", default="", help="Generation flags")

    p_sbsd = sub.add_parser("sbsd", help="Generate an SBSD body")
    p_sbsd.add_argument("--vid", required=True, help="vid parameter")
    p_sbsd.add_argument("--cookie", required=True, help="bm_o cookie value")
    p_sbsd.add_argument("--static", action="store_true", help="Generate a static body")

    p_pixel = sub.add_parser("pixel", help="Generate pixel data")
    p_pixel.add_argument("--id", type=int, required=True, help="bazadebezolkohpepadr identifier")
    p_pixel.add_argument("--hash", required=True, help="Pixel hash")

    p_cpt = sub.add_parser("sec-cpt", help="Generate sec-cpt answers")
    p_cpt.add_argument("--token", required=True)
    p_cpt.add_argument("--timestamp", type=int, required=True)
    p_cpt.add_argument("--nonce", required=True)
    p_cpt.add_argument("--difficulty", type=int, required=True)
    p_cpt.add_argument("--cookie", required=True)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        print(e, file=sys.stderr)
        return 2

    with ApiClient.from_settings(settings) as client:
        try:
            result = asyncio.run(run(client, args))
        except RooLinkError as e:
            print(e, file=sys.stderr)
            return 1

    if isinstance(result, str):
        print(result)
    else:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
