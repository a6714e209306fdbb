"""CLI entry point for the CWA weather proxy."""

import argparse
import asyncio
import json
import logging

from dotenv import load_dotenv

from weatherproxy.config.loader import city_table, get_config_value, load_config
from weatherproxy.service.weather_service import build_weather_service

DEFAULT_CONFIG = "config.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherproxy",
        description="CWA weather forecast proxy",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path (optional)"
    )

    sub = parser.add_subparsers(dest="command")

    # serve
    serve_p = sub.add_parser("serve", help="Run the HTTP server")
    serve_p.add_argument("--host", help="Bind address (overrides config)")
    serve_p.add_argument("--port", type=int, help="Port (overrides config/PORT)")

    # weather
    weather_p = sub.add_parser("weather", help="Fetch one city and print the JSON envelope")
    weather_p.add_argument("city", nargs="?", help="City code, e.g. taipei")
    weather_p.add_argument(
        "--forecast-only", action="store_true", help="Skip sunrise/sunset times"
    )

    # cities
    sub.add_parser("cities", help="List known city codes")

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. server.port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        load_dotenv()

    config = load_config(args.config)

    if args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "cities":
        return _cmd_cities(config)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherproxy.api import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_weather(config, args) -> int:
    service = build_weather_service(config)
    city = args.city or config.default_city
    if args.forecast_only:
        envelope = asyncio.run(service.weather_only(city))
    else:
        envelope = asyncio.run(service.weather_with_sun(city))
    print(json.dumps(envelope.body, ensure_ascii=False, indent=2))
    return 0 if envelope.ok else 1


def _cmd_cities(config) -> int:
    for code, name in city_table(config).items():
        print(f"{code}: {name}")
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        print(f"{args.key} = {value}")
        return 0
    else:
        print("Use: config show | config get key")
        return 1
