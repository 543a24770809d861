"""Command-line interface for the StudentVue MCP server."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from dotenv import load_dotenv

from .client import StudentVueClient
from .config import StudentVueConfig
from .server import run_stdio
from .tools import ToolDispatcher, get_all_tool_schemas

LOGGER = logging.getLogger("studentvue_mcp.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="StudentVue MCP server")
    parser.add_argument("--log-level", default="INFO", help="Logging level (stderr)")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("serve", help="Serve the tool catalogue over MCP stdio (default)")
    subparsers.add_parser("list-tools", help="Print the tool catalogue")

    call_parser = subparsers.add_parser("call", help="Invoke one tool and print its result")
    call_parser.add_argument("tool", help="Tool name, e.g. get_gradebook")
    call_parser.add_argument(
        "--arg",
        dest="args",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Tool argument; VALUE is parsed as JSON when possible (repeatable)",
    )

    return parser


def parse_tool_args(pairs: list[str]) -> dict:
    """Turn KEY=VALUE strings into an argument mapping."""
    arguments: dict = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        try:
            arguments[key] = json.loads(raw)
        except json.JSONDecodeError:
            arguments[key] = raw
    return arguments


def build_dispatcher(config: Optional[StudentVueConfig]) -> ToolDispatcher:
    client = StudentVueClient(config) if config is not None else None
    return ToolDispatcher(client)


def list_tools() -> None:
    for schema in get_all_tool_schemas():
        print(f"{schema['name']}: {schema['description']}")


def call(dispatcher: ToolDispatcher, tool: str, pairs: list[str]) -> int:
    result = dispatcher.dispatch(tool, parse_tool_args(pairs))
    print(result.text)
    return 0 if result.success else 1


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    if args.command == "list-tools":
        list_tools()
        return

    try:
        load_dotenv()
        dispatcher = build_dispatcher(StudentVueConfig.from_env())
        if args.command == "call":
            try:
                status = call(dispatcher, args.tool, args.args)
            except ValueError as exc:
                parser.error(str(exc))
            sys.exit(status)
        else:
            if not dispatcher.is_configured:
                LOGGER.warning(
                    "Starting without credentials; every tool call will report a configuration error"
                )
            asyncio.run(run_stdio(dispatcher))
    except KeyboardInterrupt:
        LOGGER.info("Interrupted")
    except Exception:
        LOGGER.exception("Fatal error")
        sys.exit(1)


if __name__ == "__main__":
    main()
