import json
import logging
import os
from logging import Logger
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler

from nethermind.tron_decoder.client import DEFAULT_NODE_URL

root_logger = logging.getLogger("nethermind")
logger = root_logger.getChild("tron_decoder").getChild("cli")


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + value.hex()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: dict | list) -> str:
    """Serializes decoding results.  Bytes are rendered as 0x prefixed hex, and int keys as strings"""
    return json.dumps(value, default=_json_default, indent=2)


def cli_logger_config(instrument_logger: Logger, verbose: bool = False) -> Console:
    rich_console = Console(stderr=True)
    instrument_logger.handlers.clear()

    instrument_logger.addHandler(RichHandler(show_path=False, console=rich_console))
    instrument_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return rich_console


def load_abi(abi_file) -> list[dict[str, Any]]:
    """
    Loads ABI entries from an open JSON file.  Accepts a list of entries, or a contract object as returned
    by the node (``{"abi": {"entrys": [...]}}``)
    """
    abi_json = json.load(abi_file)
    if isinstance(abi_json, dict):
        abi_json = abi_json.get("abi", abi_json)
        if isinstance(abi_json, dict):
            abi_json = abi_json.get("entrys", [])

    if not isinstance(abi_json, list):
        raise click.BadParameter("ABI JSON must be a list of ABI entries")
    return abi_json


def group_options(*options):
    """Decorator to group multiple click options together"""

    def wrapper(function):
        for option in reversed(options):
            function = option(function)
        return function

    return wrapper


# -------------------------------------------------------
#    CLI Secrets, Connections, and Configurations
# -------------------------------------------------------
node_url_option = click.option(
    "--node-url",
    "node_url",
    default=os.environ.get("TRON_NODE_URL", DEFAULT_NODE_URL),
    show_default=True,
    help="Full node HTTP API url.  If not provided, will use the TRON_NODE_URL environment variable",
)
api_key_option = click.option(
    "--api-key",
    "api_key",
    default=os.environ.get("TRON_API_KEY"),
    help="TronGrid API key.  If not provided, will use the TRON_API_KEY environment variable",
)
verbose_option = click.option(
    "--verbose",
    "-v",
    "verbose",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
full_reason_option = click.option(
    "--full-reason",
    "full_reason",
    is_flag=True,
    default=False,
    help="Decode Error(string) revert data, instead of reading the last 32 bytes of the result",
)
