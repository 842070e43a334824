"""
Command line entry point.

Builds the in-memory model from configuration and runs either a single command
or an interactive shell that reads one command per line.
"""

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from address_book.constants import DEFAULT_PROMPT
from address_book.core.common.exceptions import (
    AddressBookError,
    CommandError,
    ConfigurationError,
    ParseError,
)
from address_book.core.common.logging_utils import configure_logging, get_logger
from address_book.core.config.app_config import AppConfig, LogLevel, load_config
from address_book.core.domain.address_book import AddressBook
from address_book.core.services.command_service import CommandService
from address_book.core.services.model_manager import ModelManager
from address_book.core.services.sample_data import (
    get_sample_address_book,
    load_seed_file,
)

logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="address-book", description="Manage contacts and their notes"
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        metavar="PATH",
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        type=str.upper,
        help="Override the configured log level",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Also write logs to PATH")
    parser.add_argument(
        "--seed",
        dest="seed_file",
        metavar="PATH",
        help="YAML file with the persons to start with",
    )
    parser.add_argument(
        "--no-sample-data",
        dest="sample_data",
        action="store_false",
        default=None,
        help="Start with an empty address book when no seed file is given",
    )
    parser.add_argument(
        "-c",
        "--command",
        metavar="LINE",
        help="Run a single command and exit",
    )
    return parser


def apply_cli_args(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of ``config`` with command line overrides applied."""
    logging_updates: dict[str, object] = {}
    if args.log_level:
        logging_updates["level"] = LogLevel(args.log_level)
    if args.log_file:
        logging_updates["log_file"] = args.log_file

    updates: dict[str, object] = {}
    if logging_updates:
        updates["logging"] = config.logging.model_copy(update=logging_updates)
    if args.seed_file:
        updates["seed_file"] = args.seed_file
    if args.sample_data is not None:
        updates["sample_data"] = args.sample_data
    return config.model_copy(update=updates)


def build_address_book(config: AppConfig) -> AddressBook:
    if config.seed_file:
        return load_seed_file(config.seed_file)
    if config.sample_data:
        return get_sample_address_book()
    return AddressBook()


def _report_error(error: AddressBookError, out: TextIO) -> None:
    """Show a rejected command to the user and log its structured form."""
    get_logger(__name__).info("command_rejected", **error.to_dict())
    print(f"Error: {error.message}", file=out)


async def run_once(service: CommandService, line: str, out: TextIO) -> int:
    """Execute one command, print its outcome and return an exit status."""
    try:
        result = await service.execute(line)
    except (ParseError, CommandError) as e:
        _report_error(e, out)
        return 1
    print(result.message, file=out)
    return 0


async def run_shell(
    service: CommandService,
    stdin: TextIO,
    out: TextIO,
    prompt: str = DEFAULT_PROMPT,
) -> None:
    """Read commands line by line until ``exit`` or end of input."""
    interactive = stdin.isatty()
    while True:
        if interactive:
            print(prompt, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue
        try:
            result = await service.execute(line)
        except (ParseError, CommandError) as e:
            _report_error(e, out)
            continue
        print(result.message, file=out)
        if result.exit:
            break


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    args = build_cli_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        config = apply_cli_args(load_config(args.config_file), args)
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2

    configure_logging(config.logging.level.value, config.logging.log_file)
    log = get_logger(__name__)

    try:
        address_book = build_address_book(config)
    except AddressBookError as e:
        log.error("Failed to build address book", error=e.message)
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 2

    log.info("Address book ready", persons=len(address_book))
    service = CommandService(ModelManager(address_book))

    if args.command is not None:
        return asyncio.run(run_once(service, args.command, stdout))

    asyncio.run(run_shell(service, stdin, stdout))
    return 0


if __name__ == "__main__":
    sys.exit(main())
