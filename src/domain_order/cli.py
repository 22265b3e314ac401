"""
Command-line interface for the domain order adapter.

This module provides the ``domain-order`` entry point with commands for:
- expand: Show the registrar order built from a resource configuration
- flatten: Show the resource state built from a registrar domain record
- create: Order a domain and print its state
- read: Read a domain by resource ID and print its state
- config: Configuration management
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .audit_logger import AuditLogger
from .config import (
    DEFAULT_CONFIG_PATH,
    SystemConfig,
    create_default_config,
    load_config_from_env,
    load_config_from_file,
    save_config_to_file,
)
from .exceptions import DomainOrderError
from .expand import expand_buy_domains_request
from .flatten import flatten_domain
from .registrar_client import RegistrarClient
from .resource import OrderDomainResource, ResourceState
from .validation import ResourceDiff, validate_owner_contact
from .wire import decode_domain, encode_buy_domains_request


def _read_json_file(path: Path) -> Optional[dict]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error reading {path}: {e}", file=sys.stderr)
        return None

    if not isinstance(data, dict):
        print(f"Error reading {path}: expected a JSON object", file=sys.stderr)
        return None
    return data


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True))


def _load_system_config(args: argparse.Namespace) -> Optional[SystemConfig]:
    """Load the config file if given, then apply environment overrides."""
    base = None
    if args.config:
        base = load_config_from_file(Path(args.config))
        if base is None:
            print(f"Error: Could not load config from {args.config}", file=sys.stderr)
            return None
    return load_config_from_env(base=base)


def cmd_expand(args: argparse.Namespace) -> int:
    """Handle the 'expand' command."""
    config = _read_json_file(Path(args.file))
    if config is None:
        return 1

    try:
        validate_owner_contact(ResourceDiff.for_create(config))
    except DomainOrderError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    _print_json(encode_buy_domains_request(expand_buy_domains_request(config)))
    return 0


def cmd_flatten(args: argparse.Namespace) -> int:
    """Handle the 'flatten' command."""
    record = _read_json_file(Path(args.file))
    if record is None:
        return 1

    _print_json(flatten_domain(decode_domain(record)))
    return 0


async def _run_resource(system_config: SystemConfig, action, *action_args) -> ResourceState:
    logger = AuditLogger.from_config(system_config.logging)
    async with RegistrarClient(system_config.registrar, logger=logger) as client:
        resource = OrderDomainResource(
            client,
            default_project_id=system_config.registrar.default_project_id,
            logger=logger,
        )
        return await getattr(resource, action)(*action_args)


def _print_state(state: ResourceState) -> None:
    _print_json({"id": state.id, "attributes": state.attributes})


def cmd_create(args: argparse.Namespace) -> int:
    """Handle the 'create' command."""
    system_config = _load_system_config(args)
    if system_config is None:
        return 1

    config = _read_json_file(Path(args.file))
    if config is None:
        return 1

    try:
        state = asyncio.run(_run_resource(system_config, "create", config))
    except DomainOrderError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    _print_state(state)
    return 0


def cmd_read(args: argparse.Namespace) -> int:
    """Handle the 'read' command."""
    system_config = _load_system_config(args)
    if system_config is None:
        return 1

    try:
        state = asyncio.run(_run_resource(system_config, "read", args.id))
    except DomainOrderError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    _print_state(state)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Handle the 'config' command."""
    config_path = Path(args.path) if args.path else DEFAULT_CONFIG_PATH

    if args.action == "show":
        config = load_config_from_file(config_path)
        if config is None:
            print(f"No configuration found at: {config_path}")
            print("Use 'config init' to create a default configuration.")
            return 1

        print(f"Configuration from: {config_path}")
        print(f"  API URL: {config.registrar.api_url}")
        print(f"  Default project: {config.registrar.default_project_id or '-'}")
        print(f"  Timeout: {config.registrar.timeout_seconds}s")
        print(f"  Log level: {config.logging.level}")
        print(f"  Log format: {config.logging.output_format}")
        return 0

    elif args.action == "init":
        if config_path.exists() and not args.force:
            print(f"Configuration already exists at: {config_path}")
            print("Use --force to overwrite.")
            return 1

        config = create_default_config(default_project_id=args.project_id or "")
        if save_config_to_file(config, config_path):
            print(f"Configuration created at: {config_path}")
            return 0
        return 1

    elif args.action == "validate":
        config = load_config_from_file(config_path)
        if config is None:
            print(f"Error: Could not load config from {config_path}", file=sys.stderr)
            return 1

        print(f"Configuration at {config_path} is valid.")
        return 0

    return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="domain-order",
        description="Order registrar domains and map them to declarative state",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'expand' command
    expand_parser = subparsers.add_parser(
        "expand",
        help="Print the registrar order built from a resource configuration",
    )
    expand_parser.add_argument(
        "file",
        help="Path to a JSON resource configuration",
    )
    expand_parser.set_defaults(func=cmd_expand)

    # 'flatten' command
    flatten_parser = subparsers.add_parser(
        "flatten",
        help="Print the resource state built from a registrar domain record",
    )
    flatten_parser.add_argument(
        "file",
        help="Path to a JSON domain record",
    )
    flatten_parser.set_defaults(func=cmd_flatten)

    # 'create' command
    create_cmd_parser = subparsers.add_parser(
        "create",
        help="Order a domain and print its state",
    )
    create_cmd_parser.add_argument(
        "file",
        help="Path to a JSON resource configuration",
    )
    create_cmd_parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
    )
    create_cmd_parser.set_defaults(func=cmd_create)

    # 'read' command
    read_parser = subparsers.add_parser(
        "read",
        help="Read a domain by resource ID (project_id/domain_name)",
    )
    read_parser.add_argument(
        "id",
        help="Resource ID",
    )
    read_parser.add_argument(
        "--config", "-c",
        help="Path to configuration file",
    )
    read_parser.set_defaults(func=cmd_read)

    # 'config' command
    config_parser = subparsers.add_parser(
        "config",
        help="Configuration management",
    )
    config_parser.add_argument(
        "action",
        choices=["show", "init", "validate"],
        help="Configuration action",
    )
    config_parser.add_argument(
        "--path", "-p",
        help="Path to configuration file",
    )
    config_parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Force overwrite existing configuration",
    )
    config_parser.add_argument(
        "--project-id",
        help="Default project ID for new configuration",
    )
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
