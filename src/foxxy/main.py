"""Entry point for the ``foxxy-env`` diagnostic CLI."""

import argparse
import json
import logging
import os
import sys
from typing import NoReturn

from .config import load_config
from .failure import exit_on_fatal
from .output import console, error_console, setup_logging, write_raw
from .process import run
from .remote import DEFAULT_REMOTE, get_remote_info


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        description="Inspect the config, git remote and subprocess adapters of foxxy",
        prog="foxxy-env",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr (default level comes from FOXXY_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(
        dest="command", help="Available commands", required=True
    )

    # --- config ---
    config_parser = subparsers.add_parser(
        "config", help="Print the parsed contents of a config file as JSON"
    )
    config_parser.add_argument(
        "name", help="Logical config name, e.g. 'foxxy' for foxxy.json / foxxy.toml"
    )
    config_parser.add_argument(
        "-d",
        "--directory",
        default=None,
        help="Directory to look in (default: current directory)",
    )

    # --- exec ---
    exec_parser = subparsers.add_parser(
        "exec", help="Run a command and echo its captured output"
    )
    exec_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not announce the command line before running it",
    )
    exec_parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat a non-zero exit status as a fatal error",
    )
    exec_parser.add_argument(
        "cmd", nargs="+", help="The command to run (use '--' before its flags)"
    )

    # --- remote ---
    remote_parser = subparsers.add_parser(
        "remote", help="Print the site, owner and repo of a git remote as JSON"
    )
    remote_parser.add_argument(
        "-C",
        "--directory",
        default=None,
        help="Directory inside the repository (default: current directory)",
    )
    remote_parser.add_argument(
        "-r",
        "--remote",
        default=DEFAULT_REMOTE,
        help=f"Name of the git remote (default: {DEFAULT_REMOTE})",
    )

    return parser


def handle_config_command(args: argparse.Namespace) -> NoReturn:
    """Handle the 'config' command."""
    directory = args.directory or os.getcwd()
    data = load_config(directory, args.name)
    console.print(json.dumps(data, indent=2, default=str))
    sys.exit(0)


def handle_exec_command(args: argparse.Namespace) -> NoReturn:
    """Handle the 'exec' command."""
    cmd = args.cmd[1:] if args.cmd[0] == "--" else args.cmd
    if not cmd:
        error_console.print("Error: exec needs a command to run")
        sys.exit(2)

    result = run(cmd, allow_failure=not args.strict, announce=not args.quiet)
    write_raw(result.stdout)
    write_raw(result.stderr, to_stderr=True)
    sys.exit(result.returncode)


def handle_remote_command(args: argparse.Namespace) -> NoReturn:
    """Handle the 'remote' command."""
    info = get_remote_info(args.directory, args.remote)
    payload = {
        "site": info.site,
        "owner": info.owner,
        "repo": info.repo,
        "web_url": info.web_url,
    }
    console.print(json.dumps(payload, indent=2))
    sys.exit(0)


_HANDLERS = {
    "config": handle_config_command,
    "exec": handle_exec_command,
    "remote": handle_remote_command,
}


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point for the foxxy-env CLI."""
    args = create_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else None)

    with exit_on_fatal():
        _HANDLERS[args.command](args)
    sys.exit(1)


if __name__ == "__main__":
    main()
