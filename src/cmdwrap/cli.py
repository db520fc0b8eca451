"""Command-line interface for cmdwrap."""

import argparse
import json
import logging
import subprocess
import sys

from cmdwrap import __version__
from cmdwrap.config import load_config
from cmdwrap.errors import ConfigError, InvalidArgumentError
from cmdwrap.models import WindowStyle
from cmdwrap.popen import popen_kwargs, start_info_summary

log = logging.getLogger("cmdwrap")


def _env_pair(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {value!r}")
    return key, val


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cmdwrap",
        description="Resolve a launch configuration for a command, and optionally run it",
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Config file to load (default: $CMDWRAP_CONFIG or ~/.cmdwrap/config.toml)",
    )
    parser.add_argument(
        "-p", "--path",
        help="Directory joined in front of the executable name",
    )
    parser.add_argument(
        "-w", "--working-directory",
        metavar="DIR",
        help="Working directory for the process",
    )
    parser.add_argument(
        "-e", "--env",
        action="append",
        type=_env_pair,
        default=[],
        metavar="KEY=VALUE",
        help="Set an environment variable for the process (repeatable)",
    )
    parser.add_argument(
        "-u", "--user",
        dest="user_name",
        help="User to run the process as",
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Redirect standard input of the process",
    )
    parser.add_argument(
        "--no-window",
        action="store_true",
        help="Do not create a console window (Windows)",
    )
    parser.add_argument(
        "--window-style",
        choices=[style.value for style in WindowStyle],
        help="Window style for the process (Windows)",
    )
    parser.add_argument(
        "--run",
        action="store_true",
        help="Run the command instead of printing the resolved launch",
    )
    parser.add_argument("file", help="Executable name or path")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Arguments for the executable")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.path is not None:
            config.path = args.path
        if args.working_directory is not None:
            config.working_directory = args.working_directory
        if args.user_name is not None:
            config.user_name = args.user_name
        if args.stdin:
            config.redirect_standard_input = True
        if args.no_window:
            config.create_no_window = True
        if args.window_style is not None:
            config.window_style = WindowStyle(args.window_style)
        for key, value in args.env:
            config.environment_variables[key] = value

        start_info = config.to_start_info(args.file)
        start_info.arguments.extend(args.args)

        if not args.run:
            print(json.dumps(start_info_summary(start_info), indent=2))
            return 0

        log.debug("running %s", start_info.file_name)
        result = subprocess.run(**popen_kwargs(start_info))
    except (ConfigError, InvalidArgumentError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return result.returncode


def entrypoint() -> None:
    raise SystemExit(main())
