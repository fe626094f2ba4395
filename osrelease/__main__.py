from __future__ import annotations

import argparse
from pathlib import Path

from .cli import MAIN_COMMANDS, run_main


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="osrelease-info", description="Read os-release information")
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    parser.add_argument("--debug", action="store_true", help="debug output")
    parser.add_argument(
        "-C",
        "--config",
        action="store",
        type=Path,
        help="path to the configuration file to use. By default, look in"
        " ~/.config/osrelease-info/osrelease-info.yaml and /etc/osrelease-info.yaml",
    )

    subparsers = parser.add_subparsers(help="sub-command help", dest="command", required=True)
    for command in MAIN_COMMANDS:
        command.make_subparser(subparsers)

    return parser


def main() -> int | None:
    parser = make_parser()
    args = parser.parse_args()
    handler = args.handler(args)
    return handler.run()


def run() -> None:
    run_main(main)


if __name__ == "__main__":
    run()
