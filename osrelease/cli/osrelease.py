from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, override

from ..config import OsReleaseConfig, expand_path
from ..exceptions import Fail
from ..osrelease import ReleaseInfo, load_from_path
from .base import Command

log = logging.getLogger(__name__)


MAIN_COMMANDS: list[type[Command]] = []


def main_command(cls: type[Command]) -> type[Command]:
    """
    Decorator used to register a Command class as a main osrelease-info command
    """
    MAIN_COMMANDS.append(cls)
    return cls


class OsReleaseCommand(Command):
    """
    Base class for commands that read an os-release file
    """

    @override
    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().make_subparser(subparsers)
        parser.add_argument(
            "-p",
            "--path",
            action="store",
            type=Path,
            help="os-release file to read. Default: from configuration file, or /etc/os-release",
        )
        return parser

    def __init__(self, args: argparse.Namespace) -> None:
        super().__init__(args)
        self.config = OsReleaseConfig.load(self.args.config)
        if path := expand_path(self.args.path):
            self.config.path = path

    def load(self) -> ReleaseInfo:
        """
        Parse the configured os-release file
        """
        try:
            return load_from_path(self.config.path)
        except OSError as e:
            raise Fail(f"{self.config.path}: cannot read os-release file: {e.strerror or e}") from e
