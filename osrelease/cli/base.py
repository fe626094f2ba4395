from __future__ import annotations

import argparse
import inspect
import logging
import sys
from typing import Any, Never, Callable

try:
    import coloredlogs

    HAS_COLOREDLOGS = True
except ModuleNotFoundError:
    HAS_COLOREDLOGS = False

from ..exceptions import Fail

LOG_FORMAT = "%(asctime)-15s %(levelname)s %(name)s %(message)s"

FAIL_EXCEPTIONS: list[type[BaseException]] = [Fail]


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Send log messages to stderr, colored if coloredlogs is available
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARN

    if HAS_COLOREDLOGS:
        coloredlogs.install(level=level, fmt=LOG_FORMAT, stream=sys.stderr)
    else:
        logging.basicConfig(level=level, stream=sys.stderr, format=LOG_FORMAT, force=True)


class Command:
    """
    Base class for actions run from command line.

    The first line of the docstring is used as help for the subcommand, the
    rest as its description.
    """

    NAME: str | None = None

    def __init__(self, args: argparse.Namespace) -> None:
        if self.NAME is None:
            self.NAME = self.__class__.__name__.lower()
        self.args = args
        setup_logging(verbose=args.verbose, debug=args.debug)

    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        if cls.NAME is None:
            cls.NAME = cls.__name__.lower()
        doc = inspect.getdoc(cls) or ""
        summary, _, description = doc.partition("\n")
        parser: argparse.ArgumentParser = subparsers.add_parser(
            cls.NAME,
            help=summary or None,
            description=description.strip() or summary or None,
        )
        parser.set_defaults(handler=cls)
        return parser

    def run(self) -> int | None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")


def run_main(func: Callable[[], int | None]) -> Never:
    try:
        sys.exit(func())
    except tuple(FAIL_EXCEPTIONS) as e:
        print(e, file=sys.stderr)
        sys.exit(1)
