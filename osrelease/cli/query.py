from __future__ import annotations

import argparse
import csv
import logging
import shutil
import sys
from collections.abc import Sequence
from typing import Any, NamedTuple, TextIO, override

try:
    from texttable import Texttable

    HAVE_TEXTTABLE = True
except ModuleNotFoundError:
    HAVE_TEXTTABLE = False

from ..exceptions import Fail
from .osrelease import OsReleaseCommand, main_command

log = logging.getLogger(__name__)


class RowOutput:
    def add_row(self, row: Sequence[Any]) -> None:
        raise NotImplementedError(f"{self.__class__}.add_row() not implemented")

    def flush(self) -> None:
        pass


class CSVOutput(RowOutput):
    def __init__(self, out: TextIO) -> None:
        self.writer = csv.writer(out)

    @override
    def add_row(self, row: Sequence[Any]) -> None:
        self.writer.writerow(row)


class TextColumn(NamedTuple):
    title: str
    dtype: str = "t"
    align: str = "l"


class TableOutput(RowOutput):
    def __init__(self, out: TextIO, *args: TextColumn) -> None:
        self.out = out
        self.table = Texttable(max_width=shutil.get_terminal_size()[0])
        self.table.set_deco(Texttable.HEADER)
        self.table.set_cols_dtype([a.dtype for a in args])
        self.table.set_cols_align([a.align for a in args])
        self.table.add_row([a.title for a in args])

    @override
    def add_row(self, row: Sequence[Any]) -> None:
        self.table.add_row(row)

    @override
    def flush(self) -> None:
        print(self.table.draw(), file=self.out)


@main_command
class Show(OsReleaseCommand):
    """
    Show the contents of an os-release file
    """

    @override
    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().make_subparser(subparsers)
        parser.add_argument("--csv", action="store_true", help="machine readable output in CSV format")
        return parser

    @override
    def run(self) -> None:
        info = self.load()

        output: RowOutput
        if self.args.csv or not HAVE_TEXTTABLE:
            output = CSVOutput(sys.stdout)
        else:
            output = TableOutput(sys.stdout, TextColumn("Key"), TextColumn("Value"))

        for key in self.config.fields:
            if (value := info.get(key)) is not None:
                output.add_row((key, value))

        if self.config.show_extra:
            for key, value in info.extra.items():
                if key not in self.config.fields:
                    output.add_row((key, value))

        output.flush()


@main_command
class Get(OsReleaseCommand):
    """
    Print the value of one os-release key
    """

    @override
    @classmethod
    def make_subparser(cls, subparsers: "argparse._SubParsersAction[Any]") -> argparse.ArgumentParser:
        parser = super().make_subparser(subparsers)
        parser.add_argument("key", help="os-release key name, like ID or VERSION_CODENAME")
        return parser

    @override
    def run(self) -> None:
        info = self.load()
        value = info.get(self.args.key)
        if value is None:
            raise Fail(f"{self.config.path}: {self.args.key} is not set")
        print(value)
