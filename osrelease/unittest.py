import contextlib
import io
import logging
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path

from osrelease.cli import FAIL_EXCEPTIONS

POP_OS = """NAME="Pop!_OS"
VERSION="18.04 LTS"
ID=ubuntu
ID_LIKE=debian
PRETTY_NAME="Pop!_OS 18.04 LTS"
VERSION_ID="18.04"
HOME_URL="https://system76.com/pop"
SUPPORT_URL="http://support.system76.com"
BUG_REPORT_URL="https://github.com/pop-os/pop/issues"
PRIVACY_POLICY_URL="https://system76.com/privacy"
VERSION_CODENAME=bionic
EXTRA_KEY=thing
ANOTHER_KEY=\""""


class TestCase(unittest.TestCase):
    """TestCase extended with osrelease-info specific helpers."""

    def tempdir(self) -> Path:
        """Create a temporary directory."""
        return Path(self.enterContext(tempfile.TemporaryDirectory()))

    def write_file(self, contents: str | bytes, name: str = "os-release") -> Path:
        """Write contents to a file in a new temporary directory."""
        path = self.tempdir() / name
        if isinstance(contents, str):
            path.write_text(contents)
        else:
            path.write_bytes(contents)
        return path

    def assertNoStderr(self, res: subprocess.CompletedProcess[str]) -> None:
        self.assertEqual(res.stderr, "")

    def call(self, *args: str) -> subprocess.CompletedProcess[str]:
        """
        Run osrelease-info with the given command line, capturing its output.

        args[0] is the program name. Logging handlers installed by the
        command are removed afterwards.
        """
        from osrelease.__main__ import main

        orig_argv = sys.argv
        orig_handlers = logging.root.handlers[:]
        orig_level = logging.root.level
        sys.argv = list(args)
        stdout = io.StringIO()
        stderr = io.StringIO()
        returnvalue: int | None = None
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
            try:
                returnvalue = main() or 0
            except tuple(FAIL_EXCEPTIONS) as e:
                print(e, file=sys.stderr)
                returnvalue = 1
            except SystemExit as e:
                # argparse exits on invalid command lines and on --help
                if e.code is None or isinstance(e.code, int):
                    returnvalue = e.code or 0
                else:
                    print(e.code, file=sys.stderr)
                    returnvalue = 1
            finally:
                sys.argv = orig_argv
                logging.root.handlers[:] = orig_handlers
                logging.root.setLevel(orig_level)

        return subprocess.CompletedProcess(args, returnvalue, stdout.getvalue(), stderr.getvalue())
