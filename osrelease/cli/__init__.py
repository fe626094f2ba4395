from __future__ import annotations

# Import so they can be registered in MAIN_COMMANDS
from . import query  # noqa
from .base import FAIL_EXCEPTIONS, run_main
from .osrelease import MAIN_COMMANDS

__all__ = ["run_main", "MAIN_COMMANDS", "FAIL_EXCEPTIONS"]
