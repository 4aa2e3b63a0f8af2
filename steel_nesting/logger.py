# steel_nesting/logger.py
# Lightweight logging for the nesting engine.
# Off by default so embedding the engine stays silent; the CLI turns it on with --verbose.
# Skipped lines and stock lengths are reported on NestingResult.warnings, not counted here.

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass
class Logger:
    enabled: bool = False
    prefix: str = "[NEST]"

    def info(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} {msg}", file=sys.stdout)

    def warn(self, msg: str) -> None:
        if self.enabled:
            print(f"{self.prefix} WARNING: {msg}", file=sys.stderr)

    def error(self, msg: str) -> None:
        print(f"{self.prefix} ERROR: {msg}", file=sys.stderr)


LOGGER = Logger()


def set_enabled(flag: bool) -> None:
    LOGGER.enabled = bool(flag)


def get_logger() -> Logger:
    return LOGGER
