from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from core.errors import ExternalToolError

LOG = logging.getLogger("tfserving-protogen")

COMMAND_NOT_FOUND = 127


class SubprocessRunner:
    def run(self, argv: list[str], *, cwd: Path) -> None:
        LOG.info("run %s from %s", shlex.join(argv), cwd)
        try:
            proc = subprocess.run(argv, cwd=str(cwd), check=False)
        except FileNotFoundError as exc:
            raise ExternalToolError(argv, COMMAND_NOT_FOUND, f"executable not found: {argv[0]}") from exc
        except OSError as exc:
            raise ExternalToolError(argv, 1, str(exc)) from exc
        if proc.returncode != 0:
            raise ExternalToolError(argv, proc.returncode)


class PretendRunner:
    def __init__(self) -> None:
        self.commands: list[list[str]] = []

    def run(self, argv: list[str], *, cwd: Path) -> None:
        self.commands.append(list(argv))
        LOG.info("pretend %s from %s", shlex.join(argv), cwd)
