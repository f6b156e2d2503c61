from __future__ import annotations

from pathlib import Path
from typing import Protocol


class CommandRunner(Protocol):
    def run(self, argv: list[str], *, cwd: Path) -> None: ...
