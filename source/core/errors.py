from __future__ import annotations

import shlex


class ConfigError(ValueError):
    pass


class ExternalToolError(RuntimeError):
    def __init__(self, argv: list[str], returncode: int, detail: str = ""):
        self.argv = list(argv)
        self.returncode = int(returncode)
        self.detail = detail
        message = f"command exited with status {self.returncode}: {shlex.join(self.argv)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    @property
    def exit_code(self) -> int:
        # Signal deaths come back negative from subprocess.
        return self.returncode if self.returncode > 0 else 1
