from __future__ import annotations

import sys
from pathlib import Path

import grpc_tools

from core.targets import BUNDLED_COMPILER


def compiler_command(compiler: str) -> list[str]:
    if compiler == BUNDLED_COMPILER:
        return [sys.executable, "-m", "grpc_tools.protoc"]
    return [compiler]


def well_known_types_include() -> str:
    return str(Path(grpc_tools.__file__).resolve().parent / "_proto")
