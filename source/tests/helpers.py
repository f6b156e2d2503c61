from __future__ import annotations

import os
import sys
from pathlib import Path
from unittest.mock import patch


def _resolve_source_dir() -> Path:
    for parent in Path(__file__).resolve().parents:
        if (parent / "core" / "models.py").exists():
            return parent
        if (parent / "source" / "core" / "models.py").exists():
            return parent / "source"
    raise RuntimeError("could not locate source directory")


def bootstrap_tests() -> None:
    source_dir = _resolve_source_dir()
    if str(source_dir) not in sys.path:
        sys.path.insert(0, str(source_dir))


def clean_env(**overrides: str):
    """Patch os.environ so only ``overrides`` of the settings variables are visible."""
    from infra.settings import SETTINGS_ENV

    env = {key: value for key, value in os.environ.items() if key not in SETTINGS_ENV and key != "PROTOGEN_CONFIG"}
    env.update(overrides)
    return patch.dict(os.environ, env, clear=True)


def make_config(**overrides):
    from core.models import GeneratorConfig
    from core.targets import default_targets

    values = dict(
        compiler="protoc",
        proto_root="proto_files",
        codegen_option="--go_out=plugins=grpc:vendor",
        output_dir="vendor",
        targets=default_targets(),
        include_paths=[],
        include_well_known_types=False,
        create_output_dir=False,
    )
    values.update(overrides)
    return GeneratorConfig(**values)


def write_protos(base_dir: Path, subpath: str, *names: str) -> None:
    directory = base_dir / "proto_files" / subpath
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_text('syntax = "proto3";\n', encoding="utf-8")


class RecordingRunner:
    def __init__(self, fail_at: int | None = None, returncode: int = 1):
        self.fail_at = fail_at
        self.returncode = returncode
        self.calls: list[tuple[list[str], Path]] = []

    def run(self, argv: list[str], *, cwd: Path) -> None:
        from core.errors import ExternalToolError

        self.calls.append((list(argv), cwd))
        if self.fail_at is not None and len(self.calls) == self.fail_at:
            raise ExternalToolError(argv, self.returncode)
