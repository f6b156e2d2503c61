from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from core.errors import ConfigError
from core.models import GeneratorConfig
from core.targets import (
    DEFAULT_CODEGEN_OPTION,
    DEFAULT_COMPILER,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PROTO_ROOT,
    DEFAULT_SUBPATHS,
    targets_from,
)
from .utils import as_bool, env_or, parse_list

SETTINGS_ENV = (
    "PROTOC",
    "PROTO_ROOT",
    "PROTOGEN_CODEGEN_OPTION",
    "PROTOGEN_OUTPUT_DIR",
    "PROTOGEN_CREATE_OUTPUT_DIR",
    "PROTOGEN_WELL_KNOWN_TYPES",
    "PROTOGEN_INCLUDE_PATHS",
    "PROTOGEN_TARGETS",
)
KNOWN_KEYS = {
    "compiler",
    "proto_root",
    "codegen_option",
    "output_dir",
    "create_output_dir",
    "include_well_known_types",
    "include_paths",
    "targets",
}


def _read_raw(config_path: Path | None) -> dict[str, Any]:
    if config_path is None or not config_path.exists():
        return {}
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigError(f"cannot read {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse {config_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")
    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"unknown settings in {config_path}: {', '.join(unknown)}")
    return raw


def output_dir_from_option(option: str) -> str | None:
    """``--go_out=plugins=grpc:vendor`` -> ``vendor``; None when the option names no ``--*_out`` tree."""
    flag, sep, value = option.partition("=")
    if not sep or not flag.startswith("--") or not flag.endswith("_out"):
        return None
    return value.rpartition(":")[2].strip() or None


def _same_dir(left: str, right: str) -> bool:
    return os.path.normpath(left) == os.path.normpath(right)


def _resolve_output(output_raw: Any, option_raw: Any) -> tuple[str, str]:
    output_dir = str(output_raw).strip() if output_raw is not None else ""
    if option_raw is None:
        output_dir = output_dir or DEFAULT_OUTPUT_DIR
        return output_dir, DEFAULT_CODEGEN_OPTION.replace(f":{DEFAULT_OUTPUT_DIR}", f":{output_dir}")

    option = str(option_raw).strip()
    option_dir = output_dir_from_option(option)
    if output_dir and option_dir and not _same_dir(output_dir, option_dir):
        raise ConfigError(f"output_dir {output_dir!r} does not match codegen_option {option!r}")
    return output_dir or option_dir or DEFAULT_OUTPUT_DIR, option


def load_settings(config_path: Path | None = None) -> GeneratorConfig:
    raw = _read_raw(config_path)

    output_dir, codegen_option = _resolve_output(
        env_or("PROTOGEN_OUTPUT_DIR", raw.get("output_dir")),
        env_or("PROTOGEN_CODEGEN_OPTION", raw.get("codegen_option")),
    )

    config = GeneratorConfig(
        compiler=str(env_or("PROTOC", raw.get("compiler", DEFAULT_COMPILER))).strip(),
        proto_root=str(env_or("PROTO_ROOT", raw.get("proto_root", DEFAULT_PROTO_ROOT))).strip().rstrip("/"),
        codegen_option=codegen_option,
        output_dir=output_dir,
        targets=targets_from(parse_list(env_or("PROTOGEN_TARGETS", raw.get("targets", list(DEFAULT_SUBPATHS))))),
        include_paths=parse_list(env_or("PROTOGEN_INCLUDE_PATHS", raw.get("include_paths", []))),
        include_well_known_types=as_bool(
            env_or("PROTOGEN_WELL_KNOWN_TYPES", raw.get("include_well_known_types", False))
        ),
        create_output_dir=as_bool(env_or("PROTOGEN_CREATE_OUTPUT_DIR", raw.get("create_output_dir", True))),
    )

    required = {
        "compiler": config.compiler,
        "proto_root": config.proto_root,
        "codegen_option": config.codegen_option,
        "output_dir": config.output_dir,
    }
    missing = [key for key, value in required.items() if not value]
    if missing:
        raise ConfigError(f"missing required settings: {', '.join(missing)}")
    if not config.targets:
        raise ConfigError("no proto targets configured")
    return config
