#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from core.errors import ConfigError, ExternalToolError
from infra.runner import PretendRunner, SubprocessRunner
from infra.settings import load_settings
from services.generator import ProtoGenerator

LOG = logging.getLogger("tfserving-protogen")

DEFAULT_CONFIG_NAME = "protogen.yaml"


def default_base_dir() -> Path:
    for parent in Path(__file__).resolve().parents:
        if (parent / "pyproject.toml").exists() and (parent / "source").is_dir():
            return parent
    return Path.cwd()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="gen_pb", description="Generate TensorFlow Serving gRPC bindings with protoc")
    parser.add_argument("--config", default=os.getenv("PROTOGEN_CONFIG"))
    parser.add_argument("--base-dir", default=os.getenv("PROTOGEN_BASE_DIR"))
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"))
    parser.add_argument("--pretend", action="store_true", help="log the compiler commands without running them")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    base_dir = Path(args.base_dir).resolve() if args.base_dir else default_base_dir()
    config_path = Path(args.config) if args.config else base_dir / DEFAULT_CONFIG_NAME
    if args.config and not config_path.exists():
        raise SystemExit(f"missing config file: {config_path}")
    try:
        config = load_settings(config_path)
    except ConfigError as exc:
        raise SystemExit(f"Invalid settings: {exc}") from exc

    runner = PretendRunner() if args.pretend else SubprocessRunner()
    generator = ProtoGenerator(config=config, base_dir=base_dir, runner=runner, prepare_output=not args.pretend)
    LOG.info("Generating %s proto directories inside %s", len(config.targets), base_dir)
    try:
        generator.generate()
    except ExternalToolError as exc:
        return exc.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
