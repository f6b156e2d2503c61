from __future__ import annotations

from .models import ProtoTarget

DEFAULT_COMPILER = "protoc"
BUNDLED_COMPILER = "grpc_tools"
DEFAULT_PROTO_ROOT = "proto_files"
DEFAULT_OUTPUT_DIR = "vendor"
DEFAULT_CODEGEN_OPTION = f"--go_out=plugins=grpc:{DEFAULT_OUTPUT_DIR}"

TENSORFLOW_SUBPATHS = (
    "tensorflow/core/example",
    "tensorflow/core/framework",
    "tensorflow/core/lib/core",
    "tensorflow/core/protobuf",
)
SERVING_SUBPATHS = (
    "tensorflow_serving/apis",
    "tensorflow_serving/config",
    "tensorflow_serving/core",
    "tensorflow_serving/sources/storage_path",
    "tensorflow_serving/util",
)
DEFAULT_SUBPATHS = TENSORFLOW_SUBPATHS + SERVING_SUBPATHS


def normalize_subpath(raw: str) -> str:
    return str(raw or "").strip().strip("/")


def default_targets() -> list[ProtoTarget]:
    return [ProtoTarget(subpath=subpath) for subpath in DEFAULT_SUBPATHS]


def targets_from(subpaths: list[str]) -> list[ProtoTarget]:
    out: list[ProtoTarget] = []
    for raw in subpaths:
        subpath = normalize_subpath(raw)
        if subpath:
            out.append(ProtoTarget(subpath=subpath))
    return out
