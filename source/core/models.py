from __future__ import annotations

import shlex
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProtoTarget:
    subpath: str

    def source_glob(self, proto_root: str) -> str:
        return f"{proto_root.rstrip('/')}/{self.subpath}/*.proto"


@dataclass(frozen=True)
class GeneratorConfig:
    compiler: str
    proto_root: str
    codegen_option: str
    output_dir: str
    targets: list[ProtoTarget]
    include_paths: list[str] = field(default_factory=list)
    include_well_known_types: bool = False
    create_output_dir: bool = True


@dataclass(frozen=True)
class Invocation:
    """One compiler call: ``<compiler> -I <include>... <codegen_option> <sources>``."""

    compiler: list[str]
    include_paths: list[str]
    codegen_option: str
    source_glob: str

    def argv(self, sources: list[str] | None = None) -> list[str]:
        out = list(self.compiler)
        for include in self.include_paths:
            out.extend(["-I", include])
        out.append(self.codegen_option)
        out.extend(sources if sources else [self.source_glob])
        return out

    def command_line(self) -> str:
        return shlex.join(self.argv())


@dataclass(frozen=True)
class RunResult:
    invocations: list[Invocation]
    commands: list[list[str]] = field(default_factory=list)
