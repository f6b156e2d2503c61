from __future__ import annotations

import logging
from pathlib import Path

from core.contracts import CommandRunner
from core.errors import ExternalToolError
from core.models import GeneratorConfig, Invocation, RunResult
from infra.toolchain import compiler_command, well_known_types_include
from infra.utils import expand_glob

LOG = logging.getLogger("tfserving-protogen")


def build_invocations(config: GeneratorConfig) -> list[Invocation]:
    compiler = compiler_command(config.compiler)
    include_paths = [config.proto_root, *config.include_paths]
    if config.include_well_known_types:
        include_paths.append(well_known_types_include())
    return [
        Invocation(
            compiler=compiler,
            include_paths=include_paths,
            codegen_option=config.codegen_option,
            source_glob=target.source_glob(config.proto_root),
        )
        for target in config.targets
    ]


class ProtoGenerator:
    """
    Runs one compiler invocation per configured proto directory, in order.

    Relative paths resolve against ``base_dir``, which is handed to every
    child process as its working directory; the caller's cwd is never changed.
    The first failing invocation raises ``ExternalToolError`` and nothing
    after it is issued.
    """

    def __init__(
        self,
        *,
        config: GeneratorConfig,
        base_dir: Path,
        runner: CommandRunner,
        prepare_output: bool = True,
    ):
        self.config = config
        self.base_dir = Path(base_dir).resolve()
        self.runner = runner
        self.prepare_output = prepare_output

    def invocations(self) -> list[Invocation]:
        return build_invocations(self.config)

    def _prepare_output_dir(self) -> None:
        if not (self.prepare_output and self.config.create_output_dir):
            return
        out_dir = self.base_dir / self.config.output_dir
        if not out_dir.is_dir():
            LOG.info("Creating output directory %s", out_dir)
            out_dir.mkdir(parents=True, exist_ok=True)

    def generate(self) -> RunResult:
        self._prepare_output_dir()
        issued: list[Invocation] = []
        commands: list[list[str]] = []
        for invocation in self.invocations():
            argv = invocation.argv(expand_glob(self.base_dir, invocation.source_glob))
            issued.append(invocation)
            commands.append(argv)
            try:
                self.runner.run(argv, cwd=self.base_dir)
            except ExternalToolError as exc:
                LOG.error(
                    "Compiler failed for %s after %s/%s invocations: %s",
                    invocation.source_glob,
                    len(issued),
                    len(self.config.targets),
                    exc,
                )
                raise
        LOG.info("Generated bindings for %s proto directories into %s", len(issued), self.config.output_dir)
        return RunResult(invocations=issued, commands=commands)


def generate(config: GeneratorConfig, *, base_dir: Path, runner: CommandRunner) -> RunResult:
    return ProtoGenerator(config=config, base_dir=base_dir, runner=runner).generate()
