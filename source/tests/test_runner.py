from __future__ import annotations

import subprocess
import unittest
from pathlib import Path
from unittest.mock import patch

from helpers import bootstrap_tests

bootstrap_tests()

from core.errors import ExternalToolError  # noqa: E402
from infra.runner import COMMAND_NOT_FOUND, PretendRunner, SubprocessRunner  # noqa: E402

ARGV = ["protoc", "-I", "proto_files", "--go_out=plugins=grpc:vendor", "proto_files/tensorflow_serving/apis/*.proto"]


class SubprocessRunnerTests(unittest.TestCase):
    def test_runs_argument_vector_in_base_dir(self):
        with patch("infra.runner.subprocess.run", return_value=subprocess.CompletedProcess(ARGV, 0)) as run:
            SubprocessRunner().run(ARGV, cwd=Path("/srv/protos"))

        run.assert_called_once_with(ARGV, cwd="/srv/protos", check=False)

    def test_non_zero_exit_raises(self):
        with patch("infra.runner.subprocess.run", return_value=subprocess.CompletedProcess(ARGV, 3)):
            with self.assertRaises(ExternalToolError) as ctx:
                SubprocessRunner().run(ARGV, cwd=Path("/srv/protos"))

        self.assertEqual(ctx.exception.returncode, 3)
        self.assertEqual(ctx.exception.exit_code, 3)
        self.assertEqual(ctx.exception.argv, ARGV)

    def test_missing_executable_raises(self):
        with patch("infra.runner.subprocess.run", side_effect=FileNotFoundError(2, "No such file", "protoc")):
            with self.assertRaises(ExternalToolError) as ctx:
                SubprocessRunner().run(ARGV, cwd=Path("/srv/protos"))

        self.assertEqual(ctx.exception.returncode, COMMAND_NOT_FOUND)
        self.assertIn("executable not found: protoc", str(ctx.exception))

    def test_signal_exit_maps_to_failure_code(self):
        self.assertEqual(ExternalToolError(ARGV, -9).exit_code, 1)


class PretendRunnerTests(unittest.TestCase):
    def test_records_without_spawning(self):
        runner = PretendRunner()
        with patch("infra.runner.subprocess.run") as run:
            runner.run(ARGV, cwd=Path("/srv/protos"))

        run.assert_not_called()
        self.assertEqual(runner.commands, [ARGV])


if __name__ == "__main__":
    unittest.main()
