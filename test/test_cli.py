"""CLI tests using click's CliRunner in an isolated working directory."""

import json
import sys
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DocQuery.cli import cli
from DocQuery.utils.log import log


_CONFIG_YAML = """
log:
  level: INFO
  to_file: false
  dir: log

query:
  language: jmespath
  data: users.json
  spec:
    filter:
      path: [user, age]
      relation: "<="
      value: "7"
    sort:
      path: [user, name]
      direction: asc
    projection:
      paths:
        - [user, name]

output:
  base_dir: out
  formats: [json]
"""

_USERS = [
    {"_id": "1", "user": {"name": "Stuart", "age": 6}},
    {"_id": "3", "user": {"name": "Kevin", "age": 8}},
    {"_id": "2", "user": {"name": "Bob", "age": 7}},
]


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def tearDown(self) -> None:
        # Handlers point at CliRunner's captured streams.
        log.handlers.clear()

    def _write_inputs(self) -> None:
        Path("config.yml").write_text(_CONFIG_YAML, encoding="utf-8")
        Path("users.json").write_text(json.dumps(_USERS), encoding="utf-8")

    def test_compile_prints_query(self) -> None:
        with self.runner.isolated_filesystem():
            self._write_inputs()
            result = self.runner.invoke(cli, ["--config", "config.yml", "compile"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn(
            "[? user.age <= `7`] | sort_by(@, &user.name) | [*].user.name",
            result.output.splitlines(),
        )

    def test_run_writes_json_result(self) -> None:
        with self.runner.isolated_filesystem():
            self._write_inputs()
            result = self.runner.invoke(cli, ["--config", "config.yml", "run"])
            self.assertEqual(result.exit_code, 0, result.output)

            files = sorted(Path("out/json").glob("run_*.json"))
            self.assertEqual(len(files), 1)
            payload = json.loads(files[0].read_text(encoding="utf-8"))
            # The input file is left untouched.
            users = json.loads(Path("users.json").read_text(encoding="utf-8"))

        self.assertEqual(payload[0]["result"], ["Bob", "Stuart"])
        self.assertEqual(payload[0]["data"], "users.json")
        self.assertEqual(users, _USERS)

    def test_run_with_raw_query(self) -> None:
        with self.runner.isolated_filesystem():
            self._write_inputs()
            result = self.runner.invoke(cli, ["--config", "config.yml", "run", "--query", "length(@)"])
            self.assertEqual(result.exit_code, 0, result.output)
            payload = json.loads(next(Path("out/json").glob("run_*.json")).read_text(encoding="utf-8"))

        self.assertEqual(payload[0], {"data": "users.json", "query": "length(@)", "result": 3})

    def test_run_invalid_query_aborts(self) -> None:
        with self.runner.isolated_filesystem():
            self._write_inputs()
            result = self.runner.invoke(cli, ["--config", "config.yml", "run", "--query", "[? "])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("run failed", result.output)

    def test_run_missing_data_file_aborts(self) -> None:
        with self.runner.isolated_filesystem():
            self._write_inputs()
            result = self.runner.invoke(cli, ["--config", "config.yml", "run", "--data", "missing.json"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("missing.json", result.output)


if __name__ == "__main__":
    unittest.main()
