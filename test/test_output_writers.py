"""Tests for console and JSON output writers."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DocQuery.config import parse_config_dict
from DocQuery.renderers import (
    ConsoleOutputWriter,
    JsonFileWriter,
    MultiOutputWriter,
    create_output_writer,
    render_text,
)
from DocQuery.services import QueryResult


RESULT = QueryResult(query="[*].user.name", result=["Stuart", "Kevin", "Bob"])


class TestRenderText(unittest.TestCase):
    def test_query_line_then_json(self) -> None:
        text = render_text(RESULT, indent=2)
        lines = text.splitlines()
        self.assertEqual(lines[0], "Query: [*].user.name")
        self.assertEqual(json.loads("\n".join(lines[1:])), ["Stuart", "Kevin", "Bob"])

    def test_null_result(self) -> None:
        text = render_text(QueryResult(query="@.foo", result=None))
        self.assertEqual(text, "Query: @.foo\nnull\n")


class TestConsoleOutputWriter(unittest.TestCase):
    def test_logs_result(self) -> None:
        writer = ConsoleOutputWriter()
        with self.assertLogs("DocQuery", level="INFO") as captured:
            writer.write_result(RESULT, "data/users.json")
            writer.finalize("run")
        joined = "\n".join(captured.output)
        self.assertIn("Data: data/users.json", joined)
        self.assertIn("Query: [*].user.name", joined)
        self.assertIn('"Kevin"', joined)


class TestJsonFileWriter(unittest.TestCase):
    def test_writes_results(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            writer = JsonFileWriter(tmp, indent=2)
            writer.write_result(RESULT, "data/users.json")
            writer.write_result(QueryResult(query="@.foo", result=None), None)
            with self.assertLogs("DocQuery", level="INFO"):
                writer.finalize("run")

            assert writer.output_path is not None
            self.assertEqual(writer.output_path.parent, Path(tmp) / "json")
            self.assertTrue(writer.output_path.name.startswith("run_"))

            payload = json.loads(writer.output_path.read_text(encoding="utf-8"))
            self.assertEqual(
                payload,
                [
                    {"data": "data/users.json", "query": "[*].user.name", "result": ["Stuart", "Kevin", "Bob"]},
                    {"data": None, "query": "@.foo", "result": None},
                ],
            )


class TestCreateOutputWriter(unittest.TestCase):
    def test_creates_all_configured_writers(self) -> None:
        cfg = parse_config_dict({"query": {}, "output": {"formats": ["console", "json"], "base_dir": "out"}})
        writer = create_output_writer(cfg)
        self.assertIsInstance(writer, MultiOutputWriter)
        assert isinstance(writer, MultiOutputWriter)
        self.assertEqual([type(w) for w in writer.writers], [ConsoleOutputWriter, JsonFileWriter])


if __name__ == "__main__":
    unittest.main()
