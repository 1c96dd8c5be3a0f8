"""JSON output renderers.

Provides JsonFileWriter, which collects query results and writes them to a
timestamped JSON file.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from DocQuery.renderers.base import OutputWriter
from DocQuery.services.query import QueryResult
from DocQuery.utils.log import log


def render_json(result: QueryResult, data_path: str | None = None) -> dict[str, Any]:
    """Render a query result into a JSON-serializable dict."""
    return {
        "data": data_path,
        "query": result.query,
        "result": result.result,
    }


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str, indent: int = 2) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory; files go to ``<base_dir>/json``.
            indent: JSON indentation width.
        """
        self.output_dir = Path(base_dir) / "json"
        self.indent = indent
        self.all_results: list[dict[str, Any]] = []
        self.output_path: Path | None = None

    def write_result(self, result: QueryResult, data_path: str | None) -> None:
        self.all_results.append(render_json(result, data_path))

    def finalize(self, action: str) -> None:
        """Write accumulated results to ``<action>_<timestamp>.json``."""
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=self.indent)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        self.output_path = output_path
        log.info("JSON saved to %s", output_path)
