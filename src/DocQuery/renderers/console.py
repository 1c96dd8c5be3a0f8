"""Console text output.

Renders a `QueryResult` as the query line followed by pretty-printed JSON.
"""

from __future__ import annotations

import json

from DocQuery.renderers.base import OutputWriter
from DocQuery.services.query import QueryResult
from DocQuery.utils.log import log


def render_text(result: QueryResult, *, indent: int = 2) -> str:
    """Render a query result into a human-readable text block.

    Args:
        result: Compiled query and its evaluation result.
        indent: JSON indentation width.

    Returns:
        A formatted string ready to be printed.
    """
    lines = [f"Query: {result.query}"]
    lines.extend(json.dumps(result.result, ensure_ascii=False, indent=indent).splitlines())
    return "\n".join(lines) + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def write_result(self, result: QueryResult, data_path: str | None) -> None:
        if data_path:
            log.info("Data: %s", data_path)
        for line in render_text(result, indent=self.indent).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
