"""Command implementations for DocQuery CLI.

Encapsulates the compile and run logic, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import click

from DocQuery.config import AppConfig
from DocQuery.renderers import OutputWriter
from DocQuery.services import DocumentQueryService
from DocQuery.utils.log import log


def load_document(path: str | Path) -> Any:
    """Read and parse a JSON document.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    document_path = Path(path)
    document = json.loads(document_path.read_text(encoding="utf-8"))
    if isinstance(document, list):
        log.info("Loaded %d items from %s", len(document), document_path)
    else:
        log.info("Loaded %s from %s", type(document).__name__, document_path)
    return document


@dataclass(slots=True)
class CompileCommand:
    """Compile the configured spec and print the query text."""

    config: AppConfig
    service: DocumentQueryService
    data_path: str | None = None

    def execute(self) -> str:
        # Without data the spec is compiled for an array, the common case.
        data: Any = load_document(self.data_path) if self.data_path else []
        query = self.service.compile(data, self.config.query.spec)
        click.echo(query)
        return query


@dataclass(slots=True)
class RunCommand:
    """Compile the configured spec (or take raw query text) and evaluate it."""

    config: AppConfig
    service: DocumentQueryService
    output_writer: OutputWriter
    data_path: str
    query_text: str | None = None

    def execute(self) -> None:
        data = load_document(self.data_path)
        if self.query_text is not None:
            log.info("Using query text from command line")
            result = self.service.execute(data, self.query_text)
        else:
            result = self.service.run(data, self.config.query.spec)
        self.output_writer.write_result(result, self.data_path)
