"""Query service layer: compile a spec and evaluate it against a document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from DocQuery.core.query import QuerySpec
from DocQuery.languages.registry import QueryLanguage
from DocQuery.utils.log import log


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Compiled query text together with its evaluation result.

    Attributes:
        query: Query text handed to the engine.
        result: Engine output. None means the selected property was not found.
    """

    query: str
    result: Any


@dataclass(slots=True)
class DocumentQueryService:
    """Application service that runs structured queries through one language."""

    language: QueryLanguage

    def compile(self, data: Any, spec: QuerySpec) -> str:
        """Compile `spec` into query text for the configured language."""
        query = self.language.create_query(data, spec)
        if spec.is_empty():
            log.info("Query spec has no stages; using identity query %s", query)
        log.debug("Compiled %s query: %s", self.language.name, query)
        return query

    def run(self, data: Any, spec: QuerySpec) -> QueryResult:
        """Compile `spec` and evaluate it against `data`.

        Args:
            data: Parsed JSON document. It is never modified.
            spec: Structured query.

        Returns:
            The compiled query and the evaluation result.
        """
        query = self.compile(data, spec)
        return self.execute(data, query)

    def execute(self, data: Any, query: str) -> QueryResult:
        """Evaluate hand-written or previously compiled query text."""
        result = self.language.execute_query(data, query)
        if isinstance(result, list):
            log.info("Query returned %d items", len(result))
        elif result is None:
            log.info("Query returned null (no matching property)")
        else:
            log.info("Query returned %s", type(result).__name__)
        return QueryResult(query=query, result=result)
