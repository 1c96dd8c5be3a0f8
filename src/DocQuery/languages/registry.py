"""Query language registry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from DocQuery.core.query import QuerySpec

CreateQuery = Callable[[Any, QuerySpec], str]
ExecuteQuery = Callable[[Any, str], Any]


@dataclass(frozen=True, slots=True)
class QueryLanguage:
    """A query language that can compile specs and evaluate its own queries.

    Attributes:
        id: Registry key used in configuration.
        name: Display name.
        description: Short help text for users writing queries by hand.
        create_query: Compile a `QuerySpec` into query text.
        execute_query: Evaluate query text against a document.
    """

    id: str
    name: str
    description: str
    create_query: CreateQuery
    execute_query: ExecuteQuery


def get_query_language(language_id: str) -> QueryLanguage:
    """Return the registered query language for `language_id`.

    Args:
        language_id: Language identifier from ``query.language``.

    Returns:
        QueryLanguage: Registered language.

    Raises:
        ValueError: If ``language_id`` is not registered.
    """
    registry = _languages()
    builder = registry.get(language_id)
    if builder is None:
        raise ValueError(f"Unsupported query language: {language_id}")
    return builder()


def supported_language_ids() -> tuple[str, ...]:
    """Return all registered language ids in registry order."""
    return tuple(_languages().keys())


def _languages() -> dict[str, Callable[[], QueryLanguage]]:
    return {
        "jmespath": _build_jmespath,
    }


def _build_jmespath() -> QueryLanguage:
    from DocQuery.languages.jmespath.engine import execute_query
    from DocQuery.languages.jmespath.query import build_query

    return QueryLanguage(
        id="jmespath",
        name="JMESPath",
        description=(
            "Enter a JMESPath query to filter, sort, or transform the JSON data. "
            "See https://jmespath.org/ for the language reference."
        ),
        create_query=build_query,
        execute_query=execute_query,
    )
