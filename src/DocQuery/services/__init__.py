"""Query service layer for DocQuery.

Wraps a registered query language and provides a factory for building the
service from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from DocQuery.languages.registry import get_query_language
from DocQuery.services.query import DocumentQueryService, QueryResult

if TYPE_CHECKING:
    from DocQuery.config import AppConfig


def create_query_service(config: AppConfig) -> DocumentQueryService:
    """Create a query service for the configured language.

    Args:
        config: Application configuration.

    Returns:
        DocumentQueryService bound to ``config.query.language``.
    """
    return DocumentQueryService(language=get_query_language(config.query.language))


__all__ = [
    "DocumentQueryService",
    "QueryResult",
    "create_query_service",
]
