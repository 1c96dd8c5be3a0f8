"""JMESPath evaluation backed by the `jmespath` library."""

from __future__ import annotations

from typing import Any

import jmespath

from DocQuery.utils.log import log


def execute_query(data: Any, query: str) -> Any:
    """Evaluate a JMESPath expression against `data`.

    The input is never modified; JMESPath builds new values for every
    projection and sort.

    Args:
        data: Parsed JSON document.
        query: JMESPath expression.

    Returns:
        Query result, or None when the selected property does not exist.

    Raises:
        jmespath.exceptions.JMESPathError: If the expression is invalid.
    """
    log.debug("Executing JMESPath query: %s", query)
    return jmespath.search(query, data)
