"""JMESPath query compiler.

Compiles the internal, structured `QuerySpec` into a JMESPath expression.

Rules
- Stages are compiled on their own and joined with ` | ` in the order
  filter -> sort -> projection.
- Filter:     [? user.age <= `7`]
- Sort:       sort_by(@, &user.name)      (desc: reverse(sort_by(...)))
- Projection: [*].user.name               (one path)
              [*].{name: user.name, _id: _id}  (several paths, keyed by the
              last segment of each path)
- A path segment that is not a bare identifier is written as a JSON string:
  ["user name!"] -> "user name!"
- An empty path is the current item: @
- Filter values are JSON literals in back-ticks. Text values are classified
  with `parse_literal` first, so "7" compiles to `7` and "Bob" to `"Bob"`.

The compiler does not validate relations or directions; an unknown token ends
up in the query text as-is.
"""

from __future__ import annotations

import json
import re
from typing import Any, Sequence

from DocQuery.core.literal import parse_literal
from DocQuery.core.query import FieldPath, FilterSpec, ProjectionSpec, QuerySpec, SortSpec, Value


_RE_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

PIPE = " | "
ALL_ITEMS = "[*]"
CURRENT = "@"


def _segment(name: str) -> str:
    if _RE_IDENTIFIER.fullmatch(name):
        return name
    return json.dumps(name, ensure_ascii=False)


def render_path(path: FieldPath) -> str:
    """Render field path segments as a JMESPath sub-expression.

    Args:
        path: Ordered path segments.

    Returns:
        Dotted path, or `@` for an empty path.
    """
    if not path:
        return CURRENT
    return ".".join(_segment(str(name)) for name in path)


def render_literal(value: Value) -> str:
    """Render a scalar as a JMESPath JSON literal, e.g. `7` or `"Bob"`."""
    if isinstance(value, str):
        value = parse_literal(value)

    if value is None:
        text = "null"
    elif isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, (int, float)):
        text = json.dumps(value)
    else:
        text = json.dumps(str(value), ensure_ascii=False)
    return "`" + text.replace("`", "\\`") + "`"


def _compile_filter(f: FilterSpec) -> str:
    return f"[? {render_path(f.path)} {f.relation} {render_literal(f.value)}]"


def _compile_sort(s: SortSpec) -> str:
    sort_by = f"sort_by(@, &{render_path(s.path)})"
    if s.direction == "desc":
        return f"reverse({sort_by})"
    return sort_by


def _compile_projection(p: ProjectionSpec) -> str:
    paths: Sequence[FieldPath] = p.paths
    if len(paths) == 1:
        if not paths[0]:
            return ALL_ITEMS
        return f"{ALL_ITEMS}.{render_path(paths[0])}"

    items = ", ".join(f"{_key(path)}: {render_path(path)}" for path in paths)
    return f"{ALL_ITEMS}.{{{items}}}"


def _key(path: FieldPath) -> str:
    if not path:
        return json.dumps(CURRENT)
    return _segment(str(path[-1]))


def base_selector(data: Any) -> str:
    """Return the selector for the whole input: `[*]` for arrays, `@` otherwise."""
    if isinstance(data, (list, tuple)):
        return ALL_ITEMS
    return CURRENT


def build_query(data: Any, spec: QuerySpec) -> str:
    """Compile a query spec into a JMESPath expression.

    Args:
        data: Document the query will run against. Only its shape (array or
            not) is inspected; values are never read.
        spec: Structured query.

    Returns:
        JMESPath query string.
    """
    head = _compile_filter(spec.filter) if spec.filter is not None else base_selector(data)
    stages: list[str] = [head]

    if spec.sort is not None:
        stages.append(_compile_sort(spec.sort))

    if spec.projection is not None:
        projection = _compile_projection(spec.projection)
        # The projection already starts from [*].
        if stages == [ALL_ITEMS]:
            stages = []
        stages.append(projection)

    return PIPE.join(stages)
