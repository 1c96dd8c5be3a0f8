"""Query domain configuration and spec parsing.

The ``query.spec`` mapping mirrors `QuerySpec`:

```yaml
query:
  language: jmespath
  data: data/users.json
  spec:
    filter: {path: [user, age], relation: "<=", value: "7"}
    sort: {path: [user, name], direction: asc}
    projection: {paths: [[user, name], [_id]]}
```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DocQuery.config.common import (
    expect_path,
    expect_scalar,
    expect_str,
    get_required_value,
    get_section,
)
from DocQuery.core.query import DIRECTIONS, RELATIONS, FilterSpec, ProjectionSpec, QuerySpec, SortSpec
from DocQuery.languages.registry import supported_language_ids

_ALLOWED_STAGES = {"filter", "sort", "projection"}


@dataclass(frozen=True, slots=True)
class QueryConfig:
    """Store validated query language, data source and spec."""

    language: str
    data_path: str | None
    spec: QuerySpec


def load_query(raw: Mapping[str, Any]) -> QueryConfig:
    """Load query domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed query configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If stage keys or enum values are invalid.
    """
    section = get_section(raw, "query", required=True)
    data_path = section.get("data")
    return QueryConfig(
        language=expect_str(section.get("language", "jmespath"), "query.language").strip().lower(),
        data_path=expect_str(data_path, "query.data") if data_path is not None else None,
        spec=parse_query_spec(section.get("spec"), "query.spec"),
    )


def check_query(config: QueryConfig) -> None:
    """Validate query domain constraints.

    Raises:
        ValueError: If the language is unknown or the data path is blank.
    """
    if config.language not in supported_language_ids():
        raise ValueError(f"query.language has unknown language: {config.language}")
    if config.data_path is not None and not config.data_path.strip():
        raise ValueError("query.data must not be empty")


def parse_query_spec(value: Any, config_key: str) -> QuerySpec:
    """Parse a spec mapping into ``QuerySpec``.

    Args:
        value: Spec mapping, or None for the identity query.
        config_key: Full key path used in error messages.

    Returns:
        Parsed spec.

    Raises:
        TypeError: If spec shape/types are invalid.
        ValueError: If stage names or enum values are invalid.
    """
    if value is None:
        return QuerySpec()
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")

    unknown = {str(k) for k in value.keys()} - _ALLOWED_STAGES
    if unknown:
        raise ValueError(f"{config_key} has unknown stages: {sorted(unknown)}")

    filter_obj = value.get("filter")
    sort_obj = value.get("sort")
    projection_obj = value.get("projection")
    return QuerySpec(
        filter=_parse_filter(filter_obj, f"{config_key}.filter") if filter_obj is not None else None,
        sort=_parse_sort(sort_obj, f"{config_key}.sort") if sort_obj is not None else None,
        projection=(
            _parse_projection(projection_obj, f"{config_key}.projection") if projection_obj is not None else None
        ),
    )


def _parse_filter(value: Any, config_key: str) -> FilterSpec:
    section = get_section({"filter": value}, "filter", required=True, config_key=config_key)
    relation = expect_str(get_required_value(section, "relation", f"{config_key}.relation"), f"{config_key}.relation")
    if relation not in RELATIONS:
        raise ValueError(f"{config_key}.relation must be one of {list(RELATIONS)}")
    return FilterSpec(
        path=expect_path(section.get("path"), f"{config_key}.path"),
        relation=relation,
        value=expect_scalar(get_required_value(section, "value", f"{config_key}.value"), f"{config_key}.value"),
    )


def _parse_sort(value: Any, config_key: str) -> SortSpec:
    section = get_section({"sort": value}, "sort", required=True, config_key=config_key)
    direction = expect_str(section.get("direction", "asc"), f"{config_key}.direction").strip().lower()
    if direction not in DIRECTIONS:
        raise ValueError(f"{config_key}.direction must be one of {list(DIRECTIONS)}")
    return SortSpec(
        path=expect_path(section.get("path"), f"{config_key}.path"),
        direction=direction,
    )


def _parse_projection(value: Any, config_key: str) -> ProjectionSpec:
    section = get_section({"projection": value}, "projection", required=True, config_key=config_key)
    paths_obj = get_required_value(section, "paths", f"{config_key}.paths")
    if not isinstance(paths_obj, list):
        raise TypeError(f"{config_key}.paths must be a list")
    paths = tuple(expect_path(item, f"{config_key}.paths[{idx}]") for idx, item in enumerate(paths_obj))
    if not paths:
        raise ValueError(f"{config_key}.paths must include at least one path")
    return ProjectionSpec(paths=paths)
