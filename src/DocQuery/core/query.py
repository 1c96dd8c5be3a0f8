from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

Value = Union[None, bool, int, float, str]
FieldPath = Sequence[str]

RELATIONS: tuple[str, ...] = ("==", "!=", "<", "<=", ">", ">=")
DIRECTIONS: tuple[str, ...] = ("asc", "desc")


@dataclass(frozen=True, slots=True)
class FilterSpec:
    """Keep only items whose value at `path` compares true against `value`.

    Attributes:
        path: Field path segments. Empty means the item itself.
        relation: One of `==`, `!=`, `<`, `<=`, `>`, `>=`.
        value: Scalar operand. Text values are classified with
            `parse_literal` before they are embedded in a query.
    """

    path: FieldPath = ()
    relation: str = "=="
    value: Value = None


@dataclass(frozen=True, slots=True)
class SortSpec:
    """Sort items by the value at `path`.

    Attributes:
        path: Field path segments used as the sort key.
        direction: `asc` or `desc`.
    """

    path: FieldPath = ()
    direction: str = "asc"


@dataclass(frozen=True, slots=True)
class ProjectionSpec:
    """Extract one or more field paths from every item, in the given order."""

    paths: Sequence[FieldPath] = ()


@dataclass(frozen=True, slots=True)
class QuerySpec:
    """Normalized query intent passed through the service layer.

    Each stage is optional. Stages are applied in the order
    filter, sort, projection; a spec without stages is the identity query.
    """

    filter: FilterSpec | None = None
    sort: SortSpec | None = None
    projection: ProjectionSpec | None = None

    def is_empty(self) -> bool:
        return self.filter is None and self.sort is None and self.projection is None
