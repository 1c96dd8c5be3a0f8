"""Base classes for output writers.

Separates command control flow from the way query results are shown or
stored.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from DocQuery.services.query import QueryResult


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_result(self, result: QueryResult, data_path: str | None) -> None:
        """Write one query result.

        Args:
            result: Compiled query and its evaluation result.
            data_path: File the document was read from, if any.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'run').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_result(self, result: QueryResult, data_path: str | None) -> None:
        for writer in self.writers:
            writer.write_result(result, data_path)

    def finalize(self, action: str) -> None:
        for writer in self.writers:
            writer.finalize(action)
