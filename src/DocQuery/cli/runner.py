"""Command runner for coordinating CLI execution.

Manages logging configuration, component creation and error handling for
command execution.
"""

from __future__ import annotations

import click

from DocQuery.cli.commands import CompileCommand, RunCommand
from DocQuery.config import AppConfig
from DocQuery.renderers import create_output_writer
from DocQuery.services import create_query_service
from DocQuery.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Configures logging per action and turns any failure into ``click.Abort``
    after logging it.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

    def _configure_logging(self, action: str) -> None:
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )

    def run_compile(self, action: str, data_path: str | None = None) -> None:
        """Compile the configured spec and print the query.

        Args:
            action: The CLI command name (e.g., 'compile').
            data_path: Optional document path overriding ``query.data``.

        Raises:
            click.Abort: When compilation fails.
        """
        self._configure_logging(action)
        try:
            command = CompileCommand(
                config=self.config,
                service=create_query_service(self.config),
                data_path=data_path or self.config.query.data_path,
            )
            command.execute()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e

    def run_query(self, action: str, data_path: str | None = None, query_text: str | None = None) -> None:
        """Evaluate the configured spec against a document and write the result.

        Args:
            action: The CLI command name (e.g., 'run').
            data_path: Optional document path overriding ``query.data``.
            query_text: Optional raw query text used instead of the spec.

        Raises:
            click.Abort: When loading, evaluation or output fails.
        """
        self._configure_logging(action)
        try:
            resolved_path = data_path or self.config.query.data_path
            if not resolved_path:
                raise ValueError("No data file given: set query.data or pass --data")

            output_writer = create_output_writer(self.config)
            command = RunCommand(
                config=self.config,
                service=create_query_service(self.config),
                output_writer=output_writer,
                data_path=resolved_path,
                query_text=query_text,
            )
            command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("%s failed: %s", action, e)
            raise click.Abort from e
