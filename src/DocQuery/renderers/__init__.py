"""Output renderers for command results.

Exports the OutputWriter base for new output formats and a factory that
instantiates writers from configuration.
"""

from __future__ import annotations

from DocQuery.config import AppConfig
from DocQuery.renderers.base import MultiOutputWriter, OutputWriter
from DocQuery.renderers.console import ConsoleOutputWriter, render_text
from DocQuery.renderers.json import JsonFileWriter, render_json


def create_output_writer(config: AppConfig) -> OutputWriter:
    """Create output writer based on config.

    Args:
        config: Application configuration.

    Returns:
        A MultiOutputWriter over every configured format.
    """
    writers: list[OutputWriter] = []
    if "console" in config.output.formats:
        writers.append(ConsoleOutputWriter(indent=config.output.indent))
    if "json" in config.output.formats:
        writers.append(JsonFileWriter(config.output.base_dir, indent=config.output.indent))

    if not writers:
        raise ValueError("No output writers configured")
    return MultiOutputWriter(writers)


__all__ = [
    "OutputWriter",
    "ConsoleOutputWriter",
    "JsonFileWriter",
    "MultiOutputWriter",
    "render_json",
    "render_text",
    "create_output_writer",
]
