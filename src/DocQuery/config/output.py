"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DocQuery.config.common import expect_int, expect_str, expect_str_list, get_section

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration."""

    base_dir: str = "output"
    formats: tuple[str, ...] = ("console",)
    indent: int = 2


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed output configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output", required=False)
    defaults = OutputConfig()
    formats = section.get("formats", list(defaults.formats))
    return OutputConfig(
        base_dir=expect_str(section.get("base_dir", defaults.base_dir), "output.base_dir"),
        formats=tuple(item.strip().lower() for item in expect_str_list(formats, "output.formats")),
        indent=expect_int(section.get("indent", defaults.indent), "output.indent"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
    if not config.formats:
        raise ValueError("output.formats must include at least one format")

    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {sorted(unknown)}")
    if config.indent < 0:
        raise ValueError("output.indent must not be negative")
