from __future__ import annotations

"""Shared helpers for configuration loading and validation.

Every helper takes the full dotted config key so error messages point at the
offending entry, e.g. ``query.spec.sort.direction``.
"""

from typing import Any, Mapping

from DocQuery.core.query import Value


def get_section(raw: Mapping[str, Any], key: str, *, required: bool, config_key: str | None = None) -> Mapping[str, Any]:
    """Return a mapping section from a parent mapping.

    Args:
        raw: Parent configuration mapping.
        key: Section name.
        required: Whether the section must exist.
        config_key: Full key path for error messages. Defaults to ``key``.

    Returns:
        Section mapping, or empty mapping for optional missing sections.

    Raises:
        ValueError: If section is required but missing.
        TypeError: If section is not a mapping.
    """
    full_key = config_key or key
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {full_key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{full_key} must be an object")
    return section


def get_required_value(section: Mapping[str, Any], field: str, config_key: str) -> Any:
    """Return a required field value from a section.

    Raises:
        ValueError: If field is missing.
    """
    if field not in section:
        raise ValueError(f"Missing required config: {config_key}")
    return section[field]


def expect_str(value: Any, config_key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_int(value: Any, config_key: str) -> int:
    """Validate and return integer value (excluding bool)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer")
    return value


def expect_str_list(value: Any, config_key: str) -> list[str]:
    """Validate a list of strings."""
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list")
    out: list[str] = []
    for idx, item in enumerate(value):
        out.append(expect_str(item, f"{config_key}[{idx}]"))
    return out


def expect_path(value: Any, config_key: str) -> tuple[str, ...]:
    """Validate a field path.

    A plain string is a single segment (``"user name!"``); a list holds one
    string per segment. An empty list or ``None`` is the item itself.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(expect_str_list(value, config_key))


def expect_scalar(value: Any, config_key: str) -> Value:
    """Validate a JSON scalar: null, boolean, number or string."""
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    raise TypeError(f"{config_key} must be a string, number, boolean or null")
