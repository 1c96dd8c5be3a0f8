from __future__ import annotations

"""Public configuration API for DocQuery."""

from DocQuery.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from DocQuery.config.output import OutputConfig
from DocQuery.config.query import QueryConfig, parse_query_spec
from DocQuery.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "QueryConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_query_spec",
]
