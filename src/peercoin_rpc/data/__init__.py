"""Packaged defaults and configuration loading."""

from peercoin_rpc.data.loader import (
    DEFAULT_METHODS_PATH,
    load_client_config,
    load_default_method_table,
    load_method_entries,
    load_method_table,
)

__all__ = [
    "DEFAULT_METHODS_PATH",
    "load_client_config",
    "load_default_method_table",
    "load_method_entries",
    "load_method_table",
]
