"""Packaged configuration loading."""

from .loader import load_defaults, load_json_config, meta_root

__all__ = ["load_defaults", "load_json_config", "meta_root"]
