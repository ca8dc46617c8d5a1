from .root import find_root, has_indicator, normalize_indicators
from .segments import ROOT, format_segments, is_enterable, resolve_path, split_into_segments

__all__ = [
    "ROOT",
    "find_root",
    "format_segments",
    "has_indicator",
    "is_enterable",
    "normalize_indicators",
    "resolve_path",
    "split_into_segments",
]
