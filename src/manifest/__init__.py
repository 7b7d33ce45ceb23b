"""Manifest parsers.

This package turns the two inputs of a dep -> Go modules migration into
import path -> version token maps:
- gopkg_lock.py: dep's Gopkg.lock (TOML)
- go_list.py: saved output of ``go list -m all``
"""

from .gopkg_lock import parse_gopkg_lock
from .go_list import normalize_module_version, parse_go_list, parse_go_list_text

__all__ = [
    "parse_gopkg_lock",
    "parse_go_list",
    "parse_go_list_text",
    "normalize_module_version",
]
