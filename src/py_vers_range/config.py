"""Defaults for py_vers_range."""

from typing import List

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SCHEME = "generic"

# Same bound the original in-process version cache used
DEFAULT_CACHE_CAPACITY = 1000

# Versions used to compare two ranges by containment
DEFAULT_PROBE_VERSIONS: List[str] = [
    "0.0.1",
    "0.9.0",
    "1.0.0-alpha",
    "1.0.0",
    "1.0.1",
    "1.2.2",
    "1.2.3",
    "1.5.0",
    "1.9.9",
    "2.0.0",
    "2.0.1",
    "2.5.0",
    "3.0.0",
    "10.0.0",
]
