"""Shared fixtures for py_vers_range tests."""

from typing import List

import pytest

from py_vers_range.config import DEFAULT_PROBE_VERSIONS
from py_vers_range.services import Parser, VersionCache


@pytest.fixture
def parser() -> Parser:
    """Parser without a version cache."""
    return Parser()


@pytest.fixture
def version_cache() -> VersionCache:
    """Small cache so overflow is easy to trigger."""
    return VersionCache(capacity=8)


@pytest.fixture
def cached_parser(version_cache: VersionCache) -> Parser:
    """Parser sharing the ``version_cache`` fixture."""
    return Parser(cache=version_cache)


@pytest.fixture
def probe_versions() -> List[str]:
    """Versions used to compare ranges by containment."""
    return list(DEFAULT_PROBE_VERSIONS)
