"""
Pytest configuration and shared fixtures for the sequence predictor tests.
"""

import pytest

from sequence_predictor.catalog import PatternCatalog
from sequence_predictor.engine import PredictionEngine


@pytest.fixture
def catalog():
    """Default catalog with the standard tolerance."""
    return PatternCatalog()


@pytest.fixture
def engine(catalog):
    return PredictionEngine(catalog)


@pytest.fixture
def engine_with_only(catalog):
    """Builds an engine whose table holds just the named entries, in the given order."""
    def _build(*names):
        return PredictionEngine(catalog.with_entries([catalog.get(name) for name in names]))
    return _build
