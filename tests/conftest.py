"""Pytest fixtures and configuration."""
import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from trustscore.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate every test from TRUSTSCORE_* variables and the cached Settings."""
    for key in ("MIN_SCORE", "MAX_SCORE", "CONF", "PRIOR_MEAN", "PRIOR_N", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(f"TRUSTSCORE_{key}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def companies_df():
    """Three companies on a 1-5 scale with very different review counts."""
    return pd.DataFrame({
        "company": ["A", "B", "C"],
        "rating": [4.2, 4.3, 3.9],
        "n": [200, 60, 1200],
    })


@pytest.fixture
def votes_df():
    """Same shape as the package examples: custom column names."""
    return pd.DataFrame({
        "company": ["A", "B", "C"],
        "stars": [5.0, 1.5, 4.0],
        "votes": [300, 10, 2],
    })


@pytest.fixture
def sample_rows():
    """Iterable-of-mappings input."""
    return [
        {"feature": "alpha", "rating": 4.8, "n": 5},
        {"feature": "beta", "rating": 4.5, "n": 250},
        {"feature": "gamma", "rating": 2.0, "n": 0},
    ]
