"""Tests for trustscore/scoring/plotting.py."""
import matplotlib.pyplot as plt
import pandas as pd
import pytest

from trustscore.exceptions import DomainError, SchemaError
from trustscore.scoring.plotting import plot_trustscore, to_long_format
from trustscore.scoring.trustscore import trustscore


@pytest.fixture
def scored(votes_df):
    return trustscore(votes_df, feature_col="company", rating_col="stars", n_col="votes")


class TestToLongFormat:

    def test_shape_and_order(self, scored):
        long_df = to_long_format(scored, feature_col="company")
        assert list(long_df.columns) == ["feature", "score_type", "score"]
        assert len(long_df) == 6
        assert long_df["score_type"].tolist() == ["wilson"] * 3 + ["bayes"] * 3
        assert long_df["feature"].tolist()[:3] == ["A", "C", "B"]

    def test_sort_by_bayes(self):
        df = pd.DataFrame({"feature": ["x", "y"], "wilson": [2.0, 1.0], "bayes": [1.0, 2.0]})
        long_df = to_long_format(df, sort_by="bayes")
        assert long_df["feature"].tolist()[:2] == ["y", "x"]

    def test_invalid_sort_metric(self, scored):
        with pytest.raises(DomainError, match="sort_by"):
            to_long_format(scored, feature_col="company", sort_by="rating")

    def test_missing_feature_column(self, scored):
        with pytest.raises(SchemaError, match="feature"):
            to_long_format(scored)

    def test_unscored_frame(self, votes_df):
        with pytest.raises(SchemaError, match="wilson"):
            to_long_format(votes_df, feature_col="company")


class TestPlotTrustscore:

    def test_returns_figure(self, scored):
        fig = plot_trustscore(scored, feature_col="company")
        ax = fig.axes[0]
        assert ax.get_title() == "Wilson vs Bayesian Scores"
        assert [t.get_text() for t in ax.get_xticklabels()] == ["A", "C", "B"]
        assert len(ax.collections) == 2
        plt.close(fig)

    def test_draws_into_existing_axes(self, scored):
        fig, ax = plt.subplots()
        out = plot_trustscore(scored, feature_col="company", sort_by="bayes", ax=ax)
        assert out is fig
        assert ax.get_ylabel() == "Score"
        plt.close(fig)

    def test_repeated_labels_get_their_own_slot(self):
        df = pd.DataFrame({
            "feature": ["A", "A", "B"],
            "wilson": [3.0, 1.0, 2.0],
            "bayes": [3.5, 1.5, 2.5],
        })
        fig = plot_trustscore(df)
        ax = fig.axes[0]
        wilson_points = ax.collections[0].get_offsets()
        assert wilson_points[:, 0].tolist() == [0.0, 1.0, 2.0]
        assert wilson_points[:, 1].tolist() == [3.0, 2.0, 1.0]
        assert [t.get_text() for t in ax.get_xticklabels()] == ["A", "B", "A"]
        plt.close(fig)
