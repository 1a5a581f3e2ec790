import numpy as np
import pytest

metrics = pytest.importorskip("sklearn.metrics")

from aucmeter.eval.measures import PrAucMeasure, RocAucMeasure
from aucmeter.eval.points import results_from_arrays


def _counts(y_true):
    n_pos = int(y_true.sum())
    return n_pos, int(len(y_true) - n_pos)


def test_roc_auc_vs_sklearn():
    y_true = np.array([0, 0, 1, 1])
    y_score = np.array([0.1, 0.4, 0.35, 0.8])
    n_pos, n_neg = _counts(y_true)

    m = RocAucMeasure(n_pos, n_neg, results_from_arrays(y_true, y_score))
    assert np.isclose(m.measure(), metrics.roc_auc_score(y_true, y_score))


def test_roc_auc_with_ties_vs_sklearn():
    rng = np.random.RandomState(0)
    y_true = rng.randint(0, 2, size=300)
    # coarse scores force many ties
    y_score = np.round(rng.rand(300) * 0.5 + y_true * 0.3, 1)
    n_pos, n_neg = _counts(y_true)

    for arithmetic in ("decimal", "float"):
        m = RocAucMeasure(n_pos, n_neg, results_from_arrays(y_true, y_score), arithmetic=arithmetic)
        assert np.isclose(m.measure(), metrics.roc_auc_score(y_true, y_score), atol=1e-8)


def test_pr_area_vs_sklearn_trapezoid():
    rng = np.random.RandomState(1)
    y_true = rng.randint(0, 2, size=120)
    y_score = np.round(rng.rand(120), 2)
    n_pos, n_neg = _counts(y_true)

    precision, recall, _ = metrics.precision_recall_curve(y_true, y_score)
    m = PrAucMeasure(n_pos, n_neg, results_from_arrays(y_true, y_score))
    assert np.isclose(m.measure(), metrics.auc(recall, precision), atol=1e-8)
