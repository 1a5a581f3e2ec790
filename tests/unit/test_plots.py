from aucmeter.eval.measures import CurveMeasure
from aucmeter.eval.points import NEGATIVE, POSITIVE, ScoredResult
from aucmeter.utils.plots import plot_pr, plot_roc


def test_plot_functions_save(tmp_path):
    results = [
        ScoredResult(0.1, NEGATIVE),
        ScoredResult(0.4, NEGATIVE),
        ScoredResult(0.35, POSITIVE),
        ScoredResult(0.8, POSITIVE),
    ]
    m = CurveMeasure(2, 2, results)

    roc_path = plot_roc(m.roc_points(), tmp_path / "roc.png", auc=0.75)
    pr_path = plot_pr(m.pr_points(), tmp_path / "pr.png")

    for p in [roc_path, pr_path]:
        assert p.exists()
