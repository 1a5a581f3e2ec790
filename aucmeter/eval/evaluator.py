"""Evaluation runner."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from aucmeter.eval.arithmetic import DEFAULT_ROUNDING, DEFAULT_SCALE
from aucmeter.eval.measures import CurveMeasure, build_measure
from aucmeter.eval.points import ScoredResult
from aucmeter.utils.plots import plot_pr, plot_roc


@dataclass(frozen=True)
class EvalConfig:
    measures: Tuple[str, ...] = ("auc", "roc_auc", "pr_auc")
    scale: int = DEFAULT_SCALE
    rounding: str = DEFAULT_ROUNDING
    arithmetic: str = "decimal"
    output_dir: str = "./outputs"
    plots: bool = True


def evaluate_results(
    n_pos: int, n_neg: int, results: Sequence[ScoredResult], cfg: EvalConfig
) -> Tuple[Dict[str, float], List[Path]]:
    results = list(results)
    measures: Dict[str, CurveMeasure] = {
        name: build_measure(name, n_pos, n_neg, results, cfg.scale, cfg.rounding, cfg.arithmetic)
        for name in cfg.measures
    }
    metrics = {name: m.measure() for name, m in measures.items()}

    artifacts: List[Path] = []
    output_dir = Path(cfg.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    # every measure shares the same confusion curve
    if measures:
        base = next(iter(measures.values()))
    else:
        base = CurveMeasure(n_pos, n_neg, results, cfg.scale, cfg.rounding, cfg.arithmetic)
    curve = {
        "n_pos": n_pos,
        "n_neg": n_neg,
        "confusion": [[p.false_positives, p.true_positives] for p in base.confusion_points],
        "measures": metrics,
    }
    roc = pr = None
    if n_pos > 0 and n_neg > 0:
        roc = base.roc_points()
        curve["roc"] = [list(p.as_floats()) for p in roc]
    if n_pos > 0:
        pr = base.pr_points()
        curve["pr"] = [list(p.as_floats()) for p in pr]

    curve_path = output_dir / "curve.json"
    curve_path.write_text(json.dumps(curve, indent=2), encoding="utf-8")
    artifacts.append(curve_path)

    if cfg.plots and roc is not None:
        artifacts.append(plot_roc(roc, output_dir / "roc.png", auc=metrics.get("roc_auc")))
    if cfg.plots and pr is not None:
        artifacts.append(plot_pr(pr, output_dir / "pr.png", auc=metrics.get("pr_auc")))

    return metrics, artifacts
