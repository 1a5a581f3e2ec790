"""Plotting utilities (matplotlib Agg backend)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt
import numpy as np

if TYPE_CHECKING:
    from aucmeter.eval.points import CurvePoint


def _as_xy(points: Sequence[CurvePoint]) -> tuple[np.ndarray, np.ndarray]:
    xy = np.array([p.as_floats() for p in points], dtype=np.float64).reshape(-1, 2)
    return xy[:, 0], xy[:, 1]


def plot_roc(points: Sequence[CurvePoint], path: Path, auc: Optional[float] = None) -> Path:
    fpr, tpr = _as_xy(points)
    label = "ROC" if auc is None else f"ROC (AUC = {auc:.4f})"
    fig, ax = plt.subplots()
    ax.plot(fpr, tpr, label=label)
    ax.plot([0, 1], [0, 1], linestyle="--", color="gray")
    ax.set_xlabel("False Positive Rate")
    ax.set_ylabel("True Positive Rate")
    ax.set_title("ROC Curve")
    ax.legend(loc="lower right")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path


def plot_pr(points: Sequence[CurvePoint], path: Path, auc: Optional[float] = None) -> Path:
    recall, precision = _as_xy(points)
    label = "PR" if auc is None else f"PR (AUC = {auc:.4f})"
    fig, ax = plt.subplots()
    ax.plot(recall, precision, label=label)
    ax.set_xlabel("Recall")
    ax.set_ylabel("Precision")
    ax.set_title("Precision-Recall Curve")
    ax.legend(loc="lower left")
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path
