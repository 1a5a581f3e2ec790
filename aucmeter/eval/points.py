"""Value types flowing through the curve engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

import numpy as np

from aucmeter.eval.arithmetic import DECIMAL, DEFAULT_ROUNDING, DEFAULT_SCALE, Arithmetic
from aucmeter.eval.errors import InsufficientDataError

POSITIVE = 1
NEGATIVE = 0


@dataclass(frozen=True)
class ScoredResult:
    """A classifier score paired with its ground-truth label."""

    score: Any
    label: int

    def __post_init__(self) -> None:
        if self.label not in (POSITIVE, NEGATIVE):
            raise ValueError(f"label must be {POSITIVE} (positive) or {NEGATIVE} (negative), got {self.label!r}")

    @property
    def is_positive(self) -> bool:
        return self.label == POSITIVE


@dataclass(frozen=True)
class ConfusionPoint:
    """False/true positive counts at one score threshold."""

    false_positives: int
    true_positives: int

    def __post_init__(self) -> None:
        if self.false_positives < 0 or self.true_positives < 0:
            raise ValueError("confusion counts must be >= 0")

    @property
    def x(self) -> int:
        return self.false_positives

    @property
    def y(self) -> int:
        return self.true_positives

    def false_positive_rate(
        self,
        n_neg: int,
        arithmetic: Arithmetic = DECIMAL,
        scale: Optional[int] = DEFAULT_SCALE,
        rounding: str = DEFAULT_ROUNDING,
    ) -> Any:
        if n_neg <= 0:
            raise InsufficientDataError("false positive rate undefined without negative examples", n_neg)
        return arithmetic.divide(
            arithmetic.coerce(self.false_positives), arithmetic.coerce(n_neg), scale, rounding
        )

    def true_positive_rate(
        self,
        n_pos: int,
        arithmetic: Arithmetic = DECIMAL,
        scale: Optional[int] = DEFAULT_SCALE,
        rounding: str = DEFAULT_ROUNDING,
    ) -> Any:
        if n_pos <= 0:
            raise InsufficientDataError("true positive rate undefined without positive examples", n_pos)
        return arithmetic.divide(
            arithmetic.coerce(self.true_positives), arithmetic.coerce(n_pos), scale, rounding
        )

    # recall is the true positive rate under another name
    recall = true_positive_rate

    def precision(
        self,
        arithmetic: Arithmetic = DECIMAL,
        scale: Optional[int] = DEFAULT_SCALE,
        rounding: str = DEFAULT_ROUNDING,
    ) -> Any:
        predicted = self.true_positives + self.false_positives
        if predicted == 0:
            return arithmetic.coerce(1)
        return arithmetic.divide(
            arithmetic.coerce(self.true_positives), arithmetic.coerce(predicted), scale, rounding
        )


@dataclass(frozen=True)
class CurvePoint:
    """A normalized (x, y) point, e.g. (fpr, tpr) or (recall, precision)."""

    x: Any
    y: Any

    def as_floats(self) -> tuple[float, float]:
        return float(self.x), float(self.y)


def results_from_arrays(y_true: np.ndarray, y_score: np.ndarray) -> List[ScoredResult]:
    y_true = np.asarray(y_true)
    y_score = np.asarray(y_score)
    if y_true.shape != y_score.shape or y_true.ndim != 1:
        raise ValueError("y_true and y_score must be 1-D arrays of equal length")
    return [
        ScoredResult(score=float(score), label=int(label))
        for label, score in zip(y_true.tolist(), y_score.tolist())
    ]
