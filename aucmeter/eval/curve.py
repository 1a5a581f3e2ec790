"""Threshold sweep turning scored results into confusion points."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from aucmeter.eval.arithmetic import DECIMAL, DEFAULT_ROUNDING, DEFAULT_SCALE, TOP, Arithmetic, get_arithmetic
from aucmeter.eval.errors import InsufficientDataError, OrderViolation
from aucmeter.eval.points import ConfusionPoint, CurvePoint, ScoredResult

logger = logging.getLogger(__name__)


def build_curve(
    results: Iterable[ScoredResult], arithmetic: Arithmetic | str = DECIMAL
) -> List[ConfusionPoint]:
    """Sweep decreasing score thresholds and emit one point per distinct score.

    Each point holds the counts accumulated *before* the results at its
    threshold are consumed, so the first point is always (0, 0). Results
    sharing a score belong to the same threshold. The terminal point is not
    emitted; see :func:`close_curve`.

    Raises:
        OrderViolation: a score is unordered (NaN) or greater than the
            previous threshold once sorted.
    """
    arithmetic = get_arithmetic(arithmetic)
    scored = [(arithmetic.coerce(res.score), res.is_positive) for res in results]
    # stable, so ties keep their input order
    scored.sort(key=lambda item: arithmetic.sort_key(item[0]), reverse=True)

    if not scored:
        return [ConfusionPoint(0, 0)]

    points: List[ConfusionPoint] = []
    true_pos = 0
    false_pos = 0
    previous = TOP
    for score, positive in scored:
        order = arithmetic.compare(score, previous)
        if order is None or order > 0:
            raise OrderViolation(score, previous)
        if order < 0:
            points.append(ConfusionPoint(false_pos, true_pos))
            previous = score
        if positive:
            true_pos += 1
        else:
            false_pos += 1

    logger.debug(
        "curve sweep: %d results, %d thresholds, tp=%d fp=%d",
        len(scored),
        len(points),
        true_pos,
        false_pos,
    )
    return points


def close_curve(points: Sequence[ConfusionPoint], n_pos: int, n_neg: int) -> List[ConfusionPoint]:
    closed = list(points)
    end = ConfusionPoint(n_neg, n_pos)
    if not closed or closed[-1] != end:
        closed.append(end)
    return closed


def roc_points(
    points: Sequence[ConfusionPoint],
    n_pos: int,
    n_neg: int,
    arithmetic: Arithmetic | str = DECIMAL,
    scale: Optional[int] = DEFAULT_SCALE,
    rounding: str = DEFAULT_ROUNDING,
) -> List[CurvePoint]:
    """Rate view of a confusion curve: (false positive rate, true positive rate).

    With ``scale=None`` the rates are left unrounded for integration.
    """
    if n_pos <= 0 or n_neg <= 0:
        raise InsufficientDataError("ROC rates need at least one positive and one negative example", min(n_pos, n_neg))
    arithmetic = get_arithmetic(arithmetic)
    return [
        CurvePoint(
            p.false_positive_rate(n_neg, arithmetic, scale, rounding),
            p.true_positive_rate(n_pos, arithmetic, scale, rounding),
        )
        for p in points
    ]


def pr_points(
    points: Sequence[ConfusionPoint],
    n_pos: int,
    arithmetic: Arithmetic | str = DECIMAL,
    scale: Optional[int] = DEFAULT_SCALE,
    rounding: str = DEFAULT_ROUNDING,
) -> List[CurvePoint]:
    """Precision-recall view of a confusion curve: (recall, precision)."""
    if n_pos <= 0:
        raise InsufficientDataError("precision-recall needs at least one positive example", n_pos)
    arithmetic = get_arithmetic(arithmetic)
    return [
        CurvePoint(p.recall(n_pos, arithmetic, scale, rounding), p.precision(arithmetic, scale, rounding))
        for p in points
    ]
