"""Area-under-curve measures over a set of scored results."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple, Type

from aucmeter.eval.arithmetic import DEFAULT_ROUNDING, DEFAULT_SCALE, Arithmetic, get_arithmetic, resolve_rounding
from aucmeter.eval.curve import build_curve, close_curve, pr_points, roc_points
from aucmeter.eval.errors import InsufficientDataError
from aucmeter.eval.integrate import integrate
from aucmeter.eval.points import ConfusionPoint, CurvePoint, ScoredResult

logger = logging.getLogger(__name__)


class CurveMeasure:
    """Raw-count area under the (false positives, true positives) curve.

    The curve is built and closed once, at construction; an
    :class:`~aucmeter.eval.errors.OrderViolation` from the sweep propagates to
    the caller. Areas are computed lazily and cached since inputs never change.
    """

    name = "auc"

    def __init__(
        self,
        n_pos: int,
        n_neg: int,
        results: Iterable[ScoredResult],
        scale: int = DEFAULT_SCALE,
        rounding: str = DEFAULT_ROUNDING,
        arithmetic: Arithmetic | str = "decimal",
    ) -> None:
        if n_pos < 0 or n_neg < 0:
            raise ValueError("n_pos and n_neg must be >= 0")
        if scale < 0:
            raise ValueError("scale must be >= 0")
        resolve_rounding(rounding)
        self.n_pos = n_pos
        self.n_neg = n_neg
        self.scale = scale
        self.rounding = rounding
        self.arithmetic = get_arithmetic(arithmetic)

        results = list(results)
        self._warn_on_count_mismatch(results)
        self._confusion: Tuple[ConfusionPoint, ...] = tuple(
            close_curve(build_curve(results, self.arithmetic), n_pos, n_neg)
        )
        self._area: Optional[Any] = None
        self._raw_area: Optional[Any] = None

    def _warn_on_count_mismatch(self, results: Sequence[ScoredResult]) -> None:
        observed_pos = sum(1 for res in results if res.is_positive)
        observed_neg = len(results) - observed_pos
        if (observed_pos, observed_neg) != (self.n_pos, self.n_neg):
            logger.warning(
                "%s: declared n_pos=%d n_neg=%d but results hold %d positives and %d negatives",
                self.name,
                self.n_pos,
                self.n_neg,
                observed_pos,
                observed_neg,
            )

    @property
    def confusion_points(self) -> Tuple[ConfusionPoint, ...]:
        return self._confusion

    @property
    def curve_points(self) -> Tuple[Any, ...]:
        """The curve this measure is defined over; rate views are rounded to the scale."""
        return self._confusion

    def roc_points(self, rounded: bool = True) -> Tuple[CurvePoint, ...]:
        scale = self.scale if rounded else None
        return tuple(roc_points(self._confusion, self.n_pos, self.n_neg, self.arithmetic, scale, self.rounding))

    def pr_points(self, rounded: bool = True) -> Tuple[CurvePoint, ...]:
        scale = self.scale if rounded else None
        return tuple(pr_points(self._confusion, self.n_pos, self.arithmetic, scale, self.rounding))

    def _integrand(self) -> Sequence[Any]:
        return self._confusion

    def auc(self) -> Any:
        if self._area is None:
            # only the trapezoid halving rounds; the integrand stays exact
            self._area = integrate(self._integrand(), self.scale, self.rounding, self.arithmetic)
        return self._area

    def raw_auc(self) -> Any:
        if self._raw_area is None:
            self._raw_area = integrate(self._confusion, self.scale, self.rounding, self.arithmetic)
        return self._raw_area

    def normalized_auc(self) -> Any:
        """Raw area divided by ``n_pos * n_neg``, i.e. the rate-based ROC AUC."""
        total = self.n_pos * self.n_neg
        if total == 0:
            raise InsufficientDataError("normalized AUC needs at least one positive and one negative example", total)
        return self.arithmetic.divide(self.raw_auc(), self.arithmetic.coerce(total), self.scale, self.rounding)

    def measure(self) -> float:
        return self.arithmetic.to_float(self.arithmetic.round(self.auc(), self.scale, self.rounding))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(n_pos={self.n_pos}, n_neg={self.n_neg}, points={len(self._confusion)}, "
            f"scale={self.scale}, rounding={self.rounding!r}, arithmetic={self.arithmetic.name!r})"
        )


class RocAucMeasure(CurveMeasure):
    """Area under the ROC curve in rate space (0..1)."""

    name = "roc_auc"

    @property
    def curve_points(self) -> Tuple[CurvePoint, ...]:
        return self.roc_points()

    def auc(self) -> Any:
        # one division of the raw area instead of a rate per point
        if self._area is None:
            self._area = self.normalized_auc()
        return self._area


class PrAucMeasure(CurveMeasure):
    """Area under the precision-recall curve."""

    name = "pr_auc"

    @property
    def curve_points(self) -> Tuple[CurvePoint, ...]:
        return self.pr_points()

    def _integrand(self) -> Sequence[Any]:
        return self.pr_points(rounded=False)


MEASURES: Dict[str, Type[CurveMeasure]] = {
    CurveMeasure.name: CurveMeasure,
    RocAucMeasure.name: RocAucMeasure,
    PrAucMeasure.name: PrAucMeasure,
}


def build_measure(
    name: str,
    n_pos: int,
    n_neg: int,
    results: Iterable[ScoredResult],
    scale: int = DEFAULT_SCALE,
    rounding: str = DEFAULT_ROUNDING,
    arithmetic: Arithmetic | str = "decimal",
) -> CurveMeasure:
    if name not in MEASURES:
        raise ValueError(f"unknown measure: {name!r} (expected one of {sorted(MEASURES)})")
    return MEASURES[name](n_pos, n_neg, results, scale=scale, rounding=rounding, arithmetic=arithmetic)


def compute_measures(
    n_pos: int,
    n_neg: int,
    results: Iterable[ScoredResult],
    names: Sequence[str] = ("auc", "roc_auc", "pr_auc"),
    scale: int = DEFAULT_SCALE,
    rounding: str = DEFAULT_ROUNDING,
    arithmetic: Arithmetic | str = "decimal",
) -> Dict[str, float]:
    results = list(results)
    return {
        name: build_measure(name, n_pos, n_neg, results, scale, rounding, arithmetic).measure()
        for name in names
    }
