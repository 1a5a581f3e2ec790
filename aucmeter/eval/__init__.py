"""Evaluation package exports."""

from aucmeter.eval.arithmetic import (
    DECIMAL,
    FLOAT,
    DecimalArithmetic,
    FloatArithmetic,
    RoundingNecessaryError,
    get_arithmetic,
)
from aucmeter.eval.curve import build_curve, close_curve, pr_points, roc_points
from aucmeter.eval.errors import CurveError, InsufficientDataError, OrderViolation
from aucmeter.eval.evaluator import EvalConfig, evaluate_results
from aucmeter.eval.integrate import integrate, trapezoid_area
from aucmeter.eval.measures import (
    MEASURES,
    CurveMeasure,
    PrAucMeasure,
    RocAucMeasure,
    build_measure,
    compute_measures,
)
from aucmeter.eval.points import (
    NEGATIVE,
    POSITIVE,
    ConfusionPoint,
    CurvePoint,
    ScoredResult,
    results_from_arrays,
)

__all__ = [
    "DECIMAL",
    "FLOAT",
    "DecimalArithmetic",
    "FloatArithmetic",
    "RoundingNecessaryError",
    "get_arithmetic",
    "build_curve",
    "close_curve",
    "roc_points",
    "pr_points",
    "CurveError",
    "OrderViolation",
    "InsufficientDataError",
    "EvalConfig",
    "evaluate_results",
    "integrate",
    "trapezoid_area",
    "MEASURES",
    "CurveMeasure",
    "RocAucMeasure",
    "PrAucMeasure",
    "build_measure",
    "compute_measures",
    "POSITIVE",
    "NEGATIVE",
    "ScoredResult",
    "ConfusionPoint",
    "CurvePoint",
    "results_from_arrays",
]
