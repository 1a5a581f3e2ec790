"""FastAPI service stub for on-demand curve measures."""

from __future__ import annotations

from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from aucmeter.eval.arithmetic import DEFAULT_ROUNDING, DEFAULT_SCALE
from aucmeter.eval.errors import CurveError
from aucmeter.eval.measures import build_measure
from aucmeter.eval.points import ScoredResult

app = FastAPI(title="aucmeter")


class ResultItem(BaseModel):
    score: float
    label: int


class MeasureRequest(BaseModel):
    results: List[ResultItem]
    n_pos: Optional[int] = None
    n_neg: Optional[int] = None
    measure: str = "roc_auc"
    scale: int = DEFAULT_SCALE
    rounding: str = DEFAULT_ROUNDING
    arithmetic: str = "decimal"


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/measure")
def measure(request: MeasureRequest) -> dict[str, Any]:
    try:
        results = [ScoredResult(score=item.score, label=item.label) for item in request.results]
        observed_pos = sum(1 for r in results if r.is_positive)
        n_pos = request.n_pos if request.n_pos is not None else observed_pos
        n_neg = request.n_neg if request.n_neg is not None else len(results) - observed_pos
        m = build_measure(
            request.measure,
            n_pos,
            n_neg,
            results,
            scale=request.scale,
            rounding=request.rounding,
            arithmetic=request.arithmetic,
        )
        value = m.measure()
    except CurveError as exc:
        raise HTTPException(status_code=422, detail=f"{type(exc).__name__}: {exc}") from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ArithmeticError as exc:
        # e.g. the `unnecessary` rounding policy meeting an inexact area
        raise HTTPException(status_code=422, detail=f"{type(exc).__name__}: {exc}") from exc
    return {
        "measure": request.measure,
        "value": value,
        "n_pos": n_pos,
        "n_neg": n_neg,
        "confusion": [[p.false_positives, p.true_positives] for p in m.confusion_points],
    }
