"""IO helpers."""

from __future__ import annotations

import csv
import json
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, List, Mapping, Optional, Tuple

from aucmeter.eval.points import ScoredResult


def ensure_dir(path: str | Path) -> Path:
    p = Path(path)
    p.mkdir(parents=True, exist_ok=True)
    return p


def save_json(data: Mapping[str, Any], path: str | Path) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, sort_keys=True)


def load_results(path: str | Path) -> Tuple[List[ScoredResult], int, int]:
    """Read scored results and the class counts from a .json or .csv file.

    JSON holds either a bare list of ``{"score", "label"}`` records or an
    object with a ``results`` list and optional ``n_pos`` / ``n_neg``. CSV
    needs a ``score,label`` header. Counts missing from the file are taken
    from the labels.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Results file not found: {p}")

    n_pos: Optional[int] = None
    n_neg: Optional[int] = None
    suffix = p.suffix.lower()
    if suffix == ".json":
        payload = json.loads(p.read_text(encoding="utf-8"))
        if isinstance(payload, Mapping):
            records = payload.get("results", [])
            n_pos = payload.get("n_pos")
            n_neg = payload.get("n_neg")
        else:
            records = payload
    elif suffix == ".csv":
        with p.open("r", encoding="utf-8", newline="") as f:
            records = list(csv.DictReader(f))
    else:
        raise ValueError(f"Unsupported results format: {p.suffix!r} (expected .json or .csv)")

    results = [_to_result(rec) for rec in records]
    observed_pos = sum(1 for res in results if res.is_positive)
    if n_pos is None:
        n_pos = observed_pos
    if n_neg is None:
        n_neg = len(results) - observed_pos
    return results, int(n_pos), int(n_neg)


def _to_result(record: Mapping[str, Any]) -> ScoredResult:
    try:
        score = record["score"]
        label = record["label"]
    except KeyError as exc:
        raise ValueError(f"result record is missing {exc.args[0]!r}: {dict(record)}") from exc
    # csv values arrive as text; keep the score digits as written
    if isinstance(score, str):
        try:
            score = Decimal(score.strip())
        except InvalidOperation as exc:
            raise ValueError(f"invalid score {score!r}") from exc
    return ScoredResult(score=score, label=int(label))
