import json
from decimal import Decimal
from pathlib import Path

import pytest

from aucmeter.eval.points import NEGATIVE, POSITIVE
from aucmeter.utils.io import load_results, save_json


def test_load_results_json_object(tmp_path: Path):
    path = tmp_path / "results.json"
    payload = {
        "n_pos": 3,
        "n_neg": 2,
        "results": [{"score": 0.9, "label": 1}, {"score": 0.2, "label": 0}],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")

    results, n_pos, n_neg = load_results(path)
    assert [r.label for r in results] == [POSITIVE, NEGATIVE]
    # declared counts win over observed ones
    assert (n_pos, n_neg) == (3, 2)


def test_load_results_json_list_derives_counts(tmp_path: Path):
    path = tmp_path / "results.json"
    records = [{"score": 0.9, "label": 1}, {"score": 0.5, "label": 1}, {"score": 0.2, "label": 0}]
    path.write_text(json.dumps(records), encoding="utf-8")

    results, n_pos, n_neg = load_results(path)
    assert len(results) == 3
    assert (n_pos, n_neg) == (2, 1)


def test_load_results_csv_keeps_decimal_scores(tmp_path: Path):
    path = tmp_path / "results.csv"
    path.write_text("score,label\n0.30000000000000001,1\n0.3,0\n", encoding="utf-8")

    results, n_pos, n_neg = load_results(path)
    assert results[0].score == Decimal("0.30000000000000001")
    assert (n_pos, n_neg) == (1, 1)


def test_load_results_errors(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_results(tmp_path / "missing.json")

    bad_suffix = tmp_path / "results.txt"
    bad_suffix.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        load_results(bad_suffix)

    missing_key = tmp_path / "results.json"
    missing_key.write_text(json.dumps([{"score": 0.5}]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_results(missing_key)

    bad_score = tmp_path / "bad.csv"
    bad_score.write_text("score,label\nhigh,1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_results(bad_score)


def test_save_json_creates_parents(tmp_path: Path):
    path = tmp_path / "nested" / "metrics.json"
    save_json({"roc_auc": 0.75, "auc": 3.0}, path)
    assert json.loads(path.read_text(encoding="utf-8")) == {"auc": 3.0, "roc_auc": 0.75}
