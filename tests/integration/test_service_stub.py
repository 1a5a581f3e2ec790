from fastapi.testclient import TestClient

from aucmeter.infer.service_stub import app

client = TestClient(app)

RESULTS = [
    {"score": 0.9, "label": 1},
    {"score": 0.8, "label": 0},
    {"score": 0.7, "label": 1},
    {"score": 0.6, "label": 0},
]


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_measure_roc_auc():
    resp = client.post("/measure", json={"results": RESULTS})
    assert resp.status_code == 200
    body = resp.json()
    assert body["value"] == 0.75
    assert (body["n_pos"], body["n_neg"]) == (2, 2)
    assert body["confusion"] == [[0, 0], [0, 1], [1, 1], [1, 2], [2, 2]]


def test_measure_raw_area_with_float_arithmetic():
    resp = client.post("/measure", json={"results": RESULTS, "measure": "auc", "arithmetic": "float"})
    assert resp.status_code == 200
    assert resp.json()["value"] == 3.0


def test_measure_single_class_is_unprocessable():
    resp = client.post("/measure", json={"results": [{"score": 0.4, "label": 1}]})
    assert resp.status_code == 422
    assert "InsufficientDataError" in resp.json()["detail"]


def test_measure_unknown_name_is_bad_request():
    resp = client.post("/measure", json={"results": RESULTS, "measure": "f1"})
    assert resp.status_code == 400


def test_measure_inexact_area_under_unnecessary_rounding_is_unprocessable():
    results = [
        {"score": 0.9, "label": 1},
        {"score": 0.7, "label": 0},
        {"score": 0.6, "label": 1},
        {"score": 0.2, "label": 1},
    ]
    resp = client.post("/measure", json={"results": results, "rounding": "unnecessary", "scale": 2})
    assert resp.status_code == 422
    assert "RoundingNecessaryError" in resp.json()["detail"]


def test_measure_exact_area_under_unnecessary_rounding():
    resp = client.post("/measure", json={"results": RESULTS, "rounding": "unnecessary", "scale": 2})
    assert resp.status_code == 200
    assert resp.json()["value"] == 0.75
