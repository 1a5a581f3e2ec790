"""MLflow utilities for measure runs."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import mlflow

from aucmeter.utils.io import ensure_dir, save_json


@contextmanager
def tracked_run(
    tracking_uri: str, experiment_name: str, run_name: str, tags: dict[str, str] | None = None
) -> Iterator[None]:
    mlflow.set_tracking_uri(tracking_uri)
    mlflow.set_experiment(experiment_name)
    with mlflow.start_run(run_name=run_name, tags=tags):
        yield


def log_params_recursive(params: dict[str, Any]) -> None:
    flat = _flatten_dict(params)
    mlflow.log_params(flat)


def log_measures(metrics: dict[str, float], prefix: str = "") -> None:
    mlflow.log_metrics({f"{prefix}{name}": value for name, value in metrics.items()})


def log_curve(points: Sequence[Sequence[float]], key: str) -> None:
    """Log a rate curve as a stepped metric, one step per threshold."""
    for step, (x, y) in enumerate(points):
        mlflow.log_metrics({f"{key}_x": x, f"{key}_y": y}, step=step)


def log_artifacts(paths: Iterable[Path], artifact_path: str | None = None) -> None:
    for path in paths:
        mlflow.log_artifact(str(path), artifact_path=artifact_path)


def log_config_artifact(cfg_resolved: dict[str, Any], output_dir: Path) -> Path:
    ensure_dir(output_dir)
    config_path = output_dir / "resolved_config.json"
    save_json(cfg_resolved, config_path)
    mlflow.log_artifact(str(config_path), artifact_path="repro")
    return config_path


def _flatten_dict(data: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            flat.update(_flatten_dict(value, name))
        elif isinstance(value, (list, tuple)):
            flat[name] = ",".join(str(v) for v in value)
        else:
            flat[name] = value
    return flat
