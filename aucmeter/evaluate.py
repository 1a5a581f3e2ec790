"""Curve measure evaluation entrypoint using Hydra and MLflow."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import hydra
from omegaconf import DictConfig

from aucmeter.configs.schema import AppConfig
from aucmeter.eval.evaluator import EvalConfig, evaluate_results
from aucmeter.utils.config import init_hydra, log_config, resolve_config, validate_config
from aucmeter.utils.io import ensure_dir, load_results, save_json
from aucmeter.utils.logging import configure_logging, get_logger
from aucmeter.utils.mlflow_utils import (
    log_artifacts,
    log_config_artifact,
    log_curve,
    log_measures,
    log_params_recursive,
    tracked_run,
)

init_hydra()


def run_evaluation(app_cfg: AppConfig) -> Dict[str, float]:
    logger = get_logger("evaluate", dataset=app_cfg.input.dataset_name)
    validate_config(app_cfg)
    log_config(logger, app_cfg)

    results, n_pos, n_neg = load_results(app_cfg.input.path)
    if app_cfg.input.n_pos is not None:
        n_pos = app_cfg.input.n_pos
    if app_cfg.input.n_neg is not None:
        n_neg = app_cfg.input.n_neg
    logger.info("Loaded %d results (n_pos=%d, n_neg=%d) from %s", len(results), n_pos, n_neg, app_cfg.input.path)

    output_dir = ensure_dir(Path(app_cfg.output_dir) / "artifacts")
    metrics, artifacts = evaluate_results(
        n_pos,
        n_neg,
        results,
        EvalConfig(
            measures=tuple(app_cfg.measure.names),
            scale=app_cfg.measure.scale,
            rounding=app_cfg.measure.rounding,
            arithmetic=app_cfg.measure.arithmetic,
            output_dir=str(output_dir),
            plots=app_cfg.measure.plots,
        ),
    )
    for name, value in metrics.items():
        logger.for_measure(name).info("%s = %s", name, value)

    metrics_path = output_dir / "metrics.json"
    save_json(metrics, metrics_path)
    artifacts.append(metrics_path)

    if app_cfg.mlflow.enabled:
        curve = json.loads((output_dir / "curve.json").read_text(encoding="utf-8"))
        tags = {"dataset": app_cfg.input.dataset_name, "arithmetic": app_cfg.measure.arithmetic}
        with tracked_run(
            app_cfg.mlflow.tracking_uri, app_cfg.mlflow.experiment_name, app_cfg.mlflow.run_name, tags=tags
        ):
            resolved = resolve_config(app_cfg)
            log_params_recursive(resolved)
            log_config_artifact(resolved, output_dir)
            log_measures(metrics)
            for key in ("roc", "pr"):
                if key in curve:
                    log_curve(curve[key], key)
            log_artifacts(artifacts, artifact_path="curves")

    return metrics


@hydra.main(version_base=None, config_path=None, config_name="config")
def main(cfg: DictConfig) -> None:
    app_cfg: AppConfig = cfg  # type: ignore[assignment]
    configure_logging(app_cfg.logging.level)
    run_evaluation(app_cfg)


if __name__ == "__main__":
    main()
