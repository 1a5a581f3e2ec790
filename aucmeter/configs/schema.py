"""Hydra configuration schemas for the aucmeter package."""

from __future__ import annotations

from dataclasses import dataclass, field

from aucmeter.eval.arithmetic import DEFAULT_ROUNDING, DEFAULT_SCALE


@dataclass
class InputConfig:
    path: str = "${oc.env:RESULTS_PATH,./results.json}"
    dataset_name: str = "results"
    # derived from the labels when left unset
    n_pos: int | None = None
    n_neg: int | None = None


@dataclass
class MeasureConfig:
    names: list[str] = field(default_factory=lambda: ["auc", "roc_auc", "pr_auc"])
    scale: int = DEFAULT_SCALE
    rounding: str = DEFAULT_ROUNDING  # half_up | half_down | half_even | up | down | ceiling | floor | unnecessary
    arithmetic: str = "decimal"  # decimal | float
    plots: bool = True


@dataclass
class LoggingConfig:
    level: str = "INFO"


@dataclass
class MlflowConfig:
    enabled: bool = True
    tracking_uri: str = "${oc.env:MLFLOW_TRACKING_URI,./mlruns}"
    experiment_name: str = "aucmeter"
    run_name: str = "${now:%Y-%m-%d_%H-%M-%S}"


@dataclass
class AppConfig:
    input: InputConfig = field(default_factory=InputConfig)
    measure: MeasureConfig = field(default_factory=MeasureConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    mlflow: MlflowConfig = field(default_factory=MlflowConfig)
    output_dir: str = "${hydra:runtime.output_dir}"
