"""Hydra config utilities: register, validate, log."""

from __future__ import annotations

import logging
from typing import Any

from omegaconf import OmegaConf

from aucmeter.configs.hydra import register_configs
from aucmeter.configs.schema import AppConfig
from aucmeter.eval.arithmetic import ARITHMETICS, ROUNDING_MODES
from aucmeter.eval.measures import MEASURES


def init_hydra() -> None:
    """Register structured configs with Hydra."""
    register_configs()


def validate_config(cfg: AppConfig) -> None:
    """Lightweight validation of key config fields."""
    if cfg.measure.scale < 0:
        raise ValueError("measure.scale must be >= 0")
    if str(cfg.measure.rounding).lower() not in ROUNDING_MODES:
        raise ValueError(f"measure.rounding must be one of {sorted(ROUNDING_MODES)}")
    if str(cfg.measure.arithmetic).lower() not in ARITHMETICS:
        raise ValueError(f"measure.arithmetic must be one of {sorted(ARITHMETICS)}")
    if not cfg.measure.names:
        raise ValueError("measure.names must not be empty")
    unknown = [name for name in cfg.measure.names if name not in MEASURES]
    if unknown:
        raise ValueError(f"measure.names has unknown measures {unknown}; expected {sorted(MEASURES)}")
    if cfg.input.n_pos is not None and cfg.input.n_pos < 0:
        raise ValueError("input.n_pos must be >= 0")
    if cfg.input.n_neg is not None and cfg.input.n_neg < 0:
        raise ValueError("input.n_neg must be >= 0")


def log_config(logger: logging.Logger | logging.LoggerAdapter, cfg: AppConfig) -> None:
    """Log resolved config."""
    logger.info("Config:\n%s", OmegaConf.to_yaml(cfg))


def resolve_config(cfg: Any) -> Any:
    """Ensure config is resolved for logging and MLflow params."""
    return OmegaConf.to_container(cfg, resolve=True)
