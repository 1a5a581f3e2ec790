"""Hydra config registration."""

from __future__ import annotations

from hydra.core.config_store import ConfigStore

from aucmeter.configs.schema import AppConfig, InputConfig, LoggingConfig, MeasureConfig, MlflowConfig


def register_configs() -> None:
    cs = ConfigStore.instance()
    cs.store(name="config", node=AppConfig)
    cs.store(group="input", name="input", node=InputConfig)
    cs.store(group="measure", name="measure", node=MeasureConfig)
    cs.store(group="logging", name="logging", node=LoggingConfig)
    cs.store(group="mlflow", name="mlflow", node=MlflowConfig)
