"""Logging setup carrying the measure and dataset under evaluation."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping, Optional, Tuple

CONTEXT_DEFAULTS = {"measure": "-", "dataset": "-"}
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s [measure=%(measure)s dataset=%(dataset)s]: %(message)s"


def configure_logging(level: str, fmt: str = LOG_FORMAT) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=fmt)
    # aucmeter.eval modules log through plain module loggers with no context
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, _ContextFilter) for f in handler.filters):
            handler.addFilter(_ContextFilter())


class MeasureLogger(logging.LoggerAdapter):
    """Stamps records with the measure and dataset; per-call ``extra`` wins."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs

    def for_measure(self, measure: str) -> "MeasureLogger":
        return MeasureLogger(self.logger, {**self.extra, "measure": measure})


def get_logger(name: str, measure: Optional[str] = None, dataset: Optional[str] = None) -> MeasureLogger:
    context = dict(CONTEXT_DEFAULTS)
    if measure:
        context["measure"] = measure
    if dataset:
        context["dataset"] = dataset
    return MeasureLogger(logging.getLogger(name), context)


class _ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        for field, default in CONTEXT_DEFAULTS.items():
            if not hasattr(record, field):
                setattr(record, field, default)
        return True
