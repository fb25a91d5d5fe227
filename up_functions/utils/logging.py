# up_functions/utils/logging.py
# Purpose: Shared logging helpers (logger factory + adapters) for up_functions.
# Notes: CLI owns handler/format/level and routes logs to stderr. stdout belongs to the
# JSON response, so this module must never print.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping


LOGGER_NAMESPACE = "up_functions"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger under the up_functions namespace. Does NOT configure handlers/levels.
    """
    # __name__ of a module in this package is already namespaced.
    if name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(name)

    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Prefix log messages with stable key=value context (provider=..., function=...).
    """

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any]):
        super().__init__(logger, dict(extra))

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra") or {}
        merged = {**self.extra, **extra}

        if merged:
            ctx = " ".join(f"{k}={merged[k]}" for k in sorted(merged.keys()) if merged[k] is not None)
            if ctx:
                msg = f"{ctx} | {msg}"

        kwargs["extra"] = {}
        return msg, kwargs


@dataclass(frozen=True)
class LogCtx:
    """
    Fields identifying one invocation.
    """
    provider: str | None = None
    function: str | None = None

    def as_extra(self) -> dict[str, Any]:
        return {
            "provider": self.provider,
            "function": self.function,
        }


def with_ctx(logger: logging.Logger, ctx: LogCtx) -> ContextLoggerAdapter:
    return ContextLoggerAdapter(logger, ctx.as_extra())


def is_trace_enabled(logger: logging.Logger | logging.LoggerAdapter) -> bool:
    """
    Lightweight check to avoid rendering large request/response payloads for debug logs.
    """
    return logger.isEnabledFor(logging.DEBUG)
