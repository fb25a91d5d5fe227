"""
up_functions.config.settings

Purpose:
    Process-level settings for a provider run (logging verbosity only).
    Providers are launched by the host without arguments, so settings come from the
    inherited environment; CLI flags override them.
"""

from __future__ import annotations

import os
from typing import Mapping

from pydantic import BaseModel, Field

ENV_TRACE = "UP_FUNCTIONS_TRACE"
ENV_QUIET = "UP_FUNCTIONS_QUIET"

_TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    trace: bool = Field(default=False, description="DEBUG logs to stderr")
    quiet: bool = Field(default=False, description="ERROR-only logs to stderr")


def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in _TRUTHY


def get_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(trace=_flag(env, ENV_TRACE), quiet=_flag(env, ENV_QUIET))
