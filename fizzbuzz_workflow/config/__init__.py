"""Configuration loading and schema.

- Optional YAML file (see configs/app.yaml)
- Strict ${ENV_VAR} expansion (missing/empty env vars are errors)
"""

from __future__ import annotations

from fizzbuzz_workflow.config.loader import load_config
from fizzbuzz_workflow.config.model import AppConfig, LoggingConfig, ShellConfig
from fizzbuzz_workflow.core.errors import ConfigError

__all__ = ["AppConfig", "ConfigError", "LoggingConfig", "ShellConfig", "load_config"]
