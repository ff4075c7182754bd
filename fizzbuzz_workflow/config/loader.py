"""YAML config loader with strict env expansion.

`${ENV_VAR}` inside string values is replaced from the environment; a missing
or empty variable is a ConfigError. A `.env` file in the working directory is
loaded first when present.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from fizzbuzz_workflow.config.model import AppConfig, LoggingConfig, ShellConfig
from fizzbuzz_workflow.core.errors import ConfigError

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _expand_env_in_str(value: str, *, path: str) -> str:
    def repl(match: re.Match[str]) -> str:
        key = match.group(1)
        if os.environ.get(key, "") == "":
            raise ConfigError(f"environment variable {key!r} is not set", path=path)
        return os.environ[key]

    return _ENV_PATTERN.sub(repl, value)


def _expand_env(obj: Any, *, path: str) -> Any:
    if isinstance(obj, str):
        return _expand_env_in_str(obj, path=path)
    if isinstance(obj, list):
        return [_expand_env(v, path=f"{path}[{i}]") for i, v in enumerate(obj)]
    if isinstance(obj, dict):
        return {k: _expand_env(v, path=f"{path}.{k}" if path else str(k)) for k, v in obj.items()}
    return obj


def _section(raw: dict[str, Any], key: str) -> dict[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError("must be a mapping", path=key)
    return value


def _as_bool(value: Any, *, path: str) -> bool:
    if isinstance(value, bool):
        return value
    # Env expansion always yields strings.
    if isinstance(value, str) and value.strip().lower() in {"true", "1", "yes", "on"}:
        return True
    if isinstance(value, str) and value.strip().lower() in {"false", "0", "no", "off"}:
        return False
    raise ConfigError(f"expected a boolean, got {value!r}", path=path)


def _parse_logging(raw: dict[str, Any]) -> LoggingConfig:
    level = str(raw.get("level", LoggingConfig.level)).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"unknown log level {level!r}", path="logging.level")
    json_output = _as_bool(raw.get("json", LoggingConfig.json), path="logging.json")
    return LoggingConfig(level=level, json=json_output)


def _parse_shell(raw: dict[str, Any]) -> ShellConfig:
    repeat = _as_bool(raw.get("repeat", ShellConfig.repeat), path="shell.repeat")
    quit_words = raw.get("quit_words", list(ShellConfig.quit_words))
    if not isinstance(quit_words, list) or not all(isinstance(w, str) for w in quit_words):
        raise ConfigError("must be a list of strings", path="shell.quit_words")
    return ShellConfig(repeat=repeat, quit_words=tuple(w.strip() for w in quit_words))


def load_config(path: str | Path | None = None, *, load_dotenv_file: bool = True) -> AppConfig:
    """Load the app config.

    With no path, built-in defaults are returned (after `.env` is loaded).

    Raises:
        ConfigError: If the file is missing, unreadable, has the wrong shape,
            or references an unset environment variable.
    """

    if load_dotenv_file:
        load_dotenv(Path.cwd() / ".env", override=False)

    if path is None:
        return AppConfig()

    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError("config file does not exist", path=str(config_path))

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"failed to read YAML: {e}", path=str(config_path)) from e

    if not isinstance(raw, dict):
        raise ConfigError("top level must be a YAML mapping", path=str(config_path))

    expanded = _expand_env(raw, path="")

    return AppConfig(
        logging=_parse_logging(_section(expanded, "logging")),
        shell=_parse_shell(_section(expanded, "shell")),
    )
