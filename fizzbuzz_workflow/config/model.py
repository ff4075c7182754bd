from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"
    json: bool = True


@dataclass(frozen=True)
class ShellConfig:
    repeat: bool = False
    quit_words: tuple[str, ...] = ("q", "quit", "exit")


@dataclass(frozen=True)
class AppConfig:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
