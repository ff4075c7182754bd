from __future__ import annotations

import argparse
import sys

from fizzbuzz_workflow.config import ConfigError, load_config
from fizzbuzz_workflow.config.loader import LOG_LEVELS
from fizzbuzz_workflow.core.types import Success
from fizzbuzz_workflow.observability import configure_logging, get_logger
from fizzbuzz_workflow.runtime.shell import Shell


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="FizzBuzz for 1..N, with N read from the user")
    p.add_argument("--config", default=None, help="YAML config path")
    p.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=sorted(LOG_LEVELS),
        help="log level (overrides config)",
    )
    p.add_argument("--number", default=None, help="answer once for this input instead of prompting")
    p.add_argument("--repeat", action="store_true", help="keep prompting until EOF or a quit word")
    return p


def _write_line(text: str) -> None:
    print(text, flush=True)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        print(f"config error: {e}", file=sys.stderr)
        return 2

    configure_logging(level=args.log_level or cfg.logging.level, json_output=cfg.logging.json)
    log = get_logger("fizzbuzz.cli")

    shell = Shell(read_line=input, write_line=_write_line, quit_words=cfg.shell.quit_words)

    if args.number is not None:
        result = shell.answer(args.number)
        return 0 if isinstance(result, Success) else 1

    repeat = args.repeat or cfg.shell.repeat
    try:
        result = shell.run(repeat=repeat)
    except EOFError:
        log.warning("no_input")
        return 1
    except KeyboardInterrupt:
        log.info("interrupted")
        return 130

    if repeat:
        return 0
    return 0 if isinstance(result, Success) else 1
