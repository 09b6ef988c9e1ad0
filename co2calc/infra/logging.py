# co2calc/infra/logging.py
# -*- coding: utf-8 -*-

"""
Logging setup shared by every co2calc entry point.

Library code never configures handlers: it calls `get_logger(__name__)` and
logs. Scripts and the `python -m` helpers call `init_logging()` exactly once,
which sends records to stdout and, on request, to a per-run file.

    init_logging(level="DEBUG", write_output=True)   # logs/<script>__<ts>.log
    init_logging(level="INFO", log_file=Path("out/run.log"))

The CO2CALC_LOG_LEVEL environment variable wins over the `level` argument,
so a batch job can be made verbose without touching its command line.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from co2calc.core.types import StrPath

LOG_LEVEL_ENV = "CO2CALC_LOG_LEVEL"

LOG_FORMAT = "[{asctime}][{levelname}][{name}] {message}"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_DEFAULT_LOGS_DIR = Path("logs")
_FALLBACK_RUN_NAME = "co2calc"

# state of the last init_logging() call
_logs_dir: Path = _DEFAULT_LOGS_DIR
_log_path: Optional[Path] = None


def get_logs_dir() -> Path:
    """Directory used for log files by the last `init_logging()` call."""
    return _logs_dir


def get_current_log_path() -> Optional[Path]:
    """Absolute path of the active run log, or None when logging is stdout-only."""
    return _log_path


def _resolve_level(level: str) -> int:
    requested = os.getenv(LOG_LEVEL_ENV) or level
    resolved = logging.getLevelName(str(requested).strip().upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def _run_log_file(base_dir: Path) -> Path:
    run_name = Path(sys.argv[0] or "").stem
    if run_name in {"", "-m", "-c", "__main__"}:
        run_name = _FALLBACK_RUN_NAME
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return base_dir / f"{run_name}__{stamp}.log"


def init_logging(
      level: str = "INFO"
    , *
    , force: bool = True
    , write_output: bool = False
    , log_file: Optional[StrPath] = None
    , logs_dir: Optional[StrPath] = None
) -> None:
    """
    Configure the root logger.

    Parameters
    ----------
    level : str, default "INFO"
        Level name. Unknown names fall back to INFO. Overridden by
        CO2CALC_LOG_LEVEL when that variable is set.
    force : bool, default True
        Drop handlers already attached to the root logger.
    write_output : bool, default False
        Also write a per-run file `<logs_dir>/<script>__<YYYYmmdd-HHMMSS>.log`.
    log_file : path, optional
        Explicit log file (implies file output). Parents are created.
    logs_dir : path, optional
        Directory for the per-run file. Defaults to `./logs`.
    """
    global _logs_dir, _log_path

    numeric_level = _resolve_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT, style="{")

    root = logging.getLogger()
    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
    root.setLevel(numeric_level)

    console = logging.StreamHandler(stream=sys.stdout)
    console.setFormatter(formatter)
    root.addHandler(console)

    _log_path = None
    if log_file is not None:
        target = Path(log_file)
    elif write_output:
        target = _run_log_file(Path(logs_dir) if logs_dir is not None else _DEFAULT_LOGS_DIR)
    else:
        target = None

    if target is not None:
        target.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(target, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        _logs_dir = target.parent
        _log_path = target.resolve()

    get_logger(__name__).debug(
        "Logging ready: level=%s file=%s"
        , logging.getLevelName(numeric_level)
        , _log_path or "-"
    )


def log_banner(
      log: logging.Logger
    , msg: str
    , *
    , char: str = "="
    , width: int = 60
    , box: bool = False
) -> None:
    """
    Emit a three-line INFO banner around `msg`.

    With `box=True` the message is centred inside a double-line box whose
    inner width is `width`.
    """
    if box:
        text = f" {msg} "
        free = max(0, width - len(text))
        left = free // 2
        log.info("╔%s╗", "═" * width)
        log.info("║%s%s%s║", " " * left, text, " " * (free - left))
        log.info("╚%s╝", "═" * width)
        return

    rule = char * width
    for line in (rule, msg, rule):
        log.info(line)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "co2calc")
