"""
Logging configuration — set up once by the CLI before anything runs.

Console level precedence:
    --debug  >  --verbose  >  --quiet  >  WPD_LOG_LEVEL  >  WARNING

WPD_LOG_FILE adds a file handler (level WPD_LOG_FILE_LEVEL, else the
console level).  Every handler carries a ``SecretMaskFilter`` so a
generated password never reaches a log line, even by accident.
"""

from __future__ import annotations

import logging
import os
import sys

MASK = "********"

# (format, datefmt) per console level; anything above INFO is bare text
_CONSOLE_FORMATS: dict[int, tuple[str, str | None]] = {
    logging.DEBUG: ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    logging.INFO: ("%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
}
_PLAIN_FORMAT: tuple[str, str | None] = ("%(message)s", None)
_FILE_FORMAT = ("%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%Y-%m-%d %H:%M:%S")


class SecretMaskFilter(logging.Filter):
    """Replace registered secret values in rendered log messages."""

    def __init__(self) -> None:
        super().__init__()
        self.secrets: set[str] = set()

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.secrets:
            return True
        message = record.getMessage()
        masked = message
        for secret in self.secrets:
            masked = masked.replace(secret, MASK)
        if masked != message:
            record.msg, record.args = masked, None
        return True


_mask_filter = SecretMaskFilter()


def register_secrets(*values: str) -> None:
    """Mask *values* in every log record from now on."""
    _mask_filter.secrets.update(v for v in values if v)


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    env_level: str | None = None,
) -> str:
    """Pick the console level name from CLI flags, then the env var."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return env_level or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a stderr (and optional file) handler."""
    console_level = _parse_level(level)
    fmt, datefmt = _console_format(console_level)
    handlers = [_handler(logging.StreamHandler(sys.stderr), console_level, fmt, datefmt)]

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handlers.append(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), file_level, *_FILE_FORMAT)
        )

    root = logging.getLogger()
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(min(h.level for h in handlers))

    # A closed or broken stream must not turn into a traceback
    logging.raiseExceptions = False


def configure_cli_logging(*, debug: bool, verbose: bool, quiet: bool) -> None:
    """CLI entry: resolve levels from flags and WPD_LOG_* variables."""
    setup_logging(
        level=resolve_level(
            debug=debug,
            verbose=verbose,
            quiet=quiet,
            env_level=os.environ.get("WPD_LOG_LEVEL"),
        ),
        log_file=os.environ.get("WPD_LOG_FILE"),
        log_file_level=os.environ.get("WPD_LOG_FILE_LEVEL"),
    )


def _handler(
    handler: logging.Handler, level: int, fmt: str, datefmt: str | None
) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(_mask_filter)
    return handler


def _console_format(level: int) -> tuple[str, str | None]:
    for threshold in sorted(_CONSOLE_FORMATS):
        if level <= threshold:
            return _CONSOLE_FORMATS[threshold]
    return _PLAIN_FORMAT


def _parse_level(level: str | None) -> int:
    """Convert a level name string to its numeric constant (WARNING if unknown)."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
