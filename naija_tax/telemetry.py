from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path

from naija_tax.config import Settings, get_settings

LOGGER_NAME = "naija_tax"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

Hook = Callable[[logging.Logger], None]


def _open_telemetry_sink(logger: logging.Logger, log_dir: str | None, app_label: str) -> logging.Handler | None:
    if not log_dir:
        return None
    logs_dir = Path(log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(logger.level or logging.INFO)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler


def _invoke_hook(hook: Hook | None, logger: logging.Logger) -> None:
    if hook is None:
        return
    try:
        hook(logger)
    except Exception:  # pragma: no cover - hooks are user provided
        logger.exception("Session lifecycle hook failed")


@contextmanager
def cli_session(
    app_label: str,
    *,
    settings: Settings | None = None,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Iterator[logging.Logger]:
    """Configure ``naija_tax`` logging for one CLI run and tear it down after."""
    settings = settings or get_settings()
    base_logger = logging.getLogger(LOGGER_NAME)
    previous_level = base_logger.level
    base_logger.setLevel(settings.numeric_log_level())
    logger = base_logger.getChild(app_label)
    telemetry_handler = _open_telemetry_sink(base_logger, settings.log_dir, app_label)

    logger.info(
        "Startup complete: version=%s sha=%s default_category=%s",
        settings.build_version,
        settings.build_sha,
        settings.default_category.value,
    )
    try:
        _invoke_hook(startup_hook, logger)
        yield logger
    finally:
        _invoke_hook(shutdown_hook, logger)
        logger.info("Shutdown complete")
        if telemetry_handler is not None:
            base_logger.removeHandler(telemetry_handler)
            telemetry_handler.close()
        base_logger.setLevel(previous_level)


__all__ = ["LOGGER_NAME", "LOG_FORMAT", "cli_session"]
