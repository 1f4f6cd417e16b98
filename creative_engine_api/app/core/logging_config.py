"""
Logging setup for the Creative Engine API.

``setup_logging`` attaches a console handler (plus a file handler when
``LOG_FILE`` is set) to the root logger.  It also caps the HTTP client
libraries at WARNING: their INFO records carry full request URLs,
which for the Generative Language API may include credentials.
"""

import logging
from pathlib import Path
from typing import Optional

# Loggers that emit one INFO line per outbound request.
QUIET_LOGGERS = ("httpx", "httpcore", "urllib3")


def quiet_http_clients(level: int = logging.WARNING) -> None:
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root logger.

    HTTP client loggers are quieted on every call.  Handlers are only
    attached when the root logger has none yet, so repeated calls (from
    tests, or after uvicorn configured logging) do not duplicate output.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        File to append log records to.  Missing parent directories are
        created.
    """
    quiet_http_clients()

    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
