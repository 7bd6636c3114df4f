from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from core.config import BACKEND_DIR


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Third-party loggers pinned regardless of the app level.
_PINNED_LEVELS = {
    "sqlalchemy.engine": logging.WARNING,
    "multipart": logging.INFO,
    "python_multipart": logging.INFO,
    "httpx": logging.WARNING,
}


def level_for(environment: str, override: str | None = None) -> int:
    if override:
        level = logging.getLevelName(override.strip().upper())
        if isinstance(level, int):
            return level
    env = (environment or "development").lower().strip()
    return logging.INFO if env == "production" else logging.DEBUG


def _rotating_file(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(*, environment: str, level: str | None = None) -> None:
    """Configure root logging once per process.

    Console output everywhere; production also writes ``logs/college.log``.
    ``level`` (e.g. ``"WARNING"``) overrides the per-environment default.
    """

    root = logging.getLogger()
    if root.handlers:
        return

    resolved = level_for(environment, level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console = logging.StreamHandler()
    console.setLevel(resolved)
    console.setFormatter(formatter)
    handlers: list[logging.Handler] = [console]

    if (environment or "").lower().strip() == "production":
        handlers.append(_rotating_file(Path(BACKEND_DIR) / "logs" / "college.log", resolved, formatter))

    logging.basicConfig(level=resolved, handlers=handlers)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).setLevel(resolved)
    for name, pinned in _PINNED_LEVELS.items():
        logging.getLogger(name).setLevel(max(pinned, resolved))
