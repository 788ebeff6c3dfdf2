import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s:%(lineno)d  →  %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
) -> None:
    """
    Sets the root level and, when `log_file` is given, appends records to it.
    Without any handler, records go to stderr so paged stdout stays clean.
    """
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if log_file:
        log_path = Path(log_file).resolve()
        already_logging = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == str(log_path)
            for h in root.handlers
        )
        if not already_logging:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
            handler.setFormatter(formatter)
            root.addHandler(handler)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)
        root.addHandler(handler)
