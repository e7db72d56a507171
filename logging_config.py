from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from settings import Settings


def setup_logging(settings: Settings) -> None:
    logging.captureWarnings(True)

    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(settings.log_level)

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    root.addHandler(sh)

    if settings.log_file_path:
        fh = RotatingFileHandler(settings.log_file_path, maxBytes=2_000_000, backupCount=2)
        fh.setFormatter(fmt)
        root.addHandler(fh)
