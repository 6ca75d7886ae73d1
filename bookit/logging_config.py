# bookit/logging_config.py

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None,
                  logger: Optional[logging.Logger] = None) -> None:
    # root logger unless told otherwise
    target = logger if logger is not None else logging.getLogger()
    # the app factory runs once per TestClient; configure only the first time
    if target.handlers:
        return

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))
