"""Logging setup shared by the API and the scripts."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure the root logger once for the whole process."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    # SQLAlchemy is very chatty on INFO
    if not debug:
        for name in ("sqlalchemy.engine", "sqlalchemy.pool", "sqlalchemy.dialects"):
            logging.getLogger(name).setLevel(logging.WARNING)
