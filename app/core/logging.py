# app/core/logging.py
import logging

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )
