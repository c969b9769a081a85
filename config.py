import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


DEFAULT_PAGER = "less"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Config:
    pager: str
    log_level: str


def load_config() -> Config:
    load_dotenv()

    pager = os.getenv("TRACETINT_PAGER") or DEFAULT_PAGER
    log_level = (os.getenv("TRACETINT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"TRACETINT_LOG_LEVEL is not a log level: {log_level}")

    return Config(pager=pager, log_level=log_level)
