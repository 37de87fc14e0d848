# app/utils/logger_config.py

import sys

from decouple import config
from loguru import logger

LOG_LEVEL = config("LOG_LEVEL", default="INFO")

log_format = " | ".join(
    (
        "<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>",
        "<lvl>{level:<8}</>",
        "<c>{name}::{function}:{line}</>",
        "{message}",
    )
)

logger.remove()  # drop the default handler so records are not printed twice
logger.add(sys.stderr, format=log_format, level=LOG_LEVEL)
