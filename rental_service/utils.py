# rental_service/utils.py
"""Shared logging setup.

Every module asks `get_logger` for its logger so the format and the level
(LOG_LEVEL) are configured in one place.
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()

def get_logger(name=__name__):
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO)
    )
    return logging.getLogger(name)

logger = get_logger("rental-service")

# rendered queries and their bound parameters; silent unless LOG_LEVEL=DEBUG
sql_logger = logger.getChild("sql")
