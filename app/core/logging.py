# app/core/logging.py
import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Configure standard Python logging
def setup_logging(log_level: str = settings.LOG_LEVEL) -> logging.Logger:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout)  # Print logs to console
        ]
    )

    # SQL echo goes through its own logger
    if not settings.DB_ECHO_SQL:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return logging.getLogger("student_api")


logger = setup_logging()
