import logging
from fastapi.logger import logger as fastapi_logger

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO"):
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Faker reports every locale lookup at DEBUG
    logging.getLogger("faker").setLevel(max(logging.getLevelName(level), logging.INFO))

    # Requests are logged by our own middleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    fastapi_logger.handlers = logging.getLogger("uvicorn").handlers
    fastapi_logger.setLevel(level)
