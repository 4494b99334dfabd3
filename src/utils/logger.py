import logging
from rich.console import Console
from rich.logging import RichHandler
from src.config import settings

def setup_logger(name: str = "yt_feed_analytics") -> logging.Logger:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)]
    )
    return logging.getLogger(name)

logger = setup_logger()
