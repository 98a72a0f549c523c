import logging
import sys
from app.core.config import settings

def setup_logging() -> None:
    """Configure CafeMap logging.

    Application loggers write to stdout at settings.LOG_LEVEL; the chatty
    uvicorn, httpx and geopy loggers are held at WARNING.
    """
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("geopy").setLevel(logging.WARNING)
