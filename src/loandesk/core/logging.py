# This project was developed with assistance from AI tools.
import logging
import sys


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for the whole app.
    Called once from the FastAPI lifespan.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
