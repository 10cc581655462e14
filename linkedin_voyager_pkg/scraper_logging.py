import logging
from typing import Optional

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the CLI and the API server.

    ``level`` overrides ``SCRAPER_LOG_LEVEL``. Library code only ever calls
    ``logging.getLogger(__name__)``; applications decide where it goes.
    """
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
