import logging
import os

LOG_LEVEL = os.environ.get("STOREFRONT_LOG_LEVEL", "INFO").upper()

logger = logging.getLogger("storefront")
if not logger.handlers:
    logger.setLevel(LOG_LEVEL)
    ch = logging.StreamHandler()
    fmt = logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
