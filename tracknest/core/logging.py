# ============================================================================
# FILE: tracknest/core/logging.py
# ============================================================================
import logging
import sys
from tracknest.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

def setup_logging(level: str = None):
    """Configure root logging once for the API process"""
    root = logging.getLogger()
    resolved = (level or settings.LOG_LEVEL).upper()
    root.setLevel(resolved)

    # Avoid stacking handlers when the app module is imported more than once
    if any(getattr(h, "_tracknest", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._tracknest = True
    root.addHandler(handler)

    # SQL echo stays off unless DEBUG is set
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )
