import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

def setup_logging(verbose: bool = False) -> None:
    """Send archiver logs to stderr. Safe to call more than once."""
    root = logging.getLogger("archiver")
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
