import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level="INFO"):
    """
    Configures console logging for the application.
    Safe to call more than once; handlers are only attached the first time.
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    root = logging.getLogger("layer_sketch")
    root.setLevel(log_level)

    if root.handlers:
        return root

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    root.addHandler(handler)
    return root
