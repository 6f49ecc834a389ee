import logging
import sys

LOG_FORMAT = "%(asctime)s [%(process)d] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Root logger setup shared by the master and every worker.
    The pid in each line tells workers apart, they all write to the same stream.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())
    # A forked worker inherits the master's handler, don't stack a second one
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
