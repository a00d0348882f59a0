import logging
import sys

from scarf_events.constants import DIAGNOSTIC_LOG_FORMAT, DIAGNOSTIC_LOGGER_NAME


class StderrHandler(logging.StreamHandler):
    """
    Stream handler bound to whatever `sys.stderr` is at emit time, so
    redirected or captured stderr still receives the diagnostics.
    """

    def __init__(self):
        super().__init__(stream=sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_diagnostic_logger() -> logging.Logger:
    """
    Get the verbose diagnostic sink.

    Lines go to stderr as `<timestamp> [scarf] <message>`, independently of
    how the host application configured logging. The handler is only added
    once per process.
    """
    logger = logging.getLogger(DIAGNOSTIC_LOGGER_NAME)

    if not any(isinstance(h, StderrHandler) for h in logger.handlers):
        handler = StderrHandler()
        handler.setFormatter(logging.Formatter(DIAGNOSTIC_LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger
