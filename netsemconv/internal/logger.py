"""
Logging utilities for internal use.
Usage:
    from netsemconv.internal.logger import get_logger
    log = get_logger(__name__)

    log.debug("dropping non-positive port %r for %s", port, key)

Every logger returned by ``get_logger`` shares a rate limiter: the same log call site
(pathname and line number) is emitted at most once every ``NETSEMCONV_LOGGING_RATE``
seconds (default 60). The number of records dropped in between is reported on the next
emitted record, e.g.::

    WARNING netsemconv.contrib._utils: unparseable REMOTE_PORT 'abc' [3 skipped]

``NETSEMCONV_LOGGING_RATE=0`` disables rate limiting. Loggers with an effective level of
DEBUG are never rate limited.
"""

import collections
import logging
import os
import time
from typing import DefaultDict
from typing import Tuple


SECOND = 1
MINUTE = 60 * SECOND


def get_logger(name: str) -> logging.Logger:
    """
    Retrieve or create a ``Logger`` instance with the rate limiter filter attached.
    """
    logger = logging.getLogger(name)
    # addFilter will only add the filter if it is not already present
    logger.addFilter(log_filter)
    logger.propagate = True
    return logger


class LoggingBucket:
    """Time bucket of a single call site, with the number of records skipped in it."""

    def __init__(self, bucket: float, skipped: int):
        self.bucket = bucket
        self.skipped = skipped

    def __repr__(self):
        return f"LoggingBucket({self.bucket}, {self.skipped})"

    def is_sampled(self, record: logging.LogRecord, rate: float) -> bool:
        current = time.monotonic()
        if current - self.bucket >= rate:
            self.bucket = current
            record.skipped = self.skipped
            self.skipped = 0
            return True
        self.skipped += 1
        return False


_MINF = float("-inf")

_buckets: DefaultDict[Tuple[str, int], LoggingBucket] = collections.defaultdict(lambda: LoggingBucket(_MINF, 0))

# Read straight from the environment: settings modules log through this one.
_rate_limit = int(os.getenv("NETSEMCONV_LOGGING_RATE", default=MINUTE))


def log_filter(record: logging.LogRecord) -> bool:
    """
    Decide whether ``record`` is emitted (True) or dropped (False).
    """
    logger = logging.getLogger(record.name)
    if not _rate_limit or logger.getEffectiveLevel() == logging.DEBUG:
        return True
    return _buckets[(record.pathname, record.lineno)].is_sampled(record, _rate_limit)


class NSFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        skipped = getattr(record, "skipped", 0)
        skip_str = f" [{skipped} skipped]" if skipped else ""
        return f"{record.levelname} {super().format(record)}{skip_str}"


# default formatter for all netsemconv loggers
root_logger = logging.getLogger("netsemconv")
if not root_logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(NSFormatter("%(name)s: %(message)s"))
    root_logger.addHandler(_handler)
root_logger.propagate = True
