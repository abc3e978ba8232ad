"""Shared test helpers: a private logger that keeps what it is sent."""

import logging
import uuid


class CapturingHandler(logging.Handler):
    def __init__(self):
        super().__init__(logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    @property
    def messages(self):
        return [r.getMessage() for r in self.records]


def capturing_logger(prefix: str = "test"):
    """A fresh, non-propagating logger and the handler collecting its records."""
    handler = CapturingHandler()
    log = logging.getLogger(f"{prefix}.{uuid.uuid4().hex}")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    log.addHandler(handler)
    return log, handler
