"""
Route pipeline log records to the GUI console.

Renders run on a worker thread, so records are queued as
``(message, level)`` tuples and drained by a QTimer on the UI thread.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from queue import Queue
from typing import Iterator

PIPELINE_LOGGER = "photo_sheet"

# Console shows INFO and above; debug records are placement-by-placement noise
CONSOLE_LEVEL = logging.INFO


class QueueLogHandler(logging.Handler):
    """Puts formatted records on a queue for the console widget."""
    
    def __init__(self, log_queue: Queue, level: int = CONSOLE_LEVEL):
        super().__init__(level)
        self.log_queue = log_queue
        # Logger level before attach, restored on detach
        self.previous_level = logging.NOTSET
        self.setFormatter(logging.Formatter("%(message)s"))
    
    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.log_queue.put((self.format(record), record.levelname))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: str = PIPELINE_LOGGER) -> QueueLogHandler:
    """
    Start forwarding a logger's records to log_queue.
    
    Lowers the logger to CONSOLE_LEVEL if it is unset or stricter; the
    original level is restored by detach_queue_handler().
    
    Returns:
        The handler, for detach_queue_handler()
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue)
    handler.previous_level = logger.level
    logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > CONSOLE_LEVEL:
        logger.setLevel(CONSOLE_LEVEL)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: str = PIPELINE_LOGGER) -> None:
    logger = logging.getLogger(logger_name)
    logger.removeHandler(handler)
    logger.setLevel(handler.previous_level)


@contextmanager
def captured_pipeline_logs(log_queue: Queue) -> Iterator[QueueLogHandler]:
    """Forward pipeline records to log_queue for the duration of one render."""
    handler = attach_queue_handler(log_queue)
    try:
        yield handler
    finally:
        detach_queue_handler(handler)
