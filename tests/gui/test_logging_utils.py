"""
Tests for forwarding pipeline logs to the console queue.
"""
import logging
from queue import Queue

from photo_sheet.gui.utils.logging_utils import (
    PIPELINE_LOGGER,
    QueueLogHandler,
    attach_queue_handler,
    captured_pipeline_logs,
    detach_queue_handler,
)


class TestQueueLogHandler:
    def test_capture_when_pipeline_logs_then_queued(self):
        # Arrange
        log_queue = Queue()
        pipeline_log = logging.getLogger(f"{PIPELINE_LOGGER}.builder.controller")

        # Act
        with captured_pipeline_logs(log_queue):
            pipeline_log.info("Computed 30 placements")

        # Assert
        assert log_queue.get_nowait() == ("Computed 30 placements", "INFO")
        assert log_queue.empty()

    def test_capture_when_debug_then_filtered(self):
        log_queue = Queue()

        with captured_pipeline_logs(log_queue):
            logging.getLogger(f"{PIPELINE_LOGGER}.builder.output").debug("Drew passport")

        assert log_queue.empty()

    def test_capture_when_exited_then_handler_removed(self):
        log_queue = Queue()

        with captured_pipeline_logs(log_queue) as handler:
            assert handler in logging.getLogger(PIPELINE_LOGGER).handlers

        assert handler not in logging.getLogger(PIPELINE_LOGGER).handlers

    def test_attach_when_called_then_returns_handler(self):
        handler = attach_queue_handler(Queue())
        try:
            assert isinstance(handler, QueueLogHandler)
        finally:
            detach_queue_handler(handler)

    def test_detach_when_level_lowered_then_restored(self):
        # Arrange
        pipeline_log = logging.getLogger(PIPELINE_LOGGER)
        original = pipeline_log.level
        pipeline_log.setLevel(logging.WARNING)
        try:
            # Act
            with captured_pipeline_logs(Queue()):
                assert pipeline_log.level == logging.INFO
            
            # Assert
            assert pipeline_log.level == logging.WARNING
        finally:
            pipeline_log.setLevel(original)

    def test_detach_when_level_unset_then_unset_again(self):
        pipeline_log = logging.getLogger(PIPELINE_LOGGER)
        original = pipeline_log.level
        pipeline_log.setLevel(logging.NOTSET)
        try:
            handler = attach_queue_handler(Queue())
            detach_queue_handler(handler)
            
            assert pipeline_log.level == logging.NOTSET
        finally:
            pipeline_log.setLevel(original)
