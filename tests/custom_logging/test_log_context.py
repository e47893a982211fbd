import logging

from pdf_preview.custom_logging.log_context import ContextFilter, request_id_context, setup_logging


def create_log_record(msg):
    # Create a real LogRecord for testing
    return logging.LogRecord(
        name="test", level=logging.INFO, pathname=__file__, lineno=0, msg=msg, args=(), exc_info=None
    )


def test_context_filter_injects_request_id():
    token = request_id_context.set("req-123")
    try:
        record = create_log_record("Test message")
        result = ContextFilter().filter(record)
    finally:
        request_id_context.reset(token)
    assert result is True
    assert record.msg.startswith("req-123 ")
    assert "Test message" in record.msg


def test_context_filter_no_request_id():
    token = request_id_context.set(None)
    try:
        record = create_log_record("Test message")
        result = ContextFilter().filter(record)
    finally:
        request_id_context.reset(token)
    assert result is True
    assert record.msg == "Test message"


def test_setup_logging_sets_root_logger(monkeypatch):
    class DummyHandler(logging.StreamHandler):
        def __init__(self):
            super().__init__()
            self.filters = []
            self.formatter = None

        def setFormatter(self, fmt):
            self.formatter = fmt

        def addFilter(self, filter):
            self.filters.append(filter)

    dummy_logger = logging.getLogger("test_logger")
    monkeypatch.setattr(logging, "getLogger", lambda: dummy_logger)
    dummy_logger.handlers.clear()
    dummy_logger.addHandler(logging.NullHandler())
    monkeypatch.setattr(logging, "StreamHandler", DummyHandler)

    setup_logging()
    # Pre-existing handlers are replaced by a single one
    assert len(dummy_logger.handlers) == 1
    handler = dummy_logger.handlers[0]
    assert any(isinstance(f, ContextFilter) for f in handler.filters)
    assert handler.formatter is not None
    assert dummy_logger.level == logging.INFO
