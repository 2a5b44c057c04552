import logging
from collections.abc import Generator

import pytest

from casebrief.logging.logger import Log


@pytest.fixture(autouse=True)
def restore_logger() -> Generator[None, None, None]:
    logger = Log._logger
    level, handlers = logger.level, list(logger.handlers)
    logger.handlers.clear()
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLog:
    def test_configure_sets_level(self) -> None:
        Log.configure("debug")
        assert Log._logger.level == logging.DEBUG
        assert Log.is_debug_enabled() is True

    def test_configure_adds_single_handler(self) -> None:
        Log.configure("INFO")
        Log.configure("WARNING")
        assert len(Log._logger.handlers) == 1
        assert Log.is_debug_enabled() is False

    def test_messages_reach_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        Log.configure("INFO")
        with caplog.at_level(logging.INFO, logger="casebrief"):
            Log.info("Analysis 1 started for order.pdf")
            Log.debug("hidden")
        assert "Analysis 1 started for order.pdf" in caplog.text
        assert "hidden" not in caplog.text

    def test_exception_includes_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="casebrief"):
            try:
                raise RuntimeError("boom")
            except RuntimeError:
                Log.exception("Analysis failed")
        assert caplog.records[-1].exc_info is not None
