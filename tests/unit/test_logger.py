import logging
from collections.abc import Iterator

import pytest

from wordfilter.logging.logger import Log


@pytest.fixture()
def restore_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger("wordfilter")
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


class TestLog:
    def test_configure_sets_level(self, restore_logger: logging.Logger) -> None:
        Log.configure("debug")
        assert restore_logger.level == logging.DEBUG

    def test_configure_adds_single_handler(self, restore_logger: logging.Logger) -> None:
        restore_logger.handlers = []
        Log.configure("INFO")
        Log.configure("INFO")
        assert len(restore_logger.handlers) == 1

    def test_warning_is_emitted(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="wordfilter"):
            Log.warning("seed missing")
        assert "seed missing" in caplog.text

    def test_context_is_attached_to_record(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="wordfilter"):
            Log.info("seeded", seed="profanity", words=3)
        record = caplog.records[-1]
        assert record.seed == "profanity"  # type: ignore[attr-defined]
        assert record.words == 3  # type: ignore[attr-defined]
