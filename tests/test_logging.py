import logging

import pytest

from automerge.infra.logging import BoundLogger, ConsoleLogger
from tests.fakes import FakeLogger


class TestBoundLogger:
    def test_adds_context_to_every_record(self) -> None:
        fake = FakeLogger()
        logger = BoundLogger(fake, {"event": "status", "delivery_id": "d-1"})

        logger.info("Checking merge", pull_request=42)
        logger.warning("Invalid repository config")

        assert fake.records == [
            ("info", "Checking merge", {"event": "status", "delivery_id": "d-1", "pull_request": 42}),
            ("warning", "Invalid repository config", {"event": "status", "delivery_id": "d-1"}),
        ]

    def test_call_arguments_win_over_bound_context(self) -> None:
        fake = FakeLogger()

        BoundLogger(fake, {"pull_request": 1}).debug("x", pull_request=2)

        assert fake.records[0][2] == {"pull_request": 2}

    def test_nested_bind(self) -> None:
        fake = FakeLogger()

        BoundLogger(fake, {"event": "status"}).bind(delivery_id="d-1").error("boom")

        assert fake.records == [("error", "boom", {"event": "status", "delivery_id": "d-1"})]


def _capture(
    caplog: pytest.LogCaptureFixture,
    name: str,
    level: int = logging.INFO,
) -> ConsoleLogger:
    logger = ConsoleLogger(name, level="DEBUG")
    logging.getLogger(name).propagate = True
    caplog.set_level(level, logger=name)
    return logger


def _format(name: str, record: logging.LogRecord) -> str:
    return logging.getLogger(name).handlers[0].formatter.format(record)


class TestConsoleLogger:
    def test_prefixes_pull_request_reference(self, caplog: pytest.LogCaptureFixture) -> None:
        name = "automerge-test-console"
        logger = _capture(caplog, name)

        logger.bind(event="check_suite.completed").info(
            "Merged pull request",
            repository="acme/widgets",
            pull_request=42,
            delivery_id=None,
        )

        record = caplog.records[-1]
        assert record.getMessage() == "Merged pull request"
        assert record.context == {
            "event": "check_suite.completed",
            "repository": "acme/widgets",
            "pull_request": 42,
            "delivery_id": None,
        }
        assert _format(name, record).endswith(
            "Merged pull request [acme/widgets#42] | event='check_suite.completed'"
        )

    def test_pull_request_without_repository(self, caplog: pytest.LogCaptureFixture) -> None:
        name = "automerge-test-console-number"
        logger = _capture(caplog, name)

        logger.warning("Merge not performed", pull_request=7, detail="nope")

        assert _format(name, caplog.records[-1]).endswith(
            "Merge not performed [#7] | detail='nope'"
        )

    def test_plain_message(self, caplog: pytest.LogCaptureFixture) -> None:
        name = "automerge-test-console-plain"
        logger = _capture(caplog, name)

        logger.info("Event handled")

        assert _format(name, caplog.records[-1]).endswith("automerge-test-console-plain: Event handled")

    def test_exception_keeps_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        name = "automerge-test-console-exception"
        logger = _capture(caplog, name)

        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.exception("Event handling failed", event="status")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None

    def test_level_from_name(self) -> None:
        ConsoleLogger("automerge-test-console-level", level="warning")

        assert logging.getLogger("automerge-test-console-level").level == logging.WARNING

    def test_unknown_level_name(self) -> None:
        with pytest.raises(ValueError):
            ConsoleLogger("automerge-test-console-bad-level", level="chatty")
