from __future__ import annotations

import logging

from result import Err, Ok

from dirnav.services.logs import setup_logging


def test_setup_logging_creates_directory_and_writes(tmp_path) -> None:
    log_file = tmp_path / "state" / "dirnav" / "dirnav.log"

    result = setup_logging(str(log_file), "DEBUG")

    assert result == Ok(log_file)
    logging.getLogger("dirnav.services.listing").debug("hello from test")
    for handler in logging.getLogger("dirnav").handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text()


def test_setup_logging_replaces_previous_handler(tmp_path) -> None:
    setup_logging(str(tmp_path / "one.log"))
    setup_logging(str(tmp_path / "two.log"))
    assert len(logging.getLogger("dirnav").handlers) == 1


def test_setup_logging_reports_unusable_directory(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    result = setup_logging(str(blocker / "dirnav.log"))

    assert isinstance(result, Err)
    assert "cannot open log file" in result.unwrap_err().lower()
