from __future__ import annotations

import json

from geh import logger as package_logger
from geh.logging import _merge_extra, configure_logging, get_logger
from geh.settings import Settings


def test_stdlib_logger_is_configured(capsys) -> None:
    configure_logging(settings=Settings(log_json=False, log_level="INFO"), force=True)
    logger = get_logger("tests")
    logger.info("hello")

    captured = capsys.readouterr()
    assert "hello" in captured.err.lower()


def test_log_file_receives_records(tmp_path) -> None:
    log_file = tmp_path / "geh.log"
    configure_logging(settings=Settings(log_json=True, log_file=str(log_file)), force=True)
    get_logger("tests.file").warning("written to file")

    assert "written to file" in log_file.read_text(encoding="utf-8")
    configure_logging(settings=Settings(log_json=False), force=True)


def test_package_logger_created_on_import() -> None:
    assert callable(getattr(package_logger, "info", None))


def test_merge_extra_lifts_call_site_fields() -> None:
    event = {"event": "Document fetched", "level": "info", "extra": {"url": "http://h.test/", "level": "debug"}}

    merged = _merge_extra(None, "info", event)

    assert merged == {"event": "Document fetched", "level": "info", "url": "http://h.test/"}


def test_json_records_carry_extra_fields_at_top_level(tmp_path) -> None:
    log_file = tmp_path / "geh.log"
    configure_logging(settings=Settings(log_json=True, log_file=str(log_file)), force=True)
    get_logger("tests.extra").warning("Image links extracted", extra={"uri": "http://h.test/", "count": 2})

    record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])

    assert record["message"] == "Image links extracted"
    assert record["uri"] == "http://h.test/"
    assert record["count"] == 2
    assert "extra" not in record
    configure_logging(settings=Settings(log_json=False), force=True)
