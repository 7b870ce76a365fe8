from __future__ import annotations

import logging
from pathlib import Path

from firm_records.builder import FirmRecordBuilder
from firm_records.config import Settings
from firm_records.logging_config import configure_logging, configure_logging_from_settings


def test_configure_logging_adds_stream_handler() -> None:
    configure_logging(None)
    root = logging.getLogger()
    assert any(isinstance(h, logging.StreamHandler) for h in root.handlers)


def test_configure_logging_from_settings_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "nested" / "firms.log"
    configure_logging_from_settings(Settings(coerce_all_nulls=False, log_level=logging.DEBUG, log_path=log_file))
    assert logging.getLogger().level == logging.DEBUG
    FirmRecordBuilder().set_firm_crd_nb("777").build()
    for h in logging.getLogger().handlers:
        h.flush()
    assert "crd=777" in log_file.read_text(encoding="utf-8")
    configure_logging(None)
