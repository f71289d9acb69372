"""
Tests for component_picker/utils/logging.py.

What we test
------------
1. Console records go to stderr, not stdout.
2. Level and optional file handler follow LoggingConfig.
3. JSON format emits one object per line with extra= fields.
"""

from __future__ import annotations

import json
import logging

from component_picker.config import LoggingConfig
from component_picker.utils.logging import configure_logging


class TestConfigureLogging:
    def test_console_writes_to_stderr(self, capsys):
        configure_logging(LoggingConfig(level="INFO"))
        logging.getLogger("component_picker.test").info("catalog loaded")
        out, err = capsys.readouterr()
        assert out == ""
        assert "catalog loaded" in err

    def test_level_filters_records(self, capsys):
        configure_logging(LoggingConfig(level="WARNING"))
        logging.getLogger("component_picker.test").debug("hidden")
        assert "hidden" not in capsys.readouterr().err

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "picker.log"
        configure_logging(LoggingConfig(level="INFO", log_file=str(log_file)))
        logging.getLogger("component_picker.test").info("to file")
        for h in logging.getLogger().handlers:
            h.flush()
        assert "to file" in log_file.read_text(encoding="utf-8")

    def test_json_format(self, capsys):
        configure_logging(LoggingConfig(level="INFO", json_format=True))
        logging.getLogger("component_picker.test").info("scored %s", "Toast", extra={"score": 67})
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["msg"] == "scored Toast"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "component_picker.test"
        assert payload["score"] == 67
