import json
import logging
import logging.handlers

import pytest

from strictprops.core.config import LoggerConfig
from strictprops.utils.logging import ColouredFormatter
from strictprops.utils.logging import JSONFormatter
from strictprops.utils.logging import StrictFormatter
from strictprops.utils.logging import configure
from strictprops.utils.logging import get_logger


@pytest.fixture
def record():
    return logging.makeLogRecord(
        {
            "name": "strictprops.core.guard",
            "levelname": "WARNING",
            "levelno": logging.WARNING,
            "msg": "Read of an undeclared field",
            "owner": "Contact",
            "field": "age",
        }
    )


@pytest.mark.unit
class TestFormatters:
    def test_extra_fields(self, record):
        formatter = StrictFormatter(fmt="%(extra)s | %(message)s")
        output = formatter.format(record)
        assert "field: age" in output
        assert "owner: Contact" in output
        assert output.endswith(" | Read of an undeclared field")

    def test_extra_format(self, record):
        formatter = StrictFormatter(
            fmt="%(extra)s",
            extra_format="[{key}={value}]",
            extra_separator="",
        )
        assert "[field=age][owner=Contact]" in formatter.format(record)

    def test_no_extra_fields(self):
        record = logging.makeLogRecord({"msg": "Mikasa"})
        formatter = StrictFormatter(fmt="%(extra)s%(message)s")
        assert formatter.format(record) == "Mikasa"

    def test_json(self, record):
        payload = json.loads(JSONFormatter().format(record))
        assert payload["message"] == "Read of an undeclared field"
        assert payload["level"] == "WARNING"
        assert payload["logger"] == "strictprops.core.guard"
        assert payload["field"] == "age"
        assert "msg" not in payload

    def test_json_without_extras(self, record):
        payload = json.loads(JSONFormatter(extras=False).format(record))
        assert "field" not in payload

    @pytest.mark.parametrize("is_tty", [True, False])
    def test_coloured(self, record, is_tty):
        formatter = ColouredFormatter(fmt="%(levelname)s %(message)s")
        formatter.is_tty = is_tty
        output = formatter.format(record)
        assert ("\x1b[" in output) is is_tty
        assert "WARNING" in output


@pytest.mark.integration
class TestConfigure:
    @pytest.fixture
    def name(self):
        name = "strictprops.tests.configure"
        yield name
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_console_only(self, name):
        configure(LoggerConfig(), name=name)
        logger = get_logger(name)
        assert logger.level == logging.WARNING
        (handler,) = logger.handlers
        assert isinstance(handler.formatter, ColouredFormatter)
        assert handler.level == logging.DEBUG

    def test_file_and_json(self, name, tmp_path):
        config = LoggerConfig()
        config.as_json = True
        config.tty.enable = False
        config.file.enable = True
        config.file.path = str(tmp_path / "logs" / "strictprops.log")
        configure(config, name=name)
        logger = get_logger(name)
        (handler,) = logger.handlers
        assert isinstance(handler, logging.handlers.RotatingFileHandler)
        logger.warning("Prop 'age' does not exist!!!", extra={"field": "age"})
        handler.flush()
        line = (tmp_path / "logs" / "strictprops.log").read_text().strip()
        payload = json.loads(line)
        assert payload["message"] == "Prop 'age' does not exist!!!"
        assert payload["field"] == "age"

    def test_reconfigure_replaces_handlers(self, name):
        configure(LoggerConfig(), name=name)
        configure(LoggerConfig(), name=name)
        assert len(get_logger(name).handlers) == 1
