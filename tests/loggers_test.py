import logging

import pytest

from strictprops.core.loggers import ErrorLogger
from strictprops.core.loggers import Logger
from strictprops.core.model import StrictModel


class Recruit(StrictModel):
    name: str


@pytest.mark.unit
class TestLogger:
    def test_is_abstract(self):
        with pytest.raises(TypeError):
            Logger()


@pytest.mark.unit
class TestErrorLogger:
    def test_defaults(self):
        logger = ErrorLogger()
        assert logger.name == "strictprops"
        assert logger.level == logging.WARNING
        assert repr(logger) == "ErrorLogger(name='strictprops', level='WARNING')"

    def test_message_is_trimmed_and_prefixed(self, caplog):
        with caplog.at_level(logging.WARNING, logger="strictprops"):
            ErrorLogger().log("  Prop 'age' does not exist!!!\n")
        (record,) = caplog.records
        assert record.name == "strictprops"
        assert record.levelno == logging.WARNING
        assert record.getMessage() == (
            "[StrictPropertyAccess] Prop 'age' does not exist!!!"
        )

    def test_custom_destination(self, caplog):
        with caplog.at_level(logging.ERROR, logger="strictprops.audit"):
            ErrorLogger("strictprops.audit", logging.ERROR).log("Levi")
        (record,) = caplog.records
        assert record.name == "strictprops.audit"
        assert record.levelno == logging.ERROR

    def test_guard_forwards_reports(self, caplog, capsys):
        recruit = Recruit(name="Falco")
        recruit.set_logger(ErrorLogger())
        with caplog.at_level(logging.WARNING, logger="strictprops"):
            recruit.wings
            recruit.wings = "jaw"
        assert [record.getMessage() for record in caplog.records] == [
            "[StrictPropertyAccess] Prop 'wings' does not exist!!!",
            "[StrictPropertyAccess] Deprecated: Creation of dynamic property "
            "is deprecated",
        ]
        assert len(capsys.readouterr().out.splitlines()) == 2
