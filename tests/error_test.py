import pytest

from strictprops.core.error import BaseError
from strictprops.core.error import ConfigValidationError
from strictprops.core.error import DynamicFieldCreationAttempt
from strictprops.core.error import InvalidConfiguration
from strictprops.core.error import LogicViolation
from strictprops.core.error import MissingFieldAccess
from strictprops.core.error import SecurityError


@pytest.mark.unit
class TestErrors:
    @pytest.mark.parametrize(
        "error, parent",
        [
            (MissingFieldAccess, LogicViolation),
            (DynamicFieldCreationAttempt, LogicViolation),
            (LogicViolation, SecurityError),
            (ConfigValidationError, SecurityError),
            (SecurityError, BaseError),
        ],
    )
    def test_hierarchy(self, error, parent):
        assert issubclass(error, parent)

    def test_violation_is_not_an_attribute_error(self):
        assert not issubclass(LogicViolation, AttributeError)

    def test_invalid_configuration_alias(self):
        assert InvalidConfiguration is ConfigValidationError

    def test_violation(self):
        error = MissingFieldAccess("Prop 'age' does not exist!!!", field="age")
        assert str(error) == "Prop 'age' does not exist!!!"
        assert error.message == "Prop 'age' does not exist!!!"
        assert error.field == "age"
        assert repr(error) == (
            "<MissingFieldAccess(message=\"Prop 'age' does not exist!!!\", "
            "field='age')>"
        )

    def test_base_repr(self):
        assert repr(ConfigValidationError("bad")) == (
            "<ConfigValidationError(message='bad')>"
        )
