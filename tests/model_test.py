import copy
import dataclasses
import pickle

import pytest

from strictprops.core.config import OutputMode
from strictprops.core.error import ConfigValidationError
from strictprops.core.error import DynamicFieldCreationAttempt
from strictprops.core.error import MissingFieldAccess
from strictprops.core.model import StrictModel
from strictprops.core.model import StrictPropertyAccess
from strictprops.core.model import guard_of
from strictprops.core.registry import FieldFilter

DYNAMIC = "Deprecated: Creation of dynamic property is deprecated"


class Soldier(StrictModel):
    name: str
    rank: str = "cadet"


class Officer(Soldier, exceptions=True):
    squad: str


class Commander(Officer, output="echo", fields=FieldFilter.ALL):
    _orders: list | None = None


class Plain(StrictPropertyAccess):
    def __init__(self, name):
        self.name = name

    name: str


@dataclasses.dataclass
class Titan(StrictPropertyAccess):
    name: str
    height: int = 15


@pytest.mark.unit
class TestStrictModel:
    def test_fields_from_keywords(self):
        soldier = Soldier(name="Armin")
        assert soldier.name == "Armin"
        assert soldier.rank == "cadet"

    def test_unknown_keywords_are_reported(self, capsys):
        soldier = Soldier(name="Armin", titan="colossal")
        assert capsys.readouterr().out == f"{DYNAMIC}\n"
        assert "titan" not in vars(soldier)

    def test_guard_is_built_on_construction(self):
        soldier = Soldier()
        assert "__strict_guard__" in vars(soldier)
        assert guard_of(soldier).declared_fields == {"name", "rank"}

    def test_class_defaults(self):
        assert Soldier.__guard_defaults__ == {}
        assert Officer.__guard_defaults__ == {"exceptions": True}
        assert Commander.__guard_defaults__ == {
            "exceptions": True,
            "output": "echo",
            "fields": FieldFilter.ALL,
        }

    def test_class_defaults_reach_the_guard(self):
        guard = guard_of(Commander(name="Erwin"))
        assert guard.throw_on_violation is True
        assert guard.error_output_mode is OutputMode.ECHO
        assert guard.field_filter is FieldFilter.ALL
        assert "_orders" in guard.declared_fields

    def test_class_defaults_raise(self):
        officer = Officer(name="Hange", squad="4th")
        with pytest.raises(MissingFieldAccess):
            officer.titan
        with pytest.raises(DynamicFieldCreationAttempt):
            officer.titan = "beast"

    def test_invalid_class_default(self):
        with pytest.raises(ConfigValidationError):

            class Deserter(StrictModel, output="loud"):
                pass

    def test_instance_toggles_do_not_leak_to_class(self):
        officer = Officer(name="Hange", squad="4th")
        officer.disable_exceptions()
        assert guard_of(Officer(name="Moblit")).throw_on_violation is True


@pytest.mark.unit
class TestMixin:
    def test_guard_is_created_lazily(self):
        plain = Plain("Reiner")
        assert plain.name == "Reiner"
        assert guard_of(plain) is guard_of(plain)

    def test_mixin_reports(self, capsys):
        plain = Plain("Reiner")
        plain.armour = "full"
        assert plain.get_invalid_accesses() == []
        assert plain.armour is None
        assert plain.get_invalid_accesses() == ["armour"]
        assert capsys.readouterr().out == (
            f"{DYNAMIC}\nProp 'armour' does not exist!!!\n"
        )

    def test_dataclass(self, capsys):
        titan = Titan("Colossal", 60)
        assert titan == Titan("Colossal", 60)
        assert titan.height == 60
        titan.shifter = "Bertholdt"
        assert capsys.readouterr().out == f"{DYNAMIC}\n"
        assert "shifter" not in vars(titan)

    def test_dunder_assignment_passes_through(self):
        plain = Plain("Reiner")
        plain.__doc__ = "Armoured"
        assert vars(plain)["__doc__"] == "Armoured"


@pytest.mark.integration
class TestCopying:
    @pytest.fixture
    def soldier(self):
        return Soldier(name="Armin")

    @pytest.mark.parametrize("clone", [copy.copy, copy.deepcopy])
    def test_copies_get_their_own_guard(self, soldier, clone):
        soldier.titan
        twin = clone(soldier)
        assert twin.name == "Armin"
        assert guard_of(twin) is not guard_of(soldier)
        twin.disable_strict_mode()
        assert guard_of(soldier).strict_mode is True
        assert twin.get_invalid_accesses() == []
        assert soldier.get_invalid_accesses() == ["titan"]

    def test_modes_do_not_travel(self, soldier):
        soldier.enable_exceptions()
        twin = copy.copy(soldier)
        assert guard_of(twin).throw_on_violation is False
        assert guard_of(soldier).throw_on_violation is True

    def test_pickle_uses_class_defaults(self):
        officer = Officer(name="Hange", squad="4th")
        officer.disable_exceptions()
        clone = pickle.loads(pickle.dumps(officer))
        assert clone.squad == "4th"
        assert "__strict_guard__" not in vars(clone)
        assert guard_of(clone).throw_on_violation is True
        assert guard_of(officer).throw_on_violation is False

    def test_state_excludes_guard(self, soldier):
        assert soldier.__getstate__() == {"name": "Armin"}
        assert "__strict_guard__" in vars(soldier)
