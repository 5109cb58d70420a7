import pytest

from strictprops.core.base import AuditLog
from strictprops.core.base import Observable
from strictprops.core.events import EVENTS
from strictprops.core.events import EventCategory
from strictprops.core.events import EventSeverity


class Squad(Observable):
    def __init__(self):
        self.leader = "Levi"
        self.members = ["Eren", "Mikasa", "Armin", "Jean", "Connie", "Sasha"]
        self.motto = "x" * 80
        self._secret = "basement"
        self.titan = None


@pytest.fixture
def audit():
    audit = AuditLog()
    audit.record_event("missing_field_access", component="User", field="age")
    audit.record_event("strict_mode_disabled", component="User")
    audit.record_event(
        "dynamic_field_creation_attempt",
        component="Order",
        field="total",
        value=10,
    )
    return audit


@pytest.mark.unit
class TestObservable:
    def test_repr_formats_limits(self):
        text = repr(Squad())
        assert text.startswith("Squad(leader='Levi', members=list(6 items), ")
        assert f"motto={'x' * 57}..." in text
        assert "_secret" not in text
        assert "titan" not in text

    def test_repr_circular(self):
        squad = Squad()
        assert squad._format(squad) == "<circular-Squad>"


@pytest.mark.unit
class TestAuditLog:
    def test_empty(self):
        audit = AuditLog()
        assert len(audit) == 0
        assert not audit
        assert repr(audit) == "AuditLog(entries=0)"

    def test_entry(self, audit):
        entry = audit[0]
        assert entry["event"] == "missing_field_access"
        assert entry["component"] == "User"
        assert entry["field"] == "age"
        assert entry["category"] is EventCategory.VIOLATION
        assert entry["severity"] is EventSeverity.WARNING
        assert entry["description"] == (
            EVENTS["missing_field_access"]["description"]
        )
        assert len(entry["event_id"]) == 8

    def test_unknown_event(self):
        entry = AuditLog().record_event("titan_shift", component="Eren")
        assert entry["description"] == "Unknown event: titan_shift"
        assert entry["severity"] is EventSeverity.INFO

    @pytest.mark.parametrize(
        "filters, expected",
        [
            ({}, 3),
            ({"event": "missing_field_access"}, 1),
            ({"component": "User"}, 2),
            ({"category": EventCategory.CONFIGURATION}, 1),
            ({"severity": EventSeverity.WARNING}, 3),
            ({"severity": EventSeverity.ERROR}, 0),
            ({"limit": 2}, 2),
            ({"limit": 0}, 0),
        ],
    )
    def test_get_events(self, audit, filters, expected):
        assert len(audit.get_events(**filters)) == expected

    def test_limit_keeps_most_recent(self, audit):
        (entry,) = audit.get_events(limit=1)
        assert entry["component"] == "Order"

    def test_repr(self, audit):
        assert repr(audit) == (
            "AuditLog(entries=3, latest='dynamic_field_creation_attempt')"
        )
