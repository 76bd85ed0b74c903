"""
Tests for access gates.

These tests verify:
    - Denied users get an AccessDenied value and the handler never runs
    - Granted users run the handler and produce a status line
    - Gates keep no state between calls
"""

from specgate.access import AccessDenied, check_access
from specgate.model import User, UserType
from specgate.specifications import IS_SUPER_ADMIN, VALID_NAME_NOT_ADMIN, and_


ALEX = User(name="Alex", type=UserType.ADMIN)
SUPER_ALEX = User(name="SuperAlex", type=UserType.SUPER_ADMIN)


class Recorder:
    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


class TestAccessDenied:
    """Test the access-denied error value."""

    def test_carries_gate_and_user(self):
        err = AccessDenied("high level", ALEX)
        assert err.gate_name == "high level"
        assert err.user is ALEX

    def test_message(self):
        err = AccessDenied("high level", ALEX)
        assert str(err) == "high level: access denied, user: Alex (Type:ADMIN Locked:false)"

    def test_is_exception(self):
        """Callers may choose to raise it."""
        assert isinstance(AccessDenied("g", ALEX), Exception)


class TestCheckAccess:
    """Test gate decisions."""

    def test_denies_admin_for_super_admin_gate(self, capsys):
        handler = Recorder()
        gate = check_access(IS_SUPER_ADMIN, "high level", handler)

        err = gate(ALEX)

        assert isinstance(err, AccessDenied)
        assert err.gate_name == "high level"
        assert err.user == ALEX
        assert handler.calls == 0
        assert capsys.readouterr().out == ""

    def test_grants_super_admin(self, capsys):
        handler = Recorder()
        gate = check_access(IS_SUPER_ADMIN, "high level", handler)

        err = gate(SUPER_ALEX)

        assert err is None
        assert handler.calls == 1
        out = capsys.readouterr().out
        assert out == "high level: access granted, user: SuperAlex (Type:SUPER ADMIN Locked:false)\n"

    def test_grant_line_precedes_handler(self):
        lines = []
        gate = check_access(
            IS_SUPER_ADMIN,
            "high level",
            lambda: lines.append("handler"),
            echo=lines.append,
        )
        gate(SUPER_ALEX)
        assert lines == [
            "high level: access granted, user: SuperAlex (Type:SUPER ADMIN Locked:false)",
            "handler",
        ]

    def test_gate_is_stateless(self):
        handler = Recorder()
        gate = check_access(IS_SUPER_ADMIN, "high level", handler, echo=lambda _: None)

        assert gate(SUPER_ALEX) is None
        assert isinstance(gate(ALEX), AccessDenied)
        assert gate(SUPER_ALEX) is None
        assert handler.calls == 2

    def test_only_valid_user_gate(self):
        handler = Recorder()
        gate = check_access(VALID_NAME_NOT_ADMIN, "onlyValidUser", handler, echo=lambda _: None)

        assert gate(ALEX) is not None
        assert gate(User(name="BooFooLocked", locked=True)) is not None
        assert gate(User(name="BooFoo")) is None
        assert handler.calls == 1

    def test_empty_and_grants_everyone(self):
        handler = Recorder()
        gate = check_access(and_(), "open", handler, echo=lambda _: None)
        assert gate(ALEX) is None
        assert handler.calls == 1
