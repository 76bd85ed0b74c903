"""
Access gates built on specifications.

A gate wraps a Specification and a handler. Calling the gate with a
User either runs the handler (spec satisfied) or hands back an
AccessDenied describing who was refused and by which gate.

IMPORTANT:
    AccessDenied is RETURNED, not raised. The caller decides whether
    to print it, log it, or raise it.
"""

from typing import Callable, Optional

from specgate.model import User
from specgate.specifications import Specification


class AccessDenied(Exception):
    """Returned by a gate when the user does not satisfy its specification."""

    def __init__(self, gate_name: str, user: User):
        self.gate_name = gate_name
        self.user = user
        super().__init__(f"{gate_name}: access denied, user: {user}")


Gate = Callable[[User], Optional[AccessDenied]]


def check_access(
    spec: Specification,
    name: str,
    handler: Callable[[], None],
    echo: Callable[[str], None] = print,
) -> Gate:
    """
    Build a gate that runs `handler` only for users satisfying `spec`.

    Args:
        spec: Rule the user must satisfy
        name: Gate name, used in the granted/denied messages
        handler: Zero-argument callable run on success
        echo: Where the "access granted" line goes (defaults to print)

    Returns:
        gate(user) -> None on success, AccessDenied otherwise
    """

    def gate(user: User) -> Optional[AccessDenied]:
        if not spec.is_satisfied_by(user):
            return AccessDenied(name, user)
        echo(f"{name}: access granted, user: {user}")
        handler()
        return None

    return gate


__all__ = ["AccessDenied", "Gate", "check_access"]
