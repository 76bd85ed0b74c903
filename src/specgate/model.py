"""
Core User Model

Defines the entity that specifications are evaluated against.

ARCHITECTURAL RULE:
    These objects:
        - Are immutable once constructed
        - Carry data only, no access rules
        - Are fully serializable
"""

from dataclasses import dataclass
from enum import Enum


class UserType(Enum):
    """
    Categorical level of a user.

    Keep this minimal. The value of each member is its display label,
    which is what appears in the text form of a User.
    """

    PERSONAL = "PERSONAL"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER ADMIN"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class User:
    """
    A user that specifications are checked against.

    Properties:
        type:
            Categorical level (PERSONAL, ADMIN, SUPER_ADMIN)

        name:
            Display name. Compared case-insensitively by name rules.

        locked:
            Whether the account is locked

    Example:
        User(type=UserType.ADMIN, name="Alex")

    Text form:
        Alex (Type:ADMIN Locked:false)
    """

    name: str
    type: UserType = UserType.PERSONAL
    locked: bool = False

    def __str__(self) -> str:
        locked = "true" if self.locked else "false"
        return f"{self.name} (Type:{self.type.label} Locked:{locked})"
