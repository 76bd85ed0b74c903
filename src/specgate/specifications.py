"""
Specification System for specgate

Every access rule is a Specification: a small immutable object that
answers one question about a User via is_satisfied_by().

Leaf specifications test a single field:
    - TypeSpecification        user.type == value
    - NameSpecification        user.name == value (case-insensitive)
    - NameLengthSpecification  len(user.name) <= max_length
    - LockedSpecification      user.locked

Combinators build trees from already-constructed children:
    - AndSpecification  all children satisfied (True when empty)
    - OrSpecification   any child satisfied (False when empty)
    - NotSpecification  negation of one child

Trees are built bottom-up, so cycles cannot occur.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Tuple

from specgate.model import User, UserType


class Specification(ABC):
    """
    Base class for all specifications.

    Subclasses implement is_satisfied_by(). Composition is available both
    as factory functions (and_, or_, not_) and as operators:

        ANY_ADMIN & NOT_LOCKED
        IS_ADMIN | IS_SUPER_ADMIN
        ~LOCKED
    """

    @abstractmethod
    def is_satisfied_by(self, user: User) -> bool:
        ...

    def __and__(self, other: Specification) -> AndSpecification:
        return AndSpecification((self, other))

    def __or__(self, other: Specification) -> OrSpecification:
        return OrSpecification((self, other))

    def __invert__(self) -> NotSpecification:
        return NotSpecification(self)


@dataclass(frozen=True)
class AndSpecification(Specification):
    """
    Conjunction over N children.

    Stops at the first child that is not satisfied.
    An empty conjunction is satisfied.
    """

    specs: Tuple[Specification, ...] = ()

    def is_satisfied_by(self, user: User) -> bool:
        for spec in self.specs:
            if not spec.is_satisfied_by(user):
                return False
        return True


@dataclass(frozen=True)
class OrSpecification(Specification):
    """
    Disjunction over N children.

    Stops at the first child that is satisfied.
    An empty disjunction is not satisfied.
    """

    specs: Tuple[Specification, ...] = ()

    def is_satisfied_by(self, user: User) -> bool:
        for spec in self.specs:
            if spec.is_satisfied_by(user):
                return True
        return False


@dataclass(frozen=True)
class NotSpecification(Specification):
    """Negation of a single child."""

    spec: Specification

    def is_satisfied_by(self, user: User) -> bool:
        return not self.spec.is_satisfied_by(user)


@dataclass(frozen=True)
class TypeSpecification(Specification):
    """Satisfied when the user's type equals `value`."""

    value: UserType

    def is_satisfied_by(self, user: User) -> bool:
        return user.type == self.value


@dataclass(frozen=True)
class NameSpecification(Specification):
    """
    Satisfied when the user's name matches `value`, ignoring case.

    Example:
        NameSpecification("alex") is satisfied by User(name="Alex")
    """

    value: str

    def is_satisfied_by(self, user: User) -> bool:
        return user.name.lower() == self.value.lower()


@dataclass(frozen=True)
class NameLengthSpecification(Specification):
    """
    Satisfied when the user's name is at most `max_length` characters.

    Reads as "name is too short" in the predefined rules, where it is
    used negated to require a longer name.
    """

    max_length: int

    def is_satisfied_by(self, user: User) -> bool:
        return len(user.name) <= self.max_length


@dataclass(frozen=True)
class LockedSpecification(Specification):
    """Satisfied when the user account is locked."""

    def is_satisfied_by(self, user: User) -> bool:
        return user.locked


# =========================================================================
# FACTORIES
# =========================================================================


def and_(*specs: Specification) -> AndSpecification:
    return AndSpecification(tuple(specs))


def or_(*specs: Specification) -> OrSpecification:
    return OrSpecification(tuple(specs))


def not_(spec: Specification) -> NotSpecification:
    return NotSpecification(spec)


def type_is(user_type: UserType) -> TypeSpecification:
    return TypeSpecification(user_type)


def name_is(name: str) -> NameSpecification:
    return NameSpecification(name.lower())


def name_short(length: int) -> NameLengthSpecification:
    return NameLengthSpecification(length)


def locked() -> LockedSpecification:
    return LockedSpecification()


def user_is_satisfied_by(user: User, spec: Specification) -> bool:
    """Evaluate `spec` against `user`."""
    return spec.is_satisfied_by(user)


# =========================================================================
# PREDEFINED RULES
# =========================================================================

IS_PERSONAL = type_is(UserType.PERSONAL)
IS_ADMIN = type_is(UserType.ADMIN)
IS_SUPER_ADMIN = type_is(UserType.SUPER_ADMIN)

ANY_ADMIN = or_(IS_ADMIN, IS_SUPER_ADMIN)
NOT_ADMIN = not_(ANY_ADMIN)
NOT_SUPER_ADMIN = not_(IS_SUPER_ADMIN)

IS_NAME_SHORT_4 = name_short(4)

LOCKED = locked()
NOT_LOCKED = not_(LOCKED)

VALID_NAME_NOT_ADMIN = and_(not_(ANY_ADMIN), NOT_LOCKED, not_(IS_NAME_SHORT_4))

PREDEFINED_RULES: Dict[str, Specification] = {
    "is_personal": IS_PERSONAL,
    "is_admin": IS_ADMIN,
    "is_super_admin": IS_SUPER_ADMIN,
    "any_admin": ANY_ADMIN,
    "not_admin": NOT_ADMIN,
    "not_super_admin": NOT_SUPER_ADMIN,
    "is_name_short_4": IS_NAME_SHORT_4,
    "locked": LOCKED,
    "not_locked": NOT_LOCKED,
    "valid_name_not_admin": VALID_NAME_NOT_ADMIN,
}


__all__ = [
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "TypeSpecification",
    "NameSpecification",
    "NameLengthSpecification",
    "LockedSpecification",
    "and_",
    "or_",
    "not_",
    "type_is",
    "name_is",
    "name_short",
    "locked",
    "user_is_satisfied_by",
    "IS_PERSONAL",
    "IS_ADMIN",
    "IS_SUPER_ADMIN",
    "ANY_ADMIN",
    "NOT_ADMIN",
    "NOT_SUPER_ADMIN",
    "IS_NAME_SHORT_4",
    "LOCKED",
    "NOT_LOCKED",
    "VALID_NAME_NOT_ADMIN",
    "PREDEFINED_RULES",
]
