"""
Example users and gates for the proof-of-concept walkthrough.

Mirrors the classic Specification pattern demo:
    - "high level" gate requires a super admin
    - "onlyValidUser" gate requires a non-admin, unlocked user whose
      name is longer than 4 characters
"""
from typing import Callable, Dict

from specgate.model import User, UserType
from specgate.access import Gate, check_access
from specgate.specifications import IS_SUPER_ADMIN, VALID_NAME_NOT_ADMIN


def build_example_users() -> Dict[str, User]:
    return {
        "alex": User(type=UserType.ADMIN, name="Alex"),
        "super_alex": User(type=UserType.SUPER_ADMIN, name="SuperAlex"),
        "boo_foo_locked": User(type=UserType.PERSONAL, name="BooFooLocked", locked=True),
        "boo_foo": User(type=UserType.PERSONAL, name="BooFoo", locked=False),
    }


def build_example_gates(echo: Callable[[str], None] = print) -> Dict[str, Gate]:
    high_level = check_access(
        IS_SUPER_ADMIN,
        "high level",
        lambda: echo("execute handlerSecret"),
        echo=echo,
    )
    only_valid_user = check_access(
        VALID_NAME_NOT_ADMIN,
        "onlyValidUser",
        lambda: echo("execute handlerOnlyValidUser"),
        echo=echo,
    )
    return {"high level": high_level, "onlyValidUser": only_valid_user}
