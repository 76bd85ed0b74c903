#!/usr/bin/env python3
"""
Demo: Evaluate specifications and run access gates for the example users.
"""

from specgate.examples import build_example_users, build_example_gates
from specgate.render import spec_to_text
from specgate.specifications import ANY_ADMIN, IS_SUPER_ADMIN, VALID_NAME_NOT_ADMIN, user_is_satisfied_by


def main():
    users = build_example_users()
    gates = build_example_gates()
    alex = users["alex"]

    print("=" * 70)
    print("SPECIFICATIONS")
    print("=" * 70)
    print(f"  any admin:            {spec_to_text(ANY_ADMIN)}")
    print(f"  super admin:          {spec_to_text(IS_SUPER_ADMIN)}")
    print(f"  valid name not admin: {spec_to_text(VALID_NAME_NOT_ADMIN)}")
    print()

    print(f"{alex}: Any Admin? {str(user_is_satisfied_by(alex, ANY_ADMIN)).lower()}")
    print(f"{alex}: Any SuperAdmin? {str(user_is_satisfied_by(alex, IS_SUPER_ADMIN)).lower()}")
    print()

    runs = [
        ("high level", ["alex", "super_alex"]),
        ("onlyValidUser", ["alex", "boo_foo_locked", "boo_foo"]),
    ]
    for gate_name, user_keys in runs:
        gate = gates[gate_name]
        for key in user_keys:
            err = gate(users[key])
            if err is not None:
                print(err)


if __name__ == "__main__":
    main()
