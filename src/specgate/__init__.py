"""
specgate: Specification pattern over a small User entity.

Specifications are composable boolean predicates. They are built
bottom-up from leaf rules (type, name, name length, locked flag) and
combined with AND / OR / NOT. Gates use them to decide whether a
handler may run for a given user.

ARCHITECTURAL GUARANTEE:
------------------------
Evaluation is pure:
    - No I/O during is_satisfied_by
    - No mutable state on specifications or users
    - Access denial is a returned value, not a raised exception
"""

__version__ = "0.1.0"
