"""
Text rendering for specification trees.

Converts a Specification into a short, readable rule string, e.g.

    (NOT (type == ADMIN OR type == SUPER ADMIN) AND NOT locked)

Used by the demo and handy in error messages and debugging.
"""

from specgate.specifications import (
    Specification,
    AndSpecification,
    OrSpecification,
    NotSpecification,
    TypeSpecification,
    NameSpecification,
    NameLengthSpecification,
    LockedSpecification,
)


def _join(specs, op: str, empty: str) -> str:
    if not specs:
        return empty
    if len(specs) == 1:
        return spec_to_text(specs[0])
    return "(" + f" {op} ".join(spec_to_text(s) for s in specs) + ")"


def spec_to_text(spec: Specification) -> str:
    """
    Render `spec` as a rule string.

    Empty AND renders as TRUE, empty OR as FALSE, matching how they
    evaluate.
    """
    if isinstance(spec, AndSpecification):
        return _join(spec.specs, "AND", "TRUE")
    if isinstance(spec, OrSpecification):
        return _join(spec.specs, "OR", "FALSE")
    if isinstance(spec, NotSpecification):
        return f"NOT {spec_to_text(spec.spec)}"
    if isinstance(spec, TypeSpecification):
        return f"type == {spec.value.label}"
    if isinstance(spec, NameSpecification):
        return f"name ~= {spec.value!r}"
    if isinstance(spec, NameLengthSpecification):
        return f"len(name) <= {spec.max_length}"
    if isinstance(spec, LockedSpecification):
        return "locked"
    raise TypeError(f"Unsupported Specification type: {type(spec)}")


__all__ = ["spec_to_text"]
