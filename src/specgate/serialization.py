"""
Serialization helpers for specgate objects (User, Specification).

Provides JSON/YAML round-trip via an intermediate dict representation,
plus loading of named rules from a YAML configuration document.

Rule documents look like:

    rules:
      staff:
        type: or
        specs:
          - {type: ref, name: is_admin}
          - {type: ref, name: is_super_admin}

A `ref` node resolves to a predefined rule or to a rule declared
earlier in the same document.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, List, Mapping, Optional

import yaml

from specgate.model import User, UserType
from specgate.specifications import (
    PREDEFINED_RULES,
    Specification,
    AndSpecification,
    OrSpecification,
    NotSpecification,
    TypeSpecification,
    NameSpecification,
    NameLengthSpecification,
    LockedSpecification,
)


class SpecificationFormatError(Exception):
    """Raised when a serialized specification or user cannot be read."""
    pass


_KNOWN_KEYS = {
    "and": {"type", "specs"},
    "or": {"type", "specs"},
    "not": {"type", "spec"},
    "user_type": {"type", "value"},
    "name": {"type", "value"},
    "name_length": {"type", "max_length"},
    "locked": {"type"},
    "ref": {"type", "name"},
}


def spec_to_dict(spec: Specification) -> Dict[str, Any]:
    if isinstance(spec, AndSpecification):
        return {"type": "and", "specs": [spec_to_dict(s) for s in spec.specs]}
    if isinstance(spec, OrSpecification):
        return {"type": "or", "specs": [spec_to_dict(s) for s in spec.specs]}
    if isinstance(spec, NotSpecification):
        return {"type": "not", "spec": spec_to_dict(spec.spec)}
    if isinstance(spec, TypeSpecification):
        return {"type": "user_type", "value": spec.value.name}
    if isinstance(spec, NameSpecification):
        return {"type": "name", "value": spec.value}
    if isinstance(spec, NameLengthSpecification):
        return {"type": "name_length", "max_length": spec.max_length}
    if isinstance(spec, LockedSpecification):
        return {"type": "locked"}
    raise TypeError(f"Unsupported Specification type: {type(spec)}")


def _require(d: Mapping[str, Any], key: str, node_type: str) -> Any:
    if key not in d:
        raise SpecificationFormatError(f"'{node_type}' node is missing '{key}'")
    return d[key]


def _user_type_from_name(name: Any) -> UserType:
    if not isinstance(name, str):
        raise SpecificationFormatError(f"User type must be a string, got {name!r}")
    try:
        return UserType[name]
    except KeyError:
        raise SpecificationFormatError(f"Unknown user type: {name!r}")


def spec_from_dict(
    d: Any,
    rules: Optional[Mapping[str, Specification]] = None,
) -> Specification:
    """
    Rebuild a Specification from its dict form.

    Args:
        d: Node dict as produced by spec_to_dict (or written in YAML)
        rules: Named rules that `ref` nodes may point to.
            Defaults to PREDEFINED_RULES.

    Raises:
        SpecificationFormatError: Unknown node type, missing key,
            unknown user type or unresolved reference
    """
    if rules is None:
        rules = PREDEFINED_RULES
    if not isinstance(d, Mapping):
        raise SpecificationFormatError(f"Expected a mapping, got {type(d).__name__}")

    t = d.get("type")
    if not isinstance(t, str) or t not in _KNOWN_KEYS:
        raise SpecificationFormatError(f"Unsupported specification dict type: {t}")

    extra = set(d) - _KNOWN_KEYS[t]
    if extra:
        warnings.warn(f"Ignoring unknown keys on '{t}' node: {sorted(map(str, extra))}", UserWarning)

    if t in ("and", "or"):
        children = _require(d, "specs", t)
        if not isinstance(children, list):
            raise SpecificationFormatError(f"'{t}' node 'specs' must be a list")
        specs = tuple(spec_from_dict(c, rules) for c in children)
        return AndSpecification(specs) if t == "and" else OrSpecification(specs)
    if t == "not":
        return NotSpecification(spec_from_dict(_require(d, "spec", t), rules))
    if t == "user_type":
        return TypeSpecification(_user_type_from_name(_require(d, "value", t)))
    if t == "name":
        return NameSpecification(str(_require(d, "value", t)).lower())
    if t == "name_length":
        max_length = _require(d, "max_length", t)
        if isinstance(max_length, bool) or not isinstance(max_length, int):
            raise SpecificationFormatError(f"'max_length' must be an integer, got {max_length!r}")
        return NameLengthSpecification(max_length)
    if t == "locked":
        return LockedSpecification()

    # ref
    name = _require(d, "name", t)
    if not isinstance(name, str):
        raise SpecificationFormatError(f"Rule reference must be a string, got {name!r}")
    if name not in rules:
        raise SpecificationFormatError(f"Unknown rule reference: {name!r}")
    return rules[name]


def user_to_dict(u: User) -> Dict[str, Any]:
    return {"type": u.type.name, "name": u.name, "locked": u.locked}


def user_from_dict(d: Any) -> User:
    if not isinstance(d, Mapping):
        raise SpecificationFormatError(f"Expected a user mapping, got {type(d).__name__}")
    if "name" not in d:
        raise SpecificationFormatError("User is missing 'name'")
    name = d["name"]
    if not isinstance(name, str):
        raise SpecificationFormatError(f"User 'name' must be a string, got {name!r}")
    locked = d.get("locked", False)
    if not isinstance(locked, bool):
        raise SpecificationFormatError(f"User 'locked' must be a boolean, got {locked!r}")
    return User(
        name=name,
        type=_user_type_from_name(d.get("type", UserType.PERSONAL.name)),
        locked=locked,
    )


def users_from_yaml(s: str) -> List[User]:
    d = yaml.safe_load(s)
    if d is None:
        return []
    if not isinstance(d, list):
        raise SpecificationFormatError("Users document must be a list")
    return [user_from_dict(u) for u in d]


def spec_to_json(spec: Specification) -> str:
    return json.dumps(spec_to_dict(spec), sort_keys=True)


def spec_from_json(s: str) -> Specification:
    return spec_from_dict(json.loads(s))


def spec_to_yaml(spec: Specification) -> str:
    return yaml.safe_dump(spec_to_dict(spec))


def spec_from_yaml(s: str) -> Specification:
    return spec_from_dict(yaml.safe_load(s))


def rules_to_yaml(rules: Mapping[str, Specification]) -> str:
    return yaml.safe_dump(
        {"rules": {name: spec_to_dict(spec) for name, spec in rules.items()}},
        sort_keys=False,
    )


def rules_from_yaml(s: str) -> Dict[str, Specification]:
    """
    Load named rules from a YAML document.

    Rules are resolved in document order. A `ref` node may point to a
    predefined rule or to any rule declared above it; a rule declared
    later in the document shadows a predefined rule of the same name
    from that point on.

    An empty document yields no rules. Otherwise the document must hold
    a `rules` mapping (`rules: {}` for none).

    Returns:
        Mapping of rule name -> Specification, in document order
        (predefined rules are not included)
    """
    d = yaml.safe_load(s)
    if d is None:
        return {}
    if not isinstance(d, Mapping) or not isinstance(d.get("rules"), Mapping):
        raise SpecificationFormatError("Rules document must contain a 'rules' mapping")

    scope: Dict[str, Specification] = dict(PREDEFINED_RULES)
    loaded: Dict[str, Specification] = {}
    for name, node in d["rules"].items():
        try:
            spec = spec_from_dict(node, scope)
        except SpecificationFormatError as e:
            raise SpecificationFormatError(f"Error in rule '{name}': {e}") from e
        scope[name] = spec
        loaded[name] = spec
    return loaded


def load_rules_file(filepath: str) -> Dict[str, Specification]:
    """
    Read a YAML rules file.

    Raises:
        FileNotFoundError: If file doesn't exist
        SpecificationFormatError: If the document is invalid
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Rules file not found: {filepath}")

    return rules_from_yaml(content)


__all__ = [
    "SpecificationFormatError",
    "spec_to_dict",
    "spec_from_dict",
    "spec_to_json",
    "spec_from_json",
    "spec_to_yaml",
    "spec_from_yaml",
    "user_to_dict",
    "user_from_dict",
    "users_from_yaml",
    "rules_to_yaml",
    "rules_from_yaml",
    "load_rules_file",
]
