"""
Rule-specification parsing for field-sanitizer.

A rule specification says which transformations to apply to one field, in
order. It comes in two shapes:

- A pipe-delimited string: ``"strtolower|trim"``.
- An explicit sequence of names: ``["strtolower", "trim"]``.

Splitting is literal: no whitespace is trimmed around names and empty
segments are kept as ``""``, so ``"trim||lower"`` and ``""`` both carry an
empty name that later fails lookup.
"""

from __future__ import annotations

from typing import Mapping, Sequence, Union

RULE_SEPARATOR = "|"

RuleSpec = Union[str, Sequence[str]]
RuleSet = Mapping[str, RuleSpec]


def split_rule(spec: RuleSpec) -> list[str]:
    """Turn a rule specification into an ordered list of transformation names.

    Args:
        spec: A pipe-delimited string or a sequence of names.

    Returns:
        The names in application order. Sequences are copied as-is.

    Raises:
        TypeError: If *spec* is neither a string nor a list/tuple.
    """
    if isinstance(spec, str):
        return spec.split(RULE_SEPARATOR)
    if isinstance(spec, (list, tuple)):
        return list(spec)
    raise TypeError(
        f"Rule specification must be a string or a list of names, "
        f"got {type(spec).__name__}"
    )


def rule_for(rules: RuleSet, field: str) -> list[str] | None:
    """Return the split rule for *field*, or ``None`` when it has no rule.

    A rule entry whose value is ``None`` counts as "no rule".
    """
    spec = rules.get(field)
    if spec is None:
        return None
    return split_rule(spec)
