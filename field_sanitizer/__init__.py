"""
field-sanitizer: apply named transformations to the fields of a mapping.

Public API surface:

- ``Sanitizer`` -- the engine. ``sanitize(fields, rules=None)`` applies a
  rule set (field name -> ``"name|name"`` or ``["name", ...]``) and returns
  a new dict; ``register(name, callback, override=False)`` adds custom
  sanitizers that take precedence over the built-ins.

- ``BUILTIN_SANITIZERS`` -- read-only table of built-in transformations
  (``strtolower``, ``trim``, ``ucwords``, ``lower``, ``strip``, ...).

- ``SanitizerConfig`` / ``load_config`` / ``save_config`` -- default rule
  sets kept in YAML.

Example::

    from field_sanitizer import Sanitizer

    s = Sanitizer(rules={"name": "ucwords|trim"})
    s.sanitize({"name": "  john"})          # {"name": "John"}
"""

from __future__ import annotations

from field_sanitizer.builtin_sanitizers import BUILTIN_SANITIZERS
from field_sanitizer.config import SanitizerConfig, load_config, save_config
from field_sanitizer.exceptions import (
    ConfigValidationError,
    SanitizerAlreadyExists,
    SanitizerError,
    SanitizerNotCallable,
    SanitizerNotFound,
)
from field_sanitizer.rules import split_rule
from field_sanitizer.sanitizer import Sanitizer

__all__ = [
    "Sanitizer",
    "BUILTIN_SANITIZERS",
    "SanitizerConfig",
    "load_config",
    "save_config",
    "split_rule",
    "SanitizerError",
    "SanitizerNotCallable",
    "SanitizerAlreadyExists",
    "SanitizerNotFound",
    "ConfigValidationError",
]
