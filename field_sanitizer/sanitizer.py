"""
Sanitizer engine for field-sanitizer.

Applies named transformations to the fields of a mapping according to a rule
set::

    s = Sanitizer(rules={"name": "ucwords|trim"})
    s.register("phone", lambda v: v.replace("-", ""))
    s.sanitize({"name": "  john", "phone": "555-555-5555"},
               {"name": "ucwords|trim", "phone": "phone"})
    # -> {"name": "John", "phone": "5555555555"}

Resolution order for every name in a rule is fixed: the instance's custom
registry first, then the built-in table (``BUILTIN_SANITIZERS``).

The engine holds no locks. ``register()`` mutates the custom registry, so
callers sharing one instance across threads must serialize registrations
themselves; ``sanitize()`` only reads shared state.
"""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import Any, Callable, Mapping

from field_sanitizer.builtin_sanitizers import BUILTIN_SANITIZERS, SanitizerFn
from field_sanitizer.config import SanitizerConfig, load_config
from field_sanitizer.exceptions import (
    SanitizerAlreadyExists,
    SanitizerNotCallable,
    SanitizerNotFound,
)
from field_sanitizer.rules import RuleSet, RuleSpec, rule_for

logger = logging.getLogger(__name__)


def _accepts_one_argument(callback: Callable[..., Any]) -> bool:
    """Check that *callback* can be called with a single positional argument.

    Callables without an introspectable signature (some C builtins) are
    given the benefit of the doubt.
    """
    try:
        sig = inspect.signature(callback)
    except (TypeError, ValueError):
        return True
    try:
        sig.bind(None)
    except TypeError:
        return False
    return True


class Sanitizer:
    """Applies per-field transformation rules to a mapping of values.

    The default rule set is plain data held by the instance: pass it to the
    constructor, or build the instance from a YAML file with
    ``from_config()``. It is used whenever ``sanitize()`` is called without
    a (non-empty) rule set of its own.

    Args:
        rules: Default rule set (field name -> rule specification).
        builtins: Table of built-in transformations. Defaults to
            ``BUILTIN_SANITIZERS``.
    """

    def __init__(
        self,
        rules: RuleSet | None = None,
        builtins: Mapping[str, SanitizerFn] | None = None,
    ) -> None:
        self.config = SanitizerConfig(rules=dict(rules or {}))
        self._builtins: Mapping[str, SanitizerFn] = (
            BUILTIN_SANITIZERS if builtins is None else builtins
        )
        self._sanitizers: dict[str, SanitizerFn] = {}

    @classmethod
    def from_config(cls, config: SanitizerConfig | str | Path) -> Sanitizer:
        """Build a Sanitizer whose default rules come from a config or YAML path.

        The whole config (including ``description``) is kept on
        ``self.config``; a passed-in model is copied, not shared.
        """
        if not isinstance(config, SanitizerConfig):
            config = load_config(config)
        sanitizer = cls(rules=config.rules)
        sanitizer.config = config.model_copy(deep=True)
        return sanitizer

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    @property
    def rules(self) -> dict[str, RuleSpec]:
        return self.get_rules()

    def get_rules(self) -> dict[str, RuleSpec]:
        """Return a copy of the default rule set."""
        return {
            field: list(spec) if isinstance(spec, list) else spec
            for field, spec in self.config.rules.items()
        }

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register(
        self,
        name: str,
        callback: Callable[[Any], Any],
        override: bool = False,
    ) -> None:
        """Register a custom sanitizer under *name*.

        Args:
            name: Name used in rules. Case-sensitive.
            callback: Unary function value -> sanitized value.
            override: Replace an existing custom sanitizer with the same name.

        Raises:
            SanitizerNotCallable: If *callback* is not callable with one argument.
            SanitizerAlreadyExists: If *name* is already registered and
                *override* is not ``True``.
        """
        if not callable(callback) or not _accepts_one_argument(callback):
            raise SanitizerNotCallable(
                f"The callback for sanitizer '{name}' must be callable "
                f"with exactly one argument, got {callback!r}."
            )

        if self.custom_sanitizer_exists(name):
            if override is not True:
                raise SanitizerAlreadyExists(
                    f"Sanitizer '{name}' already exists. "
                    "Pass override=True to replace it."
                )
            logger.info("Overriding custom sanitizer '%s'", name)
        else:
            logger.debug("Registered custom sanitizer '%s'", name)

        self._sanitizers[name] = callback

    def sanitizer_exists(self, name: str) -> bool:
        """True if *name* is a custom sanitizer or a built-in one."""
        return self.custom_sanitizer_exists(name) or name in self._builtins

    def custom_sanitizer_exists(self, name: str) -> bool:
        """True if *name* was registered on this instance."""
        return name in self._sanitizers

    # ------------------------------------------------------------------
    # Sanitizing
    # ------------------------------------------------------------------

    def sanitize(
        self,
        fields: Mapping[str, Any],
        rules: RuleSet | None = None,
    ) -> dict[str, Any]:
        """Apply *rules* (or the default rules) to *fields*.

        Fields without a rule are copied through unchanged. The input
        mapping is never modified; a new dict with the same keys, in the
        same order, is returned.

        The call is all-or-nothing: if any field's rule names an unknown
        sanitizer, ``SanitizerNotFound`` propagates and no result is
        returned.

        Args:
            fields: Field name -> value.
            rules: Rule set for this call. ``None`` or empty falls back to
                the instance's default rules.

        Returns:
            A new dict of sanitized values.

        Raises:
            SanitizerNotFound: If a rule names an unknown sanitizer.
        """
        rules = rules if rules else self.config.rules

        result: dict[str, Any] = {}
        for field, value in fields.items():
            names = rule_for(rules, field)
            if names is None:
                result[field] = value
                continue
            logger.debug("Sanitizing field '%s' with %s", field, names)
            result[field] = self._apply_sanitizers(field, value, names)

        return result

    def _resolve(self, field: str, name: str) -> SanitizerFn:
        if name in self._sanitizers:
            return self._sanitizers[name]
        if name in self._builtins:
            return self._builtins[name]
        raise SanitizerNotFound(
            f"Sanitizer '{name}' not found (rule for field '{field}')."
        )

    def _apply_sanitizers(self, field: str, value: Any, names: list[str]) -> Any:
        for name in names:
            value = self._resolve(field, name)(value)
        return value
