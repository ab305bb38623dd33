"""
Configuration model and YAML I/O for field-sanitizer.

A ``SanitizerConfig`` holds an engine's default rule set. It maps 1:1 to a
YAML file like::

    description: Contact form cleanup
    rules:
      name: ucwords|trim
      email: [trim, strtolower]

Key functions:
- load_config(path) -> SanitizerConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Why Pydantic + YAML:
- Pydantic rejects malformed rule sets (numbers, nested maps, empty lists)
  when the file is loaded rather than halfway through a ``sanitize()`` call.
- YAML keeps rule sets hand-editable next to the code that uses them.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

from field_sanitizer.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SanitizerConfig(BaseModel):
    """Default rule set for a ``Sanitizer`` instance."""

    description: str | None = Field(
        None, description="Free-form note on what this rule set is for"
    )
    rules: dict[str, str | list[str]] = Field(
        default_factory=dict,
        description=(
            "Field name -> rule. A rule is a pipe-delimited string "
            "('strtolower|trim') or a list of transformation names."
        ),
    )

    @model_validator(mode="after")
    def _check_rule_lists_not_empty(self) -> SanitizerConfig:
        """Reject list rules with no names; they would silently do nothing."""
        for field_name, spec in self.rules.items():
            if isinstance(spec, list) and not spec:
                raise ValueError(
                    f"Rule for field '{field_name}' is an empty list. "
                    "Remove the entry or name at least one sanitizer."
                )
        return self


def load_config(path: str | Path) -> SanitizerConfig:
    """Load and validate a rule-set YAML file into a SanitizerConfig.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping at the top level: {path}"
        )
    logger.info("Loaded config from %s", path)
    return SanitizerConfig.model_validate(raw)


def save_config(config: SanitizerConfig, path: str | Path) -> None:
    """Serialize a SanitizerConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json", exclude_none=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# field-sanitizer rule set\n")
        f.write("# Each rule is 'name|name' or a list of sanitizer names.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
