"""
Shared test fixtures for field-sanitizer tests.

Default rule sets used across test modules are defined here as module-level
constants so they are easy to find and change.
"""

from __future__ import annotations

import pytest

from field_sanitizer import Sanitizer

# ---------------------------------------------------------------------------
# Rule sets
# ---------------------------------------------------------------------------
DEFAULT_RULES = {"name": "ucwords|trim"}

CONTACT_RULES_YAML = """\
description: Contact form cleanup
rules:
  name: ucwords|trim
  email:
    - trim
    - strtolower
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sanitizer() -> Sanitizer:
    """A Sanitizer carrying the default ``name`` rule."""
    return Sanitizer(rules=DEFAULT_RULES)


@pytest.fixture
def contact_rules_path(tmp_path):
    """A rule-set YAML file on disk."""
    path = tmp_path / "contact.yaml"
    path.write_text(CONTACT_RULES_YAML, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against YAML files on disk)",
    )
