"""
Demo script: sanitize a few sample records with a YAML rule set.

Usage:
    uv run python scripts/run_sanitize.py                    # built-in demo rules
    uv run python scripts/run_sanitize.py rules/contact.yaml # your own rule file

When no rule file is given, the demo rules are written to
outputs/demo_rules.yaml first so there is something to edit.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEMO_RULES_PATH = Path("outputs") / "demo_rules.yaml"

DEMO_RULES = {
    "name": "ucwords|trim",
    "email": ["trim", "strtolower"],
    "phone": "trim|digits",
    "bio": "strip_tags|trim",
}

RECORDS = [
    {"name": "  john smith", "email": " John@Example.COM ", "phone": "555-555-5555"},
    {"name": "ada lovelace ", "email": "ADA@example.com", "bio": "<b>Analyst</b> "},
    {"name": "grace", "phone": " (555) 010-9999 ", "notes": "left untouched"},
]

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_sanitize")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    from field_sanitizer import Sanitizer, SanitizerConfig, save_config

    if len(sys.argv) > 1:
        rules_path = Path(sys.argv[1])
    else:
        rules_path = DEMO_RULES_PATH
        save_config(
            SanitizerConfig(description="Demo contact rules", rules=DEMO_RULES),
            rules_path,
        )

    sanitizer = Sanitizer.from_config(rules_path)
    sanitizer.register("digits", lambda v: "".join(ch for ch in v if ch.isdigit()))

    log.info("Rules: %s", sanitizer.get_rules())
    for record in RECORDS:
        log.info("  %s", record)
        log.info("  -> %s", sanitizer.sanitize(record))

    log.info("Done.")


if __name__ == "__main__":
    main()
