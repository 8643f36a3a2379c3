"""Shared test fixtures."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    """A YAML file holding a small include/exclude rule set."""
    yaml_file = tmp_path / "rules.yaml"
    yaml_file.write_text(
        textwrap.dedent("""\
            patterns:
              default_effect: exclude
              rules:
                - patterns: ["/vendor/", "/node_modules/"]
                  effect: exclude
                  description: "third-party code"
                - patterns: ["*.yaml", "*.yml"]
                  effect: include
                  description: "manifests"
        """)
    )
    return yaml_file
