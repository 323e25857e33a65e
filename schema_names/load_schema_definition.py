"""Logic for loading a schema-definition mapping from a YAML or JSON file."""

from pathlib import Path
from typing import Any

import yaml


def load_schema_definition(path: Path) -> dict[str, Any]:
    """Load a single named schema definition.

    JSON documents are read through the YAML parser as well.
    """
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(doc, dict):
        raise ValueError(f"{path} does not contain a schema definition mapping")
    return doc
