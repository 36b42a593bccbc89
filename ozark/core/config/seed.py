# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""YAML seed-data loader.

Seed files hold the initial contents of a collection that has never been
written, e.g. the demo task shown on a fresh schedule board.

Example:
    >>> from ozark.core.config.seed import load_seed_collection
    >>> tasks = load_seed_collection("schedule_tasks")
    >>> tasks[0]["title"]
    'Demo_task_1'
"""

from pathlib import Path
from typing import Any

import yaml

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


class SeedLoadError(Exception):
    """Raised when a seed file cannot be loaded or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize SeedLoadError.

        Args:
            path: Path to the seed file that failed to load.
            reason: Description of why the file failed to load.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load seed file '{path}': {reason}")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file whose root is a mapping.

    Args:
        path: Path to the YAML file to load.

    Returns:
        Parsed contents. Empty dict if the file is empty.

    Raises:
        SeedLoadError: If the file doesn't exist, cannot be read,
            or contains invalid YAML.
    """
    if not path.is_file():
        raise SeedLoadError(path, "File does not exist")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SeedLoadError(path, f"Cannot read file: {e}") from e

    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SeedLoadError(path, f"Invalid YAML syntax: {e}") from e

    if parsed is None:
        return {}

    if not isinstance(parsed, dict):
        raise SeedLoadError(
            path, f"YAML root must be a mapping, got {type(parsed).__name__}"
        )

    return parsed


def load_seed_collection(
    collection: str,
    directory: Path = FIXTURES_DIR,
) -> list[dict[str, Any]]:
    """Load the seed entries for one collection.

    The seed file is ``<directory>/<collection>.yaml`` and must contain an
    ``items`` list. A missing file means the collection has no seed.

    Args:
        collection: Logical collection name (e.g. ``schedule_tasks``).
        directory: Directory holding seed files.

    Returns:
        List of raw entries, in file order.

    Raises:
        SeedLoadError: If the file exists but is malformed.
    """
    path = directory / f"{collection}.yaml"
    if not path.exists():
        return []

    items = load_yaml(path).get("items", [])
    if not isinstance(items, list):
        raise SeedLoadError(path, "'items' must be a list")
    return items
