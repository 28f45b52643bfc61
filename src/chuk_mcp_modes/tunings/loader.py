"""
Tuning loader - discovers and loads tuning definitions.

Tunings can come from:
1. Built-in library (shipped with package)
2. Project tunings (user's project/tunings directory)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_modes.models.tuning import Tuning, normalize_tuning_name

logger = logging.getLogger(__name__)


class TuningLoader:
    """
    Discovers and loads tuning definitions.

    Tunings are loaded from YAML files in the library and project directories.
    Project tunings override library tunings with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the tuning loader.

        Args:
            library_path: Path to built-in tuning library
            project_path: Path to project tunings directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, Tuning] = {}

    def list_tunings(self) -> list[Tuning]:
        """
        List all available tunings.

        Returns tunings from both library and project, with project
        tunings taking precedence.
        """
        return sorted(self._index_tunings().values(), key=lambda t: t.name)

    def get_tuning(self, name: str) -> Tuning | None:
        """
        Get a tuning by name.

        Names resolve the same way list_tunings reports them: by the
        tuning's own name (or its file name when it has none), normalized
        like Tuning names. Project tunings take precedence over library
        tunings.

        Args:
            name: Tuning name

        Returns:
            Tuning if found, None otherwise
        """
        key = normalize_tuning_name(name)
        if key not in self._cache:
            self._cache.update(self._index_tunings())
        return self._cache.get(key)

    def _index_tunings(self) -> dict[str, Tuning]:
        """Load every tuning file, keyed by tuning name, project files last."""
        tunings: dict[str, Tuning] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                tuning = self._load_tuning_file(path)
                if tuning:
                    tunings[tuning.name] = tuning

        return tunings

    def _load_tuning_file(self, path: Path) -> Tuning | None:
        """Load a tuning from a YAML file, skipping files that don't parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_tuning(data or {}, default_name=path.stem)
        except (OSError, AttributeError, TypeError, ValidationError, yaml.YAMLError) as e:
            logger.warning(f"Skipping tuning file {path}: {e}")
            return None

    def _parse_tuning(self, data: dict[str, Any], default_name: str) -> Tuning:
        """Parse tuning from YAML data."""
        reference = data.get("reference") or {}
        return Tuning(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            reference_keynum=reference.get("keynum", 69),
            reference_frequency=reference.get("frequency", 440),
            mirror_below_reference=data.get("mirror_below_reference", True),
        )

    def clear_cache(self) -> None:
        """Clear the tuning cache."""
        self._cache.clear()
