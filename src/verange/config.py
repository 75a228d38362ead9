# SPDX-License-Identifier: MIT
"""Configuration loading from pyproject.toml.

Projects can pin the merge and comparison policies in their pyproject.toml:

    [tool.verange]
    bound-policy = "tightest"
    temporal-order = "lexicographic"
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from .compare import TemporalOrder
from .ranges import BoundPolicy

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


def _enum_option(table: dict[str, Any], key: str, enum: type[E], default: E) -> E:
    value = table.get(key)
    if value is None:
        return default
    try:
        return enum(value)
    except ValueError:
        allowed = ", ".join(repr(member.value) for member in enum)
        raise ConfigError(
            f"Invalid value {value!r} for [tool.verange].{key}; expected one of {allowed}"
        ) from None


@dataclass
class VerangeConfig:
    """Policies applied when building ranges and comparing versions.

    Attributes:
        bound_policy: How repeated ``>=``/``<`` clauses are merged
        temporal_order: How ``is_older_than`` combines field comparisons
        source: The pyproject.toml the values came from, if any
    """

    bound_policy: BoundPolicy = BoundPolicy.LOOSEST
    temporal_order: TemporalOrder = TemporalOrder.DISJUNCTIVE
    source: Optional[Path] = None

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "VerangeConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            VerangeConfig instance

        Raises:
            ConfigError: If the file is invalid or holds unknown values
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        pyproject_path = Path(project_dir) / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_dir}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        config = cls.from_pyproject_dict(pyproject)
        config.source = pyproject_path
        logger.debug("Loaded configuration from %s: %s", pyproject_path, config)
        return config

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any]) -> "VerangeConfig":
        """Create VerangeConfig from a parsed pyproject.toml dictionary."""
        table = pyproject.get("tool", {}).get("verange", {})
        if not isinstance(table, dict):
            raise ConfigError("[tool.verange] must be a table")

        return cls(
            bound_policy=_enum_option(
                table, "bound-policy", BoundPolicy, BoundPolicy.LOOSEST
            ),
            temporal_order=_enum_option(
                table, "temporal-order", TemporalOrder, TemporalOrder.DISJUNCTIVE
            ),
        )


def find_pyproject_dir(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory at or above ``start_dir`` holding pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        The directory, or None if no pyproject.toml was found
    """
    current = Path(start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").exists():
            return directory
    return None


def load_config(start_dir: Optional[str | Path] = None) -> VerangeConfig:
    """Load configuration for the project containing ``start_dir``.

    Falls back to the default policies when no pyproject.toml is found.
    """
    project_dir = find_pyproject_dir(start_dir)
    if project_dir is None:
        logger.debug("No pyproject.toml found, using default configuration")
        return VerangeConfig()
    return VerangeConfig.from_pyproject(project_dir)
