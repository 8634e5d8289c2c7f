"""
Checker configuration.

A YAML file may set any of the CheckerConfig fields, for example::

    checks:
      - within_unit_square
      - unique_vertices
    fail_fast: true
    log_level: DEBUG
    log_file: foldcheck.log
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from validator import CHECK_NAMES

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class CheckerConfig:
    checks: Tuple[str, ...] = CHECK_NAMES
    fail_fast: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.checks, (list, tuple)) or not all(isinstance(c, str) for c in self.checks):
            raise ValueError(f"checks must be a list of names, got {self.checks!r}")
        if not self.checks:
            raise ValueError("checks must name at least one check")
        object.__setattr__(self, "checks", tuple(self.checks))
        unknown = [c for c in self.checks if c not in CHECK_NAMES]
        if unknown:
            raise ValueError(
                f"Invalid checks: {unknown}. "
                f"Must be among {list(CHECK_NAMES)}"
            )

        if not isinstance(self.fail_fast, bool):
            raise ValueError(f"fail_fast must be true or false, got {self.fail_fast!r}")

        if self.log_file is not None and not isinstance(self.log_file, str):
            raise ValueError(f"log_file must be a path, got {self.log_file!r}")

        level = str(self.log_level).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(LOG_LEVELS)}"
            )
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CheckerConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {unknown}")
        return cls(**data)

    def override(self, **changes: Any) -> CheckerConfig:
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def load_config(config_path: Union[str, Path]) -> CheckerConfig:
    """
    Load checker configuration from a YAML file.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If YAML is invalid or holds bad values
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return CheckerConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Config in {config_path} must be a mapping, got {type(data).__name__}")
    return CheckerConfig.from_dict(data)
