"""Shared TOML loading for rating-system config directories."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar
import tomllib


@dataclass(frozen=True)
class BaseSystemConfig:
    """Metadata every rating-system config carries."""

    name: str
    description: str | None
    file_path: Path

    @property
    def file_name(self) -> str:
        return self.file_path.name

    def as_config_json(self) -> dict[str, Any]:
        raise NotImplementedError


T = TypeVar("T", bound=BaseSystemConfig)


def _read_toml(file_path: Path) -> dict[str, Any]:
    with file_path.open("rb") as file:
        return tomllib.load(file)


def load_system_configs(
    config_dir: Path,
    parser: Callable[[dict[str, Any], Path], T],
    *,
    duplicate_name_label: str = "rating",
) -> list[T]:
    """Parse every ``*.toml`` in ``config_dir`` (sorted by filename); system names must be unique."""
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")

    systems = [parser(_read_toml(file_path), file_path) for file_path in config_files]

    seen: set[str] = set()
    duplicates: set[str] = set()
    for system in systems:
        if system.name in seen:
            duplicates.add(system.name)
        seen.add(system.name)
    if duplicates:
        raise ValueError(
            f"Duplicate {duplicate_name_label} system names found in {config_dir}: {sorted(duplicates)}"
        )

    return systems


def select_system_config(configs: Sequence[T], file_name: str | None = None) -> T:
    """Pick the config loaded from ``file_name``, or the first one when no name is given."""
    if not configs:
        raise LookupError("No system configs to select from")
    if file_name is None:
        return configs[0]
    for config in configs:
        if config.file_name == file_name:
            return config
    raise LookupError(f"No config named '{file_name}' among {[config.file_name for config in configs]}")


__all__ = ["BaseSystemConfig", "load_system_configs", "select_system_config"]
