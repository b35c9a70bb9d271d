from __future__ import annotations

import pathlib
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

import yaml


@dataclass(frozen=True)
class GameConfig:
    rows: int = 20
    cols: int = 10
    spawn_x: Optional[int] = None  # None -> cols // 2 - 1
    spawn_y: int = 0
    tick_ms: int = 300
    random_seed: Optional[int] = None
    cell_size: int = 28

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.rows}x{self.cols}")
        if self.spawn_x is not None and not 0 <= self.spawn_x < self.cols:
            raise ValueError(f"spawn_x {self.spawn_x} is outside a {self.cols}-wide board")
        if self.tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {self.tick_ms}")

    @property
    def spawn_column(self) -> int:
        if self.spawn_x is not None:
            return self.spawn_x
        return max(0, self.cols // 2 - 1)

    def merged(self, overrides: Mapping[str, Any]) -> "GameConfig":
        """Copy with every non-None override applied."""
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **values)


def load_config(config_path: str | pathlib.Path) -> GameConfig:
    """Load a GameConfig from a YAML mapping.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file holds keys GameConfig does not know.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping: {config_path}")
    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    return GameConfig(**data)
