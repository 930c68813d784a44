from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping

from .exceptions import ConfigError

_STRATEGIES = {"auto", "recursive", "iterative"}
_OVERFLOW_POLICIES = {"raise", "wrap"}


@dataclass(frozen=True)
class TriangleConfig:
    """
    Evaluation switches for a :class:`~arithtri.core.triangle.Triangle`.

    * ``strategy`` picks how uncached interior values are computed:
      ``"recursive"`` follows the recurrence with memoised recursion,
      ``"iterative"`` resolves it with an explicit work queue, and
      ``"auto"`` recurses below ``recursion_threshold`` rows.
    * ``write_back`` keeps computed values in the triangle's cache. When
      disabled lookups never touch the cache and each uncached lookup costs
      O(row * column).
    * ``overflow`` applies to the integer row-sum shortcut on numpy integer
      elements: ``"raise"`` or ``"wrap"`` (two's complement).
    * ``thread_safe`` guards cache access with a lock.
    """

    strategy: str = "auto"  # "auto" | "recursive" | "iterative"
    recursion_threshold: int = 256
    write_back: bool = True
    overflow: str = "raise"  # "raise" | "wrap"
    thread_safe: bool = False

    def normalized(self) -> "TriangleConfig":
        strategy = (self.strategy or "auto").lower()
        if strategy not in _STRATEGIES:
            raise ConfigError(f"Unsupported evaluation strategy: {self.strategy}")
        overflow = (self.overflow or "raise").lower()
        if overflow not in _OVERFLOW_POLICIES:
            raise ConfigError(f"Unsupported overflow policy: {self.overflow}")
        threshold = int(self.recursion_threshold)
        if threshold < 1:
            raise ConfigError("recursion_threshold must be positive")
        return TriangleConfig(
            strategy=strategy,
            recursion_threshold=threshold,
            write_back=bool(self.write_back),
            overflow=overflow,
            thread_safe=bool(self.thread_safe),
        )

    def uses_recursion(self, row: int) -> bool:
        if self.strategy == "recursive":
            return True
        if self.strategy == "iterative":
            return False
        return row < self.recursion_threshold

    def manifest(self) -> Dict[str, Any]:
        return {field.name: getattr(self, field.name) for field in fields(self)}


def config_from_mapping(data: Mapping[str, Any]) -> TriangleConfig:
    section = data.get("triangle", data)
    if not isinstance(section, Mapping):
        raise ConfigError("The [triangle] section must be a table")
    known = {field.name for field in fields(TriangleConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")
    return TriangleConfig(**dict(section)).normalized()


def load_config(path: Path) -> TriangleConfig:
    """Read a TOML or JSON file into a normalised :class:`TriangleConfig`.

    Settings may sit at the top level or under a ``triangle`` table.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    if path.suffix == ".toml":
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    elif path.suffix == ".json":
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    else:
        raise ConfigError(f"Unsupported config format: {path.suffix}")
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration root must be a table")
    return config_from_mapping(data)
