"""Engine configuration.

Operations that depend on configuration take an explicit `config` argument.
When it is omitted they read the config active in the current context, which
is TowerConfig() unless a caller scoped another one with use_config(). The
active config is a context variable, so a config entered in one thread or
asyncio task is never seen by another.

Example:
    with use_config(TowerConfig.from_json("tower.json")):
        ...
"""

import json
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, asdict
from typing import Any, Dict, Iterator, Optional

# Largest height with a named alias (Tower128b).
DEFAULT_MAX_HEIGHT = 7


@dataclass(frozen=True)
class TowerConfig:
    """Tower engine configuration.

    Attributes:
        max_height: Largest height the tower_field() factory returns, and
            so the largest height reachable through tower_element(),
            embed() and join(). It does not touch classes that already
            exist: the aliases Tower2b to Tower128b are built at import and
            keep working under any max_height.
        strict_cross_height: If True, multiplying a smaller-height receiver
            by a larger-height operand raises HeightError instead of
            returning the receiver unchanged.
    """
    max_height: int = DEFAULT_MAX_HEIGHT
    strict_cross_height: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.max_height, int) or isinstance(self.max_height, bool):
            raise ValueError(f"max_height must be an int, got {self.max_height!r}")
        if self.max_height < 0:
            raise ValueError(f"max_height must be >= 0, got {self.max_height}")
        if not isinstance(self.strict_cross_height, bool):
            raise ValueError(f"strict_cross_height must be a bool, got {self.strict_cross_height!r}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TowerConfig":
        """Build a config from a dict, rejecting unknown keys."""
        unknown = set(d) - {"max_height", "strict_cross_height"}
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**d)

    @classmethod
    def from_json(cls, path: str) -> "TowerConfig":
        """Load a config from a JSON file."""
        with open(path) as f:
            j = json.load(f)
        return cls.from_dict(j)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


_active_config: ContextVar[TowerConfig] = ContextVar("tower_config", default=TowerConfig())


def get_config() -> TowerConfig:
    """Return the config active in the current context."""
    return _active_config.get()


def resolve_config(config: Optional[TowerConfig] = None) -> TowerConfig:
    """Return config, or the active config when config is None."""
    if config is None:
        return _active_config.get()
    if not isinstance(config, TowerConfig):
        raise TypeError(f"Expected TowerConfig, got {type(config).__name__}")
    return config


@contextmanager
def use_config(config: TowerConfig) -> Iterator[TowerConfig]:
    """Make config the active config for the duration of the with block.

    Only the current thread or task sees the change.
    """
    if not isinstance(config, TowerConfig):
        raise TypeError(f"Expected TowerConfig, got {type(config).__name__}")
    token = _active_config.set(config)
    try:
        yield config
    finally:
        _active_config.reset(token)
