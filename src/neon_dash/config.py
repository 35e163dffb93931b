from __future__ import annotations

import dataclasses
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

ENV_CONFIG_FILE = "NEON_DASH_CONFIG"

# YAML files may group keys under these sections; they are flattened on load.
_SECTIONS = ("physics", "obstacles", "player", "scoring")


@dataclass(frozen=True)
class GameConfig:
    """Tuning constants for the simulation.

    All values are in world units and ticks. The world frame is fixed and
    viewport independent: x grows to the right, y grows downward and the
    ground line sits at y = 0.

    Attributes:
        gravity: Velocity added per airborne tick.
        jump_impulse: Vertical velocity applied on jump (negative is up).
        run_speed: Horizontal distance obstacles travel per tick.
        min_spawn_ticks: Smallest gap between two spawns.
        max_spawn_ticks: Largest gap between two spawns (inclusive).
        spawn_x: Off-screen-right x coordinate where obstacles appear.
        prune_margin: Off-screen-left x threshold for an obstacle's right edge.
        player_x: Fixed left edge of the player box.
        player_size: Width and height of the player box.
        score_divisor: Ticks per displayed distance unit.
    """

    gravity: float = 0.6
    jump_impulse: float = -10.0
    run_speed: float = 5.0

    min_spawn_ticks: int = 60
    max_spawn_ticks: int = 120
    spawn_x: float = 1200.0
    prune_margin: float = -100.0

    block_width: float = 40.0
    block_height: float = 40.0
    spike_width: float = 30.0
    spike_height: float = 50.0

    player_x: float = 40.0
    player_size: float = 40.0

    score_divisor: int = 10

    def validate(self) -> "GameConfig":
        """Raise ConfigError if any value would break the simulation."""
        for f in dataclasses.fields(self):
            if not math.isfinite(getattr(self, f.name)):
                raise ConfigError(f"{f.name} must be finite, got {getattr(self, f.name)}")
        if self.gravity <= 0:
            raise ConfigError(f"gravity must be positive, got {self.gravity}")
        if self.jump_impulse >= 0:
            raise ConfigError(f"jump_impulse must be negative, got {self.jump_impulse}")
        if self.run_speed <= 0:
            raise ConfigError(f"run_speed must be positive, got {self.run_speed}")
        if self.min_spawn_ticks < 1 or self.max_spawn_ticks < self.min_spawn_ticks:
            raise ConfigError(
                f"invalid spawn range [{self.min_spawn_ticks}, {self.max_spawn_ticks}]"
            )
        for name in ("block_width", "block_height", "spike_width", "spike_height", "player_size"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.score_divisor < 1:
            raise ConfigError(f"score_divisor must be >= 1, got {self.score_divisor}")
        return self


def _field_types() -> Dict[str, type]:
    return {f.name: type(f.default) for f in dataclasses.fields(GameConfig)}


def _coerce(name: str, value: Any) -> Any:
    caster = _field_types()[name]
    if isinstance(value, bool):
        raise ConfigError(f"Invalid value for {name}: {value!r}")
    if caster is int and isinstance(value, float) and not value.is_integer():
        # Tick counts and divisors are whole numbers; do not truncate silently
        raise ConfigError(f"{name} must be a whole number, got {value!r}")
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from exc


def read_yaml_overrides(path: Path) -> Dict[str, Any]:
    """Read a YAML config file and flatten its known sections into field names."""
    try:
        with path.open("r", encoding="utf-8") as f:
            doc = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed YAML in {path}: {exc}") from exc
    if not isinstance(doc, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at the top level")

    flat: Dict[str, Any] = {}
    for section in _SECTIONS:
        if isinstance(doc.get(section), dict):
            flat.update(doc[section])
    for k, v in doc.items():
        if k in _SECTIONS and isinstance(v, dict):
            continue
        flat[k] = v
    logger.debug("Loaded config overrides from %s: %s", path, flat)
    return flat


def read_env_overrides(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Collect NEON_DASH_<FIELD> overrides, e.g. NEON_DASH_RUN_SPEED=7."""
    env = os.environ if env is None else env
    out: Dict[str, Any] = {}
    for name in _field_types():
        key = f"NEON_DASH_{name.upper()}"
        if env.get(key, "") != "":
            out[name] = env[key]
    return out


def load_config(
    path: Optional[Path | str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> GameConfig:
    """Build a validated GameConfig.

    Order of precedence (lowest to highest): dataclass defaults < YAML file < env.
    The YAML file is ``path`` if given, else the file named by NEON_DASH_CONFIG.
    """
    env = os.environ if env is None else env
    data: Dict[str, Any] = {}

    chosen = Path(path) if path is not None else None
    if chosen is None and env.get(ENV_CONFIG_FILE):
        chosen = Path(env[ENV_CONFIG_FILE]).expanduser()
    if chosen is not None:
        data.update(read_yaml_overrides(chosen))
    data.update(read_env_overrides(env))

    known = _field_types()
    values: Dict[str, Any] = {}
    for k, v in data.items():
        if k not in known:
            logger.warning("Ignoring unknown config key: %s", k)
            continue
        values[k] = _coerce(k, v)

    config = GameConfig(**values).validate()
    if values:
        logger.info("Config overrides applied: %s", sorted(values))
    return config
