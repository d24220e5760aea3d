from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib.resources import files as resource_files
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "OSSUARY_CONFIG"


@dataclass(frozen=True)
class GameConfig:
    """Runtime configuration for layout and item tuning.

    Sizes are in grid cells. Alphas are 0.0 - 1.0 opacities used when a menu
    panel is composited over the map.
    """

    screen_width: int = 80
    screen_height: int = 50
    inventory_width: int = 50
    heal_amount: int = 4
    player_max_hp: int = 30
    menu_foreground_alpha: float = 1.0
    menu_background_alpha: float = 0.7
    message_history: int = 5

    def validate(self) -> None:
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ConfigError(f"Invalid screen size {self.screen_width}x{self.screen_height}")
        if not 0 < self.inventory_width <= self.screen_width:
            raise ConfigError(f"inventory_width must be in 1..{self.screen_width}, got {self.inventory_width}")
        if self.heal_amount <= 0:
            raise ConfigError(f"heal_amount must be positive, got {self.heal_amount}")
        if self.player_max_hp <= 0:
            raise ConfigError(f"player_max_hp must be positive, got {self.player_max_hp}")
        for name in ("menu_foreground_alpha", "menu_background_alpha"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigError(f"{name} must be within 0.0-1.0, got {value}")
        if not 0 < self.message_history < self.screen_height:
            raise ConfigError(f"message_history must be in 1..{self.screen_height - 1}, got {self.message_history}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        fields = {f.name: f for f in dataclasses.fields(cls)}
        values: Dict[str, Any] = {}
        for key, raw in data.items():
            if key not in fields:
                logger.warning("Ignoring unknown config key: %s", key)
                continue
            caster = float if fields[key].type == "float" else _as_int
            try:
                values[key] = caster(raw)
            except (TypeError, ValueError) as exc:
                raise ConfigError(f"Invalid value for {key}: {raw!r}") from exc
        config = cls(**values)
        config.validate()
        return config


def _as_int(raw: Any) -> int:
    """Integer config values; fractional numbers and booleans are rejected, not truncated."""
    if isinstance(raw, bool):
        raise TypeError(f"expected an integer, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"expected an integer, got {raw!r}")
    return int(raw)


def _read_yaml(text: str, source: str) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {source}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{source} must contain a mapping, got {type(raw).__name__}")
    return raw


def load_config(path: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> GameConfig:
    """Load configuration from YAML.

    The embedded defaults (ossuary/defaults.yaml) are read first, then overlaid
    with the file at ``path``, or the file named by OSSUARY_CONFIG when no path
    is given.
    """
    env = os.environ if env is None else env
    text = resource_files("ossuary").joinpath("defaults.yaml").read_text(encoding="utf-8")
    data = _read_yaml(text, "defaults.yaml")
    logger.debug("Loaded embedded default config")

    override = path or env.get(CONFIG_ENV_VAR) or None
    if override:
        with open(override, "r", encoding="utf-8") as f:
            data.update(_read_yaml(f.read(), override))
        logger.debug("Loaded config overrides from path: %s", override)

    config = GameConfig.from_dict(data)
    logger.info("Config: screen=%dx%d heal_amount=%d", config.screen_width, config.screen_height, config.heal_amount)
    return config
