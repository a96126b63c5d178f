# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

"""Engine configuration.

Config keys (YAML):
- redirect_loop_limit (int, optional, >= 1, default 70)
- debug (bool, optional, default False; `debug_enabled` is accepted too)

Example:
redirect_loop_limit: 10
debug: true
"""

from dataclasses import dataclass

import yaml


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class EngineConfig:
    redirect_loop_limit: int = 70
    debug_enabled: bool = False

    def __post_init__(self):
        limit = self.redirect_loop_limit
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ConfigError(
                f"redirect_loop_limit must be a positive integer, got {limit!r}"
            )
        if not isinstance(self.debug_enabled, bool):
            raise ConfigError(
                f"debug must be true or false, got {self.debug_enabled!r}"
            )


DEFAULT_CONFIG = EngineConfig()


def config_from_dict(data):
    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")
    debug_enabled = data.get("debug", data.get("debug_enabled", False))
    return EngineConfig(
        redirect_loop_limit=data.get("redirect_loop_limit", 70),
        debug_enabled=debug_enabled,
    )


def load_config(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"failed to read config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid yaml: {exc}") from exc
    return config_from_dict(data)
