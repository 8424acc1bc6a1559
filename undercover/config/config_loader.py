"""
Loads table and provider settings from YAML files.
"""

import yaml
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from .game_config import GameConfig, default_config


def _accepted_types(hint: Any) -> Tuple[tuple, bool]:
    """Split a field annotation into the concrete types it allows and whether None is allowed."""
    if get_origin(hint) is Union:
        args = get_args(hint)
        return tuple(a for a in args if a is not type(None)), type(None) in args
    return (hint,), False


def _check_value(key: str, value: Any, hint: Any) -> Any:
    types, nullable = _accepted_types(hint)
    if value is None:
        if nullable:
            return None
        raise ValueError(f"Config key '{key}' must not be empty")

    # YAML booleans are ints to isinstance(); only bool fields take them
    if isinstance(value, bool) and bool not in types:
        raise ValueError(f"Config key '{key}' expects {types[0].__name__}, got a boolean")
    if float in types and isinstance(value, int):
        return float(value)
    if not isinstance(value, types):
        raise ValueError(
            f"Config key '{key}' expects {types[0].__name__}, got {type(value).__name__}: {value!r}"
        )
    return value


def parse_config_dict(config_dict: Dict[str, Any]) -> GameConfig:
    """
    Build a GameConfig from a parsed YAML mapping.

    Unknown keys are reported and skipped. A value of the wrong type
    raises ValueError naming the key.
    """
    hints = get_type_hints(GameConfig)
    known = {f.name for f in fields(GameConfig)}

    values = {}
    for key, value in config_dict.items():
        if key not in known:
            print(f"Warning: Unknown config key '{key}' in YAML file")
            continue
        values[key] = _check_value(key, value, hints[key])

    return replace(GameConfig(), **values)


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load a game configuration file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not a mapping or a value has the wrong type
        yaml.YAMLError: If the file is not valid YAML
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_file, 'r', encoding='utf-8') as f:
        config_dict = yaml.safe_load(f)

    if config_dict is None:
        return GameConfig()
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping of settings")

    return parse_config_dict(config_dict)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load a config file, or the default config when no path is given."""
    if config_path is None:
        return default_config
    return load_config_from_yaml(config_path)
