"""Settings loading."""
import sys
import copy
import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = Path.home() / '.config' / 'qcmd' / 'config.yaml'

DEFAULT_CONFIG = {
    'outline': {
        'indent': 2,
        'comment': '#',
        'directive': '#indent=',
        'return_marker': '...',
    },
    'shell': {
        # None selects sh -c (or pwsh -command on Windows)
        'command': None,
        # Run commands from the directory holding the outline file
        'chdir': True,
    },
    'display': {
        'numbered': True,
        'branch_suffix': ' >',
        'instruction': '(ctrl-c to go back)',
        'style': {
            'qmark': 'fg:cyan bold',
            'question': 'bold',
            'pointer': 'fg:magenta bold',
            'highlighted': 'fg:magenta bold',
            'answer': 'fg:cyan bold',
        },
    },
}


def merge_config(base, overrides):
    """Recursively merge overrides into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path):
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at top level, got {type(data).__name__}")
    return data


def load_config(path=None):
    """Load settings, layered over DEFAULT_CONFIG.

    An explicit path that cannot be loaded is fatal. Without one, the user
    config file is read if present.
    """
    if path is None:
        if not USER_CONFIG_PATH.is_file():
            return copy.deepcopy(DEFAULT_CONFIG)
        path = USER_CONFIG_PATH

    try:
        user_config = _read_yaml(path)
    except (OSError, yaml.YAMLError, ValueError) as e:
        logger.error(f"Failed to load config: {e}")
        sys.exit(1)

    logger.debug(f"Loaded config from {path}")
    return merge_config(DEFAULT_CONFIG, user_config)
