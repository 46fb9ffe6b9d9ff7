"""
This module provides some functions that may be useful in other modules.
"""
import json

import yaml


def _load_json_file(name):
    with open(name) as f:
        return json.load(f)


def _load_yaml_file(name):
    with open(name) as f:
        return yaml.safe_load(f)


def load_config_file(name):
    """
    Load config file such as **config.yml**.

    :param name: File name. Either yml file or json file.
    :return: Dictionary read from the file.
    """
    if name.endswith("json"):
        return _load_json_file(name)
    if name.endswith("yml") or name.endswith("yaml"):
        return _load_yaml_file(name)
    return _load_yaml_file(name + ".yml")
