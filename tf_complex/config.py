import logging
from contextlib import contextmanager

from .utils import load_config_file

logger = logging.getLogger(__name__)


class ConfigManager(dict):
    pass


def create_config(default):
    _config = ConfigManager(default)

    def set_(name, var):
        """
        set a configuration.
        """
        if name in _config:
            _config[name] = var
        else:
            raise Exception("No configuration named {} found.".format(name))

    def get_(name):
        """
        get a configuration.
        """
        if name in _config:
            return _config[name]
        raise Exception("No configuration named {} found.".format(name))

    def regist_(name, var=None):
        """
        regist a configuration.
        """
        if name in _config:
            raise Exception(
                "Configuration named {} already exists.".format(name)
            )
        if var is None:

            def regist(f):
                _config[name] = f
                return f

            return regist
        _config[name] = var
        return var

    return set_, get_, regist_


set_config, get_config, regist_config = create_config(
    {"backend": None, "default_backend": "math", "dtype": "float64"}
)


@contextmanager
def temp_config(name, var):
    tmp = get_config(name)
    set_config(name, var)
    try:
        yield var
    finally:
        set_config(name, tmp)


using_backend = lambda var: temp_config("backend", var)


def load_config(name):
    """
    Apply every entry of a configuration file (``.yml`` or ``.json``) with :func:`set_config`.

    :param name: File name.
    :return: Dictionary read from the file.
    """
    dic = load_config_file(name)
    if dic is None:
        return {}
    for k, v in dic.items():
        logger.debug("set config %s = %r from %s", k, v, name)
        set_config(k, v)
    return dic
