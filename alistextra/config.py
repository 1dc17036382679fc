"""
Reading config.cfg.

The [args] section of the file overrides the command line defaults, e.g.

    [args]
    delimiter = ;
    json = yes
    log_level = debug
"""

import os
from configparser import ConfigParser, NoSectionError

DEFAULT_PATH = 'config.cfg'
ENV_VAR = 'ALISTEXTRA_CONFIG'
BOOLEAN_KEYS = ('json',)

def config_path(path=None):
    return path or os.getenv(ENV_VAR) or DEFAULT_PATH

def read_config(path=None):
    """Return the [args] section of the config file as a dict. Missing file or section gives {}."""
    cfg = ConfigParser()
    cfg.read(config_path(path)) # silently skips files that don't exist
    try:
        args = dict(cfg.items('args'))
    except NoSectionError:
        return {}

    for key in BOOLEAN_KEYS:
        if key in args:
            args[key] = cfg.getboolean('args', key)
    return args
