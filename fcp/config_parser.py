import os
import yaml

from fcp.utils.filecopy import BATCH_SIZE, DEFAULT_WORKERS

def available_parallelism():
    """
    The number of workers to use when none is configured: the host's CPU
    count, or DEFAULT_WORKERS if that can not be determined.
    """
    return os.cpu_count() or DEFAULT_WORKERS

def default_configuration():
    return {'workers': available_parallelism(),
            'batch_size': BATCH_SIZE,
            'verbose': False,
            'strict': False}

def validate_config(config):
    """
    Check a config dict against the known keys and fill in defaults for
    anything missing.

    Parameters
    ----------
    config : dict
             Possibly partial configuration

    Returns
    -------
    conf : dict
           The complete configuration
    """
    conf = default_configuration()
    for k, v in config.items():
        if k not in conf:
            raise KeyError(f'Unknown key: "{k}" in the config. Options are: {list(conf.keys())}')
        if k in ('workers', 'batch_size'):
            if isinstance(v, bool) or not isinstance(v, int) or v < 1:
                raise ValueError(f'Config key "{k}" must be a positive integer, not {v!r}.')
        elif not isinstance(v, bool):
            raise ValueError(f'Config key "{k}" must be true or false, not {v!r}.')
        conf[k] = v
    return conf

def parse_config(filepath):
    if not os.path.exists(filepath):
        raise FileNotFoundError(f'Config file {filepath} does not exist.')

    # Not wrapping in a try/except so that we get the
    # yaml library to raise any issues on parsing
    with open(filepath, 'r') as f:
        config = yaml.safe_load(f)

    # An empty file is an empty config
    if config is None:
        config = {}
    if not isinstance(config, dict):
        raise ValueError(f'Config file {filepath} must contain a mapping at the root.')

    return validate_config(config)
