from unittest import mock

import pytest
import yaml

from fcp import config_parser
from fcp.config_parser import (available_parallelism, default_configuration,
                               parse_config, validate_config)

def write_config(tmpdir, text):
    path = tmpdir.join('config.yml')
    path.write(text)
    return path.strpath

def test_available_parallelism():
    with mock.patch.object(config_parser.os, 'cpu_count', return_value=12):
        assert available_parallelism() == 12

def test_available_parallelism_fallback():
    with mock.patch.object(config_parser.os, 'cpu_count', return_value=None):
        assert available_parallelism() == 4

def test_default_configuration():
    conf = default_configuration()
    assert conf['batch_size'] == 10000
    assert conf['workers'] >= 1
    assert conf['verbose'] is False
    assert conf['strict'] is False

def test_parse_config(tmpdir):
    path = write_config(tmpdir, 'workers: 8\nbatch_size: 50\nverbose: true\n')
    conf = parse_config(path)
    assert conf['workers'] == 8
    assert conf['batch_size'] == 50
    assert conf['verbose'] is True
    assert conf['strict'] is False

def test_parse_empty_config(tmpdir):
    assert parse_config(write_config(tmpdir, '')) == default_configuration()

def test_missing_config(tmpdir):
    with pytest.raises(FileNotFoundError):
        parse_config(tmpdir.join('nope.yml').strpath)

def test_malformed_yaml(tmpdir):
    with pytest.raises(yaml.YAMLError):
        parse_config(write_config(tmpdir, 'workers: [1, 2\n'))

def test_non_mapping_config(tmpdir):
    with pytest.raises(ValueError):
        parse_config(write_config(tmpdir, '- workers\n'))

def test_unknown_key():
    with pytest.raises(KeyError):
        validate_config({'threads': 4})

@pytest.mark.parametrize("config", [
    {'workers': 0},
    {'workers': -2},
    {'workers': 'four'},
    {'workers': True},
    {'batch_size': 2.5},
    {'verbose': 'yes'},
    {'strict': 1}
])
def test_invalid_values(config):
    with pytest.raises(ValueError):
        validate_config(config)
