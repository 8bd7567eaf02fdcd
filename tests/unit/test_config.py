"""
Unit tests for configuration management
"""

import json
from pathlib import Path

import pytest

from dosshell.core.config import Config, get_config


class TestConfig:
    """Test Config class"""

    @pytest.fixture
    def config_path(self, temp_dir):
        return temp_dir / "config.json"

    @pytest.mark.unit
    def test_creates_default_file(self, config_path):
        config = Config(config_path)
        assert config_path.exists()
        assert config.get('shell.username') == 'USER'
        assert config.get('storage.persist') is True
        assert config.get('filesystem.strict_rm') is False

    @pytest.mark.unit
    def test_user_values_merge_with_defaults(self, config_path):
        config_path.write_text(json.dumps({'shell': {'username': 'ALICE'}}))
        config = Config(config_path)
        assert config.get('shell.username') == 'ALICE'
        assert config.get('shell.history_size') == 1000

    @pytest.mark.unit
    def test_invalid_json_uses_defaults(self, config_path):
        config_path.write_text('{oops')
        config = Config(config_path)
        assert config.config == Config.DEFAULTS

    @pytest.mark.unit
    def test_non_object_uses_defaults(self, config_path):
        config_path.write_text('[1, 2]')
        assert Config(config_path).get('shell.username') == 'USER'

    @pytest.mark.unit
    def test_defaults_not_mutated(self, config_path):
        config = Config(config_path)
        config.config['shell']['username'] = 'BOB'
        assert Config.DEFAULTS['shell']['username'] == 'USER'

    @pytest.mark.unit
    def test_get_missing_key(self, config_path):
        config = Config(config_path)
        assert config.get('nope.nothing') is None
        assert config.get('nope.nothing', 5) == 5

    @pytest.mark.unit
    def test_set_saves(self, config_path):
        config = Config(config_path)
        config.set('filesystem.strict_rm', True)
        assert Config(config_path).get('filesystem.strict_rm') is True

    @pytest.mark.unit
    def test_username_env_override(self, config_path, monkeypatch):
        monkeypatch.setenv('DOSSHELL_USER', 'ENVUSER')
        assert Config(config_path).username == 'ENVUSER'

    @pytest.mark.unit
    def test_username_from_config(self, config_path, monkeypatch):
        monkeypatch.delenv('DOSSHELL_USER', raising=False)
        assert Config(config_path).username == 'USER'

    @pytest.mark.unit
    def test_storage_path_expands_user(self, config_path, monkeypatch):
        monkeypatch.delenv('DOSSHELL_STORAGE', raising=False)
        path = Config(config_path).storage_path
        assert path == Path('~/.dosshell/vfs.json').expanduser()

    @pytest.mark.unit
    def test_storage_path_env_override(self, config_path, monkeypatch, temp_dir):
        monkeypatch.setenv('DOSSHELL_STORAGE', str(temp_dir / 'other.json'))
        assert Config(config_path).storage_path == temp_dir / 'other.json'

    @pytest.mark.unit
    def test_get_config_reloads_for_new_path(self, config_path, temp_dir):
        first = get_config(config_path)
        assert get_config(config_path) is first
        second = get_config(temp_dir / 'other.json')
        assert second is not first

    @pytest.mark.unit
    def test_get_int(self, config_path):
        config = Config(config_path)
        config.config['shell']['history_size'] = '25'
        assert config.get_int('shell.history_size', 1000) == 25

    @pytest.mark.unit
    @pytest.mark.parametrize('value', ['lots', None, True, [3], -1])
    def test_get_int_invalid_falls_back(self, config_path, caplog, value):
        config = Config(config_path)
        config.config['shell']['history_size'] = value
        assert config.get_int('shell.history_size', 1000, minimum=0) == 1000
        assert 'Invalid value for shell.history_size' in caplog.text

    @pytest.mark.unit
    def test_get_int_missing_key_uses_default(self, config_path):
        assert Config(config_path).get_int('nope.size', 7) == 7
