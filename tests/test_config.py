import pytest
from unittest.mock import patch
from pathlib import Path
import json
from histcomplete.config import Config

@pytest.fixture
def mock_config_path(tmp_path):
    config_file = tmp_path / "config.json"
    with patch('histcomplete.config.Config._get_config_path', return_value=config_file):
        yield config_file

def test_load_defaults(mock_config_path):
    """Test loading when file doesn't exist returns defaults."""
    cfg = Config.load()
    assert cfg.history_file.endswith("history.csv")
    assert cfg.max_suggestions == 10
    assert cfg.complete_while_typing is True

def test_save_and_load(mock_config_path):
    """Test saving changes and reloading them."""
    cfg = Config(history_file="/tmp/h.csv", max_suggestions=3, complete_while_typing=False)
    cfg.save()

    assert mock_config_path.exists()

    loaded_cfg = Config.load()
    assert loaded_cfg.history_file == "/tmp/h.csv"
    assert loaded_cfg.max_suggestions == 3
    assert loaded_cfg.complete_while_typing is False

def test_load_ignores_unknown_keys(mock_config_path):
    """Test keys from other versions are dropped."""
    mock_config_path.write_text(json.dumps({"max_suggestions": 4, "theme": "dark"}))

    cfg = Config.load()
    assert cfg.max_suggestions == 4
    assert not hasattr(cfg, "theme")

def test_load_broken_file(mock_config_path):
    """Test a corrupt file falls back to defaults."""
    mock_config_path.write_text("{not json")

    cfg = Config.load()
    assert cfg == Config()

def test_set_value(mock_config_path):
    """Test setting specific values updates file."""
    cfg = Config.load()
    cfg.set("max_suggestions", "7")

    with open(mock_config_path) as f:
        data = json.load(f)
        assert data["max_suggestions"] == 7

def test_set_bool_from_string(mock_config_path):
    """Test string values for flags are converted."""
    cfg = Config.load()
    cfg.set("complete_while_typing", "no")
    assert cfg.complete_while_typing is False
    cfg.set("complete_while_typing", "Yes")
    assert cfg.complete_while_typing is True

def test_set_invalid_int(mock_config_path):
    """Test non-numeric limit raises error."""
    cfg = Config.load()
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "many")

def test_unknown_key(mock_config_path):
    """Test setting unknown key raises error."""
    cfg = Config.load()
    with pytest.raises(KeyError):
        cfg.set("unknown_key", "value")
    with pytest.raises(KeyError):
        cfg.set("history_path", "value")

def test_history_path_expands_home():
    """Test ~ in the history file is expanded."""
    cfg = Config(history_file="~/h.csv")
    assert cfg.history_path == Path.home() / "h.csv"

@pytest.mark.parametrize("raw", ["5", 5, 5.0])
def test_load_coerces_numeric_strings(mock_config_path, raw):
    """Test a hand-edited limit is converted to an int."""
    mock_config_path.write_text(json.dumps({"max_suggestions": raw}))

    cfg = Config.load()
    assert cfg.max_suggestions == 5
    assert isinstance(cfg.max_suggestions, int)

@pytest.mark.parametrize("raw", [None, "many", -2, True, [3]])
def test_load_bad_limit_keeps_default(mock_config_path, raw):
    """Test a wrong-typed limit falls back to the default."""
    mock_config_path.write_text(json.dumps({"max_suggestions": raw, "complete_while_typing": False}))

    cfg = Config.load()
    assert cfg.max_suggestions == 10
    assert cfg.complete_while_typing is False

def test_load_bad_values_keep_defaults(mock_config_path):
    """Test wrong-typed fields each fall back on their own."""
    mock_config_path.write_text(json.dumps({"history_file": 42, "complete_while_typing": None, "max_suggestions": 2}))

    cfg = Config.load()
    assert cfg.history_file == Config().history_file
    assert cfg.complete_while_typing is True
    assert cfg.max_suggestions == 2

def test_load_string_flag(mock_config_path):
    """Test a hand-edited flag string is converted."""
    mock_config_path.write_text(json.dumps({"complete_while_typing": "off"}))

    assert Config.load().complete_while_typing is False

def test_set_negative_limit(mock_config_path):
    """Test negative limits are rejected and nothing is saved."""
    cfg = Config.load()
    with pytest.raises(ValueError):
        cfg.set("max_suggestions", "-3")
    assert cfg.max_suggestions == 10
    assert not mock_config_path.exists()
