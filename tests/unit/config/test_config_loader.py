"""Unit tests for ConfigLoader"""

import json

import pytest
import yaml

from config.loader import ConfigLoader
from config.preprocessor import EnvironmentPreprocessor
from config.settings import CONFIG_DIR_ENV, CONFIG_KEYS_DIR_ENV, HarnessSettings
from core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clear_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)
    monkeypatch.delenv(CONFIG_KEYS_DIR_ENV, raising=False)


@pytest.mark.unit
@pytest.mark.config
def test_loads_json_configuration(tmp_path):
    (tmp_path / "appsettings.json").write_text(json.dumps({"Api": {"BaseUrl": "https://test"}}))
    settings = HarnessSettings(content_root=tmp_path, app_configuration="appsettings.json")

    cfg = ConfigLoader().load(settings)

    assert cfg == {"Api": {"BaseUrl": "https://test"}}


@pytest.mark.unit
@pytest.mark.config
def test_loads_yaml_configuration(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "settings.yaml").write_text(yaml.dump({"Feature": {"Enabled": True}}))
    settings = HarnessSettings(content_root=tmp_path, app_configuration="settings.yaml")

    cfg = ConfigLoader().load(settings)

    assert cfg["Feature"]["Enabled"] is True


@pytest.mark.unit
@pytest.mark.config
def test_missing_configuration_file_is_optional(tmp_path):
    settings = HarnessSettings(content_root=tmp_path, app_configuration="missing.json")

    assert ConfigLoader().load(settings) == {}


@pytest.mark.unit
@pytest.mark.config
def test_invalid_json_raises_configuration_error(tmp_path):
    (tmp_path / "broken.json").write_text("{not json")
    settings = HarnessSettings(content_root=tmp_path, app_configuration="broken.json")

    with pytest.raises(ConfigurationError, match="broken.json"):
        ConfigLoader().load(settings)


@pytest.mark.unit
@pytest.mark.config
def test_non_mapping_document_raises_configuration_error(tmp_path):
    (tmp_path / "list.yaml").write_text("- a\n- b\n")
    settings = HarnessSettings(content_root=tmp_path, app_configuration="list.yaml")

    with pytest.raises(ConfigurationError, match="mapping"):
        ConfigLoader().load(settings)


@pytest.mark.unit
@pytest.mark.config
def test_empty_yaml_document_is_empty_mapping(tmp_path):
    (tmp_path / "empty.yaml").write_text("")
    settings = HarnessSettings(content_root=tmp_path, app_configuration="empty.yaml")

    assert ConfigLoader().load(settings) == {}


@pytest.mark.unit
@pytest.mark.config
def test_key_per_file_overrides_file_values(tmp_path):
    """
    GIVEN a configuration file and a key-per-file directory with an overlapping key
    WHEN configuration is loaded
    THEN nested keys from the directory win and other file values are kept
    """
    (tmp_path / "appsettings.json").write_text(
        json.dumps({"Db": {"User": "app", "Password": "from-file"}})
    )
    keys_dir = tmp_path / "config-keys"
    keys_dir.mkdir()
    (keys_dir / "Db__Password").write_text("s3cret\n")
    (keys_dir / "Token").write_text("abc")
    (keys_dir / "..data").write_text("ignored")

    settings = HarnessSettings(content_root=tmp_path, app_configuration="appsettings.json")
    cfg = ConfigLoader().load(settings)

    assert cfg == {"Db": {"User": "app", "Password": "s3cret"}, "Token": "abc"}


@pytest.mark.unit
@pytest.mark.config
def test_preprocessors_run_after_merge(tmp_path):
    (tmp_path / "appsettings.json").write_text(json.dumps({"Url": "https://${HOST}/api"}))
    settings = HarnessSettings(content_root=tmp_path, app_configuration="appsettings.json")

    loader = ConfigLoader()
    loader.add_preprocessor(EnvironmentPreprocessor({"HOST": "test"}))

    assert loader.load(settings) == {"Url": "https://test/api"}
