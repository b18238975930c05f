import json
import logging
from pathlib import Path
from typing import Any, Callable

import yaml

from config.preprocessor import ConfigPreprocessor, ConfigValue, merge
from config.settings import HarnessSettings
from core.exceptions import ConfigurationError


KEY_SECTION_DELIMITER = "__"


class ConfigLoader:
    """
    Build the configuration handed to an application under test.

    Sources, later ones winning:
      1. the settings' app_configuration file (JSON or YAML), if it exists
      2. the key-per-file directory: one file per key, the file name is the key
         ("Section__Key" nests), the stripped file content is the value
    Preprocessors then run over the merged result.
    """

    def __init__(self, preprocessors: list[ConfigPreprocessor] | None = None):
        self._preprocessors = preprocessors or []
        self._logger = logging.getLogger(f"[{self.__class__.__name__}]")

    def add_preprocessor(self, preprocessor: ConfigPreprocessor) -> None:
        self._preprocessors.append(preprocessor)

    def load(self, settings: HarnessSettings) -> dict[str, ConfigValue]:
        data: dict[str, Any] = {}

        config_path = settings.resolve_app_configuration()
        if config_path is not None:
            if config_path.is_file():
                data = merge(data, self.from_file(config_path))
            else:
                self._logger.info(f"Optional configuration file not found: {config_path}")

        keys_dir = settings.resolve_config_keys_dir()
        if keys_dir.is_dir():
            data = merge(data, self.from_key_per_file(keys_dir))

        return self._build(data)

    def from_file(self, source: Path) -> dict[str, Any]:
        if source.suffix.lower() in (".yaml", ".yml"):
            return self._load(source, parser=yaml.safe_load)
        return self._load(source, parser=json.loads)

    def from_key_per_file(self, directory: Path) -> dict[str, Any]:
        data: dict[str, Any] = {}

        for entry in sorted(directory.iterdir()):
            # mounted secret volumes carry ..data style bookkeeping entries
            if not entry.is_file() or entry.name.startswith("."):
                continue

            *sections, key = entry.name.split(KEY_SECTION_DELIMITER)
            node = data
            for section in sections:
                node = node.setdefault(section, {})
            node[key] = entry.read_text(encoding="utf-8").strip()

        return data

    def _load(
        self,
        source: Path,
        *,
        parser: Callable[[str], Any],
    ) -> dict[str, Any]:
        try:
            parsed = parser(source.read_text(encoding="utf-8"))
        except (OSError, ValueError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Could not read configuration from {source}: {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ConfigurationError(
                f"Configuration in {source} must be a mapping, got {type(parsed).__name__}"
            )
        return parsed

    def _build(self, data: ConfigValue) -> dict[str, ConfigValue]:
        for pre in self._preprocessors:
            data = pre.process(data)

        return data
