from __future__ import annotations
import os
import re
from abc import ABC, abstractmethod
from typing import Any, Mapping, TypeAlias


ConfigValue: TypeAlias = (
    str | int | float | bool | None | dict[str, "ConfigValue"] | list["ConfigValue"]
)


class ConfigPreprocessor(ABC):
    """
    Transforms raw config structures (dict/list/scalar) after loading and
    before they are handed to the application.

    Examples:
        - Resolve ${ENV_VAR} placeholders
        - Apply overlays (base.json + env.json)
    """

    @abstractmethod
    def process(self, data: ConfigValue) -> ConfigValue: ...


class EnvironmentPreprocessor(ConfigPreprocessor):
    """
    Resolves ${NAME} and ${NAME:-default} placeholders inside string values.
    Unknown names without a default are left untouched.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ
        self._pattern = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

    def _replace(self, s: str) -> str:
        def replace(m: re.Match) -> str:
            name, default = m.groups()
            if name in self._environ:
                return self._environ[name]
            return default if default is not None else m.group(0)

        return self._pattern.sub(replace, s)

    def process(self, data: ConfigValue) -> ConfigValue:
        if isinstance(data, dict):
            return {k: self.process(v) for k, v in data.items()}

        if isinstance(data, list):
            return [self.process(v) for v in data]

        if isinstance(data, str):
            return self._replace(data)

        return data


def merge(base: dict[str, Any], overlay: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge overlay into a copy of base; overlay wins."""
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), dict):
            merged[key] = merge(merged[key], value)
        else:
            merged[key] = value
    return merged
