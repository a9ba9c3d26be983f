# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration helpers for the :mod:`langtour.cli` entry point.

Configuration only controls logging. The tour itself, and therefore the
report, is fixed.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

import yaml

from .errors import ConfigError
from .runtime.logging import LEVEL_NAMES

DEFAULT_CONFIG_PATH = Path("~/.config/langtour/config.toml")

ENV_LOG_LEVEL = "LANGTOUR_LOG_LEVEL"
ENV_LOG_FORMAT = "LANGTOUR_LOG_FORMAT"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})

__all__ = ["DEFAULT_CONFIG_PATH", "TourConfig", "load_config"]


@dataclass(frozen=True, slots=True)
class TourConfig:
    """Resolved configuration for a tour run."""

    log_level: str | None = None
    json_logs: bool = False


def load_config(
    path: Path | Mapping[str, Any] | None = None,
    cli_overrides: object | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> TourConfig:
    """Load and validate the langtour configuration.

    Sources are applied in order: the configuration file, then environment
    variables, then CLI overrides. ``None`` values in the overrides are
    ignored so unset flags do not clobber the file.

    Parameters
    ----------
    path:
        Path to a TOML or YAML file. ``None`` falls back to
        ``~/.config/langtour/config.toml``, which may be absent. Tests may pass
        an in-memory mapping to skip filesystem I/O.
    cli_overrides:
        Mapping or namespace whose keys mirror ``TourConfig``'s field names.
    env:
        Optional environment mapping. Defaults to :data:`os.environ`.
    """

    env_map = os.environ if env is None else env

    if isinstance(path, Mapping):
        raw: dict[str, object] = dict(cast(Mapping[str, object], path))
    else:
        raw = _load_config_file(
            path if path is not None else DEFAULT_CONFIG_PATH.expanduser()
        )

    config = _normalise_config(raw)
    if ENV_LOG_LEVEL in env_map:
        config["log_level"] = env_map[ENV_LOG_LEVEL]
    if ENV_LOG_FORMAT in env_map:
        config["json_logs"] = env_map[ENV_LOG_FORMAT].strip().lower() == "json"
    config = _apply_cli_overrides(config=config, overrides=cli_overrides)

    return TourConfig(
        log_level=_coerce_level(config.get("log_level")),
        json_logs=_coerce_bool(config.get("json_logs"), "json_logs"),
    )


def _load_config_file(path: Path) -> dict[str, object]:
    if not path.exists():
        if path == DEFAULT_CONFIG_PATH.expanduser():
            return {}
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    suffix = path.suffix.lower()
    data: object
    try:
        if suffix == ".toml" or not suffix:
            with path.open("rb") as handle:
                data = tomllib.load(handle)
        elif suffix in {".yaml", ".yml"}:
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
        else:
            msg = f"Unsupported configuration format: {path.suffix}"
            raise ConfigError(msg)
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        msg = f"Could not parse configuration file {path}: {exc}"
        raise ConfigError(msg) from exc

    if not isinstance(data, MutableMapping):
        msg = "Configuration file must contain a mapping at the root."
        raise ConfigError(msg)

    typed: dict[str, object] = {}
    for key, value in cast(MutableMapping[object, object], data).items():
        if not isinstance(key, str):
            msg = f"Configuration keys must be strings (got {key!r})."
            raise ConfigError(msg)
        typed[key] = value
    return typed


def _normalise_config(raw: Mapping[str, object]) -> dict[str, object]:
    config: dict[str, object] = {
        "log_level": raw.get("log_level"),
        "json_logs": raw.get("json_logs"),
    }

    # ``[logging]`` table: level = "INFO", format = "json"
    logging_section_obj = raw.get("logging")
    if isinstance(logging_section_obj, Mapping):
        section = cast(Mapping[str, object], logging_section_obj)
        if config["log_level"] is None:
            config["log_level"] = section.get("level")
        format_value = section.get("format")
        if config["json_logs"] is None and isinstance(format_value, str):
            config["json_logs"] = format_value.strip().lower() == "json"

    return config


def _apply_cli_overrides(
    *, config: dict[str, object], overrides: object | None
) -> dict[str, object]:
    if overrides is None:
        return config

    materialised: dict[str, object]
    if isinstance(overrides, Mapping):
        materialised = dict(cast(Mapping[str, object], overrides))
    elif hasattr(overrides, "__dict__"):
        materialised = dict(vars(overrides))
    else:
        msg = "CLI overrides must be a mapping or support attribute access."
        raise TypeError(msg)

    for key in ("log_level", "json_logs"):
        value = materialised.get(key)
        if value is not None:
            config[key] = value
    return config


def _coerce_level(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        msg = "log_level must be a string."
        raise ConfigError(msg)
    level = value.strip().upper()
    if level not in LEVEL_NAMES:
        choices = ", ".join(LEVEL_NAMES)
        msg = f"Unknown log level {value!r} (expected one of {choices})."
        raise ConfigError(msg)
    return level


def _coerce_bool(value: object, field_name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    msg = f"{field_name} must be a boolean (got {value!r})."
    raise ConfigError(msg)
