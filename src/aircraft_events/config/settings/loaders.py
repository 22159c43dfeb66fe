"""Config settings – environment and ``.env`` sources."""
from __future__ import annotations

import abc
import dataclasses
import os
from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv

from aircraft_events.config.settings.base import Settings
from aircraft_events.config.validation import InvalidSettingValueError

_NUMBER_TYPES: dict[str, type] = {"int": int, "float": float}


class SettingsLoader(abc.ABC):
    """Port: read the values one source defines for a settings class.

    Only fields the source actually sets are returned, already coerced to
    the field type. Defaults and required-field checks are left to
    :class:`~aircraft_events.config.settings.factory.SettingsFactory`.
    """

    @abc.abstractmethod
    def values(self, settings_class: type[Settings]) -> dict[str, Any]: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``[PREFIX_]FIELD_NAME`` variables from the process environment.

    An explicit *environ* mapping replaces ``os.environ``.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        found: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            key = settings_class.env_var(field.name)
            if key in environ:
                found[field.name] = _coerce(key, environ[key], field.type)
        return found


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read the environment.

    A missing file is not an error. Unless *override* is set, variables the
    process already has win over the file.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def values(self, settings_class: type[Settings]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().values(settings_class)


def _coerce(key: str, raw: str, type_hint: Any) -> Any:
    name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", str(type_hint))
    if name.endswith("| None"):
        if not raw:
            return None
        name = name[: -len("| None")].strip()
    number = _NUMBER_TYPES.get(name)
    if number is None:
        return raw
    try:
        return number(raw)
    except ValueError as exc:
        raise InvalidSettingValueError(key, raw, f"expected {name}") from exc


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
