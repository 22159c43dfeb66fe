"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from aircraft_events.config.settings.base import Settings
from aircraft_events.config.settings.loaders import SettingsLoader
from aircraft_events.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsFactory:
    """Build a settings dataclass from layered sources.

    Each loader's values replace those of the loaders before it, and
    *overrides* replace everything. Fields no source sets keep their
    dataclass default. The class's validation runs once, on the merged
    values.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~aircraft_events.config.settings.base.Settings`
            subclass to construct.
        loaders:
            Ordered sources.  Later loaders win on field conflicts.
        overrides:
            Field values applied after all loaders, keyed by field name.

        Raises
        ------
        MissingRequiredSettingError
            When a field without a default is set by no source.
        InvalidSettingValueError
            When a value cannot be coerced or fails validation.
        ConfigError
            When *overrides* names an unknown field, or on any other
            construction failure.
        """
        fields = {f.name: f for f in dataclasses.fields(settings_cls)}
        merged: dict[str, Any] = {}
        for loader in loaders or []:
            merged.update(loader.values(settings_cls))

        if overrides:
            unknown = sorted(set(overrides) - set(fields))
            if unknown:
                raise ConfigError(
                    f"Unknown settings for {settings_cls.__name__}: {', '.join(unknown)}",
                    detail={"settings": unknown},
                )
            merged.update(overrides)

        for name, field in fields.items():
            if (
                name not in merged
                and field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING
            ):
                raise MissingRequiredSettingError(name)

        try:
            return settings_cls(**merged)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
