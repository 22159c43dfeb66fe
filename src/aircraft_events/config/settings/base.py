"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from collections.abc import Collection
from typing import ClassVar

from aircraft_events.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings dataclasses.

    Each field maps to the upper-cased environment variable of the same name,
    optionally namespaced by ``_prefix``. Subclasses put cross-field checks in
    :meth:`_validate`, which runs after construction.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_var(cls, field_name: str) -> str:
        """Environment variable for *field_name*, e.g. ``LEDGER_API_TOKEN``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Override to add cross-field validation."""

    def _require_positive(self, *names: str) -> None:
        for name in names:
            value = getattr(self, name)
            if value <= 0:
                raise InvalidSettingValueError(name, value, "must be positive")

    def _require_non_empty(self, *names: str) -> None:
        for name in names:
            if not getattr(self, name):
                raise InvalidSettingValueError(name, getattr(self, name), "must not be empty")

    def _require_choice(self, name: str, choices: Collection[str]) -> None:
        value = getattr(self, name)
        if value not in choices:
            raise InvalidSettingValueError(name, value, f"expected one of {sorted(choices)}")


__all__ = ["Settings"]
