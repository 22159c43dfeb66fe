"""Observability – SensitiveFieldsFilter structlog processor."""
from __future__ import annotations

from typing import Any

# actor_email is personal data; event payloads logged by the "log"
# publisher carry it under meta.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "secret", "token", "api_key", "authorization",
    "aws_access_key_id", "aws_secret_access_key", "aws_session_token",
    "actor_email", "actoremail",
})


class SensitiveFieldsFilter:
    """structlog processor replacing values of sensitive keys with ``[REDACTED]``.

    Keys match case-insensitively, at any depth of nested mappings and
    lists. Tuples such as ``exc_info`` pass through untouched, and the
    incoming event dict is not mutated.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.scrub(event_dict)

    def scrub(self, value: Any) -> Any:
        if isinstance(value, dict):
            return {
                k: self.REDACTED if isinstance(k, str) and k.lower() in self._fields else self.scrub(v)
                for k, v in value.items()
            }
        if isinstance(value, list):
            return [self.scrub(v) for v in value]
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
