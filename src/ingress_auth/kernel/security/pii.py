"""Kernel security – default sensitive fields redacted from log records."""
from __future__ import annotations

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret_data", "token", "authorization",
    "auth", "credentials", "credential", "hash", "htpasswd",
})

__all__ = ["DEFAULT_SENSITIVE_FIELDS"]
