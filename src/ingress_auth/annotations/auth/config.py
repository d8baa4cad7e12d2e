"""Auth annotations – AuthType, SecretType and the assembled AuthConfig."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any


class AuthType(str, Enum):
    BASIC = "basic"
    DIGEST = "digest"


class SecretType(str, Enum):
    """How the referenced secret encodes its credentials."""

    AUTH_FILE = "auth-file"
    AUTH_MAP = "auth-map"


@dataclasses.dataclass(frozen=True, eq=False)
class AuthConfig:
    """Authentication settings for one route, ready for the proxy renderer.

    Two configs are equal when type, realm, secret type and the SHA-1 of the
    credential file match; the file path is not part of the comparison, so
    equal configs mean the rendered proxy configuration need not reload.
    """

    type: AuthType
    realm: str
    secret_type: SecretType
    file: str
    file_sha: str
    secret: str
    secured: bool

    def _fingerprint(self) -> tuple[Any, ...]:
        return (self.type, self.realm, self.secret_type, self.file_sha)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AuthConfig):
            return NotImplemented
        return self._fingerprint() == other._fingerprint()

    def __hash__(self) -> int:
        return hash(self._fingerprint())


__all__ = ["AuthConfig", "AuthType", "SecretType"]
