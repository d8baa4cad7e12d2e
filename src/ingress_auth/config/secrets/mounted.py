"""Config secrets – MountedSecretResolver."""
from __future__ import annotations

import pathlib
from types import MappingProxyType
from typing import Mapping

from ingress_auth.config.secrets.port import SecretReference, SecretResolver
from ingress_auth.kernel.errors import SecretNotFoundError, ValidationError
from ingress_auth.kernel.security import SecurityPolicy


class MountedSecretResolver(SecretResolver):
    """Reads secrets projected as files: ``<mount_root>/<namespace>/<name>/<key>``.

    Values are returned as raw bytes; nothing is stripped.  Entries whose
    name starts with ``..`` (volume bookkeeping) are ignored.
    """

    def __init__(
        self,
        mount_root: str = "/var/run/secrets/ingress",
        policy: SecurityPolicy | None = None,
    ) -> None:
        self._root = pathlib.Path(mount_root)
        self._policy = policy or SecurityPolicy()

    def get_secret(self, identifier: str) -> Mapping[str, bytes]:
        try:
            ref = SecretReference.parse(identifier)
        except ValidationError as exc:
            raise SecretNotFoundError(identifier, cause=exc) from exc
        secret_dir = self._root / ref.namespace / ref.name
        if not secret_dir.is_dir():
            raise SecretNotFoundError(str(ref))
        data = {
            entry.name: entry.read_bytes()
            for entry in secret_dir.iterdir()
            if entry.is_file() and not entry.name.startswith("..")
        }
        return MappingProxyType(data)

    def get_security_policy(self) -> SecurityPolicy:
        return self._policy


__all__ = ["MountedSecretResolver"]
