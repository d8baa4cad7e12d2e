"""Config secrets – SecretReference and SecretResolver port."""
from __future__ import annotations

import dataclasses
from typing import Mapping, Protocol, runtime_checkable

from ingress_auth.kernel.errors import ValidationError
from ingress_auth.kernel.security import SecurityPolicy
from ingress_auth.kernel.types import is_dns1123_subdomain


@dataclasses.dataclass(frozen=True)
class SecretReference:
    """Fully-qualified reference to a secret: ``namespace/name``."""

    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"

    @classmethod
    def parse(cls, value: str, default_namespace: str | None = None) -> "SecretReference":
        """Parse ``[namespace/]name``.

        The namespace falls back to *default_namespace* when omitted.  Raises
        :class:`ValidationError` for more than one ``/``, an empty segment,
        a missing namespace with no default, or characters outside the
        naming rules (``;``, spaces, upper case, ...).
        """
        parts = value.split("/")
        if len(parts) == 1:
            namespace, name = default_namespace, parts[0]
        elif len(parts) == 2:
            namespace, name = parts
        else:
            raise ValidationError(f"unexpected key format: {value!r}")
        if not namespace:
            raise ValidationError(f"secret reference {value!r} has no namespace")
        if not is_dns1123_subdomain(namespace) or not is_dns1123_subdomain(name):
            raise ValidationError(f"secret reference {value!r} contains invalid characters")
        return cls(namespace=namespace, name=name)


@runtime_checkable
class SecretResolver(Protocol):
    """Port: read-only access to secrets and the active security policy.

    Implementations must tolerate concurrent calls.
    """

    def get_secret(self, identifier: str) -> Mapping[str, bytes]:
        """Return the data of secret ``namespace/name``.

        Raises :class:`~ingress_auth.kernel.errors.SecretNotFoundError` when
        no such secret exists.
        """
        ...

    def get_security_policy(self) -> SecurityPolicy: ...


__all__ = ["SecretReference", "SecretResolver"]
