"""Auth annotations – AuthParser."""
from __future__ import annotations

import os
from typing import Any, Mapping

from ingress_auth.annotations.parser import DEFAULT_ANNOTATIONS_PREFIX, AnnotationReader
from ingress_auth.config.secrets import MountedSecretResolver, SecretReference, SecretResolver
from ingress_auth.config.settings import AuthSettings
from ingress_auth.kernel.errors import (
    BaseError,
    NotRequestedError,
    PolicyDeniedError,
)
from ingress_auth.kernel.security import SecurityPolicy
from ingress_auth.kernel.types import Route
from ingress_auth.observability.logging import get_logger
from ingress_auth.annotations.auth.config import AuthConfig
from ingress_auth.annotations.auth.extractor import AUTH_ANNOTATIONS, extract
from ingress_auth.annotations.auth.guard import check_namespace
from ingress_auth.annotations.auth.materializer import CredentialMaterializer

logger = get_logger(__name__)


class AuthParser:
    """Resolve basic/digest authentication for a route.

    ``parse`` validates the auth annotations, refuses cross-namespace
    secrets unless the security policy allows them, reads the secret and
    writes the credential file under *auth_directory*.  The policy is
    *policy* when given, otherwise the resolver's.  It keeps no state
    between calls and may run concurrently for different routes.

    Usage::

        parser = AuthParser("/etc/ingress-controller/auth", resolver)
        try:
            config = parser.parse(route)
        except NotRequestedError:
            config = None
    """

    def __init__(
        self,
        auth_directory: str | os.PathLike[str],
        resolver: SecretResolver,
        *,
        annotation_prefix: str = DEFAULT_ANNOTATIONS_PREFIX,
        policy: SecurityPolicy | None = None,
    ) -> None:
        self._resolver = resolver
        self._policy = policy
        self._reader = AnnotationReader(annotation_prefix)
        self._materializer = CredentialMaterializer(auth_directory)

    @classmethod
    def from_settings(
        cls, settings: AuthSettings, resolver: SecretResolver | None = None
    ) -> "AuthParser":
        """Build a parser whose policy comes from *settings*.

        Without a *resolver*, secrets are read from the default
        :class:`MountedSecretResolver` mount.
        """
        policy = settings.security_policy()
        if resolver is None:
            resolver = MountedSecretResolver(policy=policy)
        return cls(
            settings.auth_directory,
            resolver,
            annotation_prefix=settings.annotation_prefix,
            policy=policy,
        )

    @property
    def annotations(self) -> Mapping[str, str]:
        """Recognised annotation keys mapped to their documentation."""
        return {self._reader.key(spec.name): spec.documentation for spec in AUTH_ANNOTATIONS}

    def parse(self, route: Route) -> AuthConfig:
        """Return the :class:`AuthConfig` for *route*.

        Raises
        ------
        NotRequestedError
            The route carries no auth annotation.
        AnnotationValidationError
            An auth annotation is malformed or above the allowed risk level.
        PolicyDeniedError
            The secret reference is missing, malformed, crosses namespaces
            against policy, or cannot be read.
        MaterializationError
            The secret lacks the expected data or the file cannot be written.
        """
        log = logger.bind(route=route.key)
        try:
            return self._parse(route, log)
        except NotRequestedError:
            log.debug("auth.not_requested")
            raise
        except BaseError as exc:
            log.warning("auth.denied", error_code=exc.code, error=exc.message)
            raise

    def _parse(self, route: Route, log: Any) -> AuthConfig:
        policy = self._policy if self._policy is not None else self._resolver.get_security_policy()
        self._reader.check_risk(route, AUTH_ANNOTATIONS, policy)
        annotations = extract(self._reader, route)

        ref = annotations.secret
        check_namespace(ref, route.namespace, policy)
        data = self._read_secret(ref)

        materialized = self._materializer.materialize(route, ref, annotations.secret_type, data)
        log.info(
            "auth.materialized",
            secret=str(ref),
            secret_type=annotations.secret_type.value,
            file_sha=materialized.sha,
            entries=materialized.entries,
        )
        return AuthConfig(
            type=annotations.type,
            realm=annotations.realm,
            secret_type=annotations.secret_type,
            file=materialized.path,
            file_sha=materialized.sha,
            secret=str(ref),
            secured=True,
        )

    def _read_secret(self, ref: SecretReference) -> Mapping[str, bytes]:
        try:
            return self._resolver.get_secret(str(ref))
        except (BaseError, OSError, LookupError) as exc:
            raise PolicyDeniedError(
                f"unexpected error reading secret {ref}: {getattr(exc, 'message', exc)}",
                cause=exc,
            ) from exc


__all__ = ["AuthParser"]
