"""Auth annotations – extraction and validation of the four auth keys."""
from __future__ import annotations

import dataclasses

from ingress_auth.annotations.parser import (
    AnnotationReader,
    AnnotationSpec,
    excludes,
    matches,
    one_of,
)
from ingress_auth.config.secrets import SecretReference
from ingress_auth.kernel.errors import (
    AnnotationValidationError,
    NotRequestedError,
    PolicyDeniedError,
    ValidationError,
)
from ingress_auth.kernel.security import AnnotationRisk
from ingress_auth.kernel.types import Route
from ingress_auth.annotations.auth.config import AuthType, SecretType

AUTH_TYPE = AnnotationSpec(
    name="auth-type",
    validator=one_of(*(t.value for t in AuthType)),
    risk=AnnotationRisk.LOW,
    documentation="Type of authentication to apply: basic or digest.",
)
AUTH_SECRET = AnnotationSpec(
    name="auth-secret",
    validator=matches(r"[A-Za-z0-9\-._/]+"),
    risk=AnnotationRisk.MEDIUM,
    documentation=(
        "Secret holding the credentials, as name or namespace/name. "
        "The namespace defaults to the route's own."
    ),
)
AUTH_SECRET_TYPE = AnnotationSpec(
    name="auth-secret-type",
    validator=one_of(*(t.value for t in SecretType)),
    risk=AnnotationRisk.LOW,
    documentation=(
        "auth-file (default): the secret's 'auth' key holds an htpasswd file. "
        "auth-map: each key is a username and its value the password hash."
    ),
)
AUTH_REALM = AnnotationSpec(
    name="auth-realm",
    validator=excludes('";{}'),
    risk=AnnotationRisk.MEDIUM,
    documentation="Realm shown in the authentication challenge.",
)

AUTH_ANNOTATIONS: tuple[AnnotationSpec, ...] = (AUTH_TYPE, AUTH_SECRET, AUTH_SECRET_TYPE, AUTH_REALM)

_SECRET_NAME_ERROR = "error reading secret name from annotation"


@dataclasses.dataclass(frozen=True)
class AuthAnnotations:
    """Validated auth annotation values of one route."""

    type: AuthType
    secret: SecretReference
    secret_type: SecretType
    realm: str


def extract(reader: AnnotationReader, route: Route) -> AuthAnnotations:
    """Read and validate the auth annotations of *route*.

    Raises
    ------
    NotRequestedError
        None of the auth annotations is present.
    AnnotationValidationError
        ``auth-type``, ``auth-realm`` or ``auth-secret-type`` is invalid, or
        ``auth-type`` is missing while other auth annotations are set.
    PolicyDeniedError
        ``auth-secret`` is missing or is not a valid ``[namespace/]name``.
    """
    if not reader.present(route, AUTH_ANNOTATIONS):
        raise NotRequestedError()

    try:
        auth_type = AuthType(reader.get_string(route, AUTH_TYPE))
    except NotRequestedError as exc:
        raise AnnotationValidationError(reader.key(AUTH_TYPE.name), cause=exc) from exc

    realm = ""
    if reader.key(AUTH_REALM.name) in route.annotations:
        realm = reader.get_string(route, AUTH_REALM)

    secret = _secret_reference(reader, route)

    secret_type = SecretType.AUTH_FILE
    if reader.key(AUTH_SECRET_TYPE.name) in route.annotations:
        secret_type = SecretType(reader.get_string(route, AUTH_SECRET_TYPE))

    return AuthAnnotations(type=auth_type, secret=secret, secret_type=secret_type, realm=realm)


def _secret_reference(reader: AnnotationReader, route: Route) -> SecretReference:
    try:
        value = reader.get_string(route, AUTH_SECRET)
    except (NotRequestedError, AnnotationValidationError) as exc:
        raise PolicyDeniedError(f"{_SECRET_NAME_ERROR}: {exc.message}", cause=exc) from exc
    try:
        return SecretReference.parse(value, default_namespace=route.namespace)
    except ValidationError as exc:
        invalid = AnnotationValidationError(reader.key(AUTH_SECRET.name), cause=exc)
        raise PolicyDeniedError(f"{_SECRET_NAME_ERROR}: {invalid.message}", cause=invalid) from exc


__all__ = [
    "AUTH_ANNOTATIONS",
    "AUTH_REALM",
    "AUTH_SECRET",
    "AUTH_SECRET_TYPE",
    "AUTH_TYPE",
    "AuthAnnotations",
    "extract",
]
