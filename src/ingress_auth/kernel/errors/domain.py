"""Domain errors — annotation validation and lookup failures."""

from __future__ import annotations

from typing import Any

from ingress_auth.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a route or secret violates a domain rule."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class AnnotationValidationError(ValidationError):
    """An annotation value is malformed or not allowed."""

    default_code = "invalid_annotation"

    def __init__(self, annotation: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"annotation {annotation} contains invalid value",
            errors=[{"annotation": annotation}],
            **kwargs,
        )
        self.annotation = annotation


class RiskyAnnotationError(AnnotationValidationError):
    """An annotation exceeds the risk level allowed by the security policy."""

    default_code = "risky_annotation"

    def __init__(self, annotation: str, **kwargs: Any) -> None:
        super().__init__(
            annotation,
            f"annotation {annotation} is above the allowed annotations risk level",
            **kwargs,
        )


class NotFoundError(DomainError):
    """The requested resource does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        resource: str,
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        msg = f"{resource} not found"
        if identifier is not None:
            msg = f"{resource} '{identifier}' not found"
        super().__init__(msg, **kwargs)
        self.resource = resource
        self.identifier = identifier


class SecretNotFoundError(NotFoundError):
    """The resolver has no secret with the given ``namespace/name``."""

    default_code = "secret_not_found"

    def __init__(self, identifier: str, **kwargs: Any) -> None:
        super().__init__("secret", identifier, **kwargs)


__all__ = [
    "AnnotationValidationError",
    "DomainError",
    "NotFoundError",
    "RiskyAnnotationError",
    "SecretNotFoundError",
    "ValidationError",
]
