"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── NotRequestedError          (base.py, opt-out signal)
    ├── DomainError                (domain.py)
    │   ├── ValidationError
    │   │   └── AnnotationValidationError
    │   │       └── RiskyAnnotationError
    │   └── NotFoundError
    │       └── SecretNotFoundError
    ├── ApplicationError           (application.py)
    │   └── ForbiddenError
    │       └── PolicyDeniedError
    └── InfrastructureError        (infrastructure.py)
        └── MaterializationError
"""

from ingress_auth.kernel.errors.application import (
    ApplicationError,
    ForbiddenError,
    PolicyDeniedError,
)
from ingress_auth.kernel.errors.base import BaseError, NotRequestedError, is_not_requested
from ingress_auth.kernel.errors.domain import (
    AnnotationValidationError,
    DomainError,
    NotFoundError,
    RiskyAnnotationError,
    SecretNotFoundError,
    ValidationError,
)
from ingress_auth.kernel.errors.infrastructure import InfrastructureError, MaterializationError

__all__ = [
    "AnnotationValidationError",
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ForbiddenError",
    "InfrastructureError",
    "MaterializationError",
    "NotFoundError",
    "NotRequestedError",
    "PolicyDeniedError",
    "RiskyAnnotationError",
    "SecretNotFoundError",
    "ValidationError",
    "is_not_requested",
]
