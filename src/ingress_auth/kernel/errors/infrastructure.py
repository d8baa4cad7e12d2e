"""Infrastructure errors — I/O and secret content failures."""

from __future__ import annotations

from typing import Any

from ingress_auth.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class MaterializationError(InfrastructureError):
    """Secret data could not be turned into a credential file."""

    default_code = "materialization_error"

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.path = path


__all__ = ["InfrastructureError", "MaterializationError"]
