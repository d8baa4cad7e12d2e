"""Application-layer errors — access decisions taken while resolving a route."""

from __future__ import annotations

from typing import Any

from ingress_auth.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ForbiddenError(ApplicationError):
    """The route is not permitted to use the requested resource."""

    default_code = "forbidden"


class PolicyDeniedError(ForbiddenError):
    """The location is denied; ``reason`` explains why.

    The message is the reason itself so that callers can surface it
    verbatim next to the offending route.
    """

    default_code = "location_denied"

    def __init__(self, reason: str, **kwargs: Any) -> None:
        super().__init__(reason, **kwargs)
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["reason"] = self.reason
        return base


__all__ = ["ApplicationError", "ForbiddenError", "PolicyDeniedError"]
