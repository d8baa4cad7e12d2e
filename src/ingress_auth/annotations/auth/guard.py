"""Auth annotations – cross-namespace secret access guard."""
from __future__ import annotations

from ingress_auth.config.secrets import SecretReference
from ingress_auth.kernel.errors import PolicyDeniedError
from ingress_auth.kernel.security import SecurityPolicy

CROSS_NAMESPACE_DENIED = "cross namespace usage of secrets is not allowed"


def check_namespace(ref: SecretReference, route_namespace: str, policy: SecurityPolicy) -> None:
    """Raise :class:`PolicyDeniedError` if *ref* leaves the route's namespace
    and the policy does not allow it.  Must run before the secret is read.
    """
    if ref.namespace != route_namespace and not policy.allow_cross_namespace:
        raise PolicyDeniedError(
            CROSS_NAMESPACE_DENIED,
            detail={"secret": str(ref), "namespace": route_namespace},
        )


__all__ = ["CROSS_NAMESPACE_DENIED", "check_namespace"]
