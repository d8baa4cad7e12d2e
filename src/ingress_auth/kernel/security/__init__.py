"""Kernel security – annotation risk levels, security policy, sensitive fields."""
from ingress_auth.kernel.security.pii import DEFAULT_SENSITIVE_FIELDS
from ingress_auth.kernel.security.policy import AnnotationRisk, SecurityPolicy

__all__ = ["AnnotationRisk", "DEFAULT_SENSITIVE_FIELDS", "SecurityPolicy"]
