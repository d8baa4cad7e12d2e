"""Kernel types – route snapshot value objects."""
from ingress_auth.kernel.types.route import PathRule, Route, is_dns1123_subdomain

__all__ = ["PathRule", "Route", "is_dns1123_subdomain"]
