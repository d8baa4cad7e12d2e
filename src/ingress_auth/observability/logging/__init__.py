"""Observability – structured logging helpers."""
from ingress_auth.observability.logging.filters import SensitiveFieldsFilter
from ingress_auth.observability.logging.factory import JsonLoggerFactory
from ingress_auth.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
