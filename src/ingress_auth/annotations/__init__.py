"""Annotations – readers and per-feature annotation parsers."""
from ingress_auth.annotations.parser import (
    DEFAULT_ANNOTATIONS_PREFIX,
    AnnotationReader,
    AnnotationSpec,
)

__all__ = ["DEFAULT_ANNOTATIONS_PREFIX", "AnnotationReader", "AnnotationSpec"]
