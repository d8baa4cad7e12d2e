"""Auth annotations – basic/digest authentication backed by a secret."""
from ingress_auth.annotations.auth.config import AuthConfig, AuthType, SecretType
from ingress_auth.annotations.auth.extractor import AUTH_ANNOTATIONS, AuthAnnotations, extract
from ingress_auth.annotations.auth.guard import CROSS_NAMESPACE_DENIED, check_namespace
from ingress_auth.annotations.auth.materializer import CredentialMaterializer, MaterializedFile
from ingress_auth.annotations.auth.parser import AuthParser

__all__ = [
    "AUTH_ANNOTATIONS",
    "CROSS_NAMESPACE_DENIED",
    "AuthAnnotations",
    "AuthConfig",
    "AuthParser",
    "AuthType",
    "CredentialMaterializer",
    "MaterializedFile",
    "SecretType",
    "check_namespace",
    "extract",
]
