"""Config secrets – secret reference and resolver ports."""
from ingress_auth.config.secrets.port import SecretReference, SecretResolver
from ingress_auth.config.secrets.mounted import MountedSecretResolver

__all__ = ["MountedSecretResolver", "SecretReference", "SecretResolver"]
