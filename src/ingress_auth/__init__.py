"""
ingress_auth – per-route HTTP authentication from routing annotations.

Import path convention::

    from ingress_auth.annotations.auth import AuthParser, AuthConfig
    from ingress_auth.config.secrets import SecretResolver, MountedSecretResolver
    from ingress_auth.kernel.errors import PolicyDeniedError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
