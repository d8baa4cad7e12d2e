"""Config – 12-factor settings, loaders, and secret resolvers."""

from ingress_auth.config.settings import AuthSettings, EnvSettingsLoader, Settings, SettingsLoader
from ingress_auth.config.secrets import SecretReference, SecretResolver
from ingress_auth.config.validation import ConfigError, MissingRequiredSettingError

__all__ = [
    "AuthSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "MissingRequiredSettingError",
    "SecretReference",
    "SecretResolver",
    "Settings",
    "SettingsLoader",
]
