"""Config settings – 12-factor env-based configuration."""
from ingress_auth.config.settings.base import Settings
from ingress_auth.config.settings.auth import AuthSettings
from ingress_auth.config.settings.factory import SettingsFactory
from ingress_auth.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "AuthSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
