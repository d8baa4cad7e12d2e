"""Shared pytest fixtures."""

from ingress_auth.testing.fixtures import (  # noqa: F401
    auth_directory,
    auth_parser,
    fake_secret_resolver,
)
