"""Testing fixtures – pytest fixtures for fake doubles.

Enable in ``conftest.py``::

    pytest_plugins = ["ingress_auth.testing.fixtures"]
"""
from ingress_auth.testing.fixtures.secrets import auth_directory, auth_parser, fake_secret_resolver

__all__ = ["auth_directory", "auth_parser", "fake_secret_resolver"]
