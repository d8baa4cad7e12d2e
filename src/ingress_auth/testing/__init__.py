"""Testing support – fakes and pytest fixtures.

Import in your ``conftest.py``::

    pytest_plugins = ["ingress_auth.testing.fixtures"]
"""

from ingress_auth.testing.fakes import FakeSecretResolver

__all__ = ["FakeSecretResolver"]
