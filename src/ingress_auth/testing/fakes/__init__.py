"""Testing fakes – in-memory doubles for kernel ports."""
from ingress_auth.testing.fakes.secrets import FakeSecretResolver

__all__ = ["FakeSecretResolver"]
