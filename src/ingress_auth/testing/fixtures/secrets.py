"""Testing fixtures – fake_secret_resolver, auth_directory, auth_parser."""
from __future__ import annotations

import pathlib

import pytest

from ingress_auth.testing.fakes import FakeSecretResolver


@pytest.fixture
def fake_secret_resolver() -> FakeSecretResolver:
    return FakeSecretResolver()


@pytest.fixture
def auth_directory(tmp_path: pathlib.Path) -> pathlib.Path:
    directory = tmp_path / "auth"
    directory.mkdir()
    return directory


@pytest.fixture
def auth_parser(auth_directory: pathlib.Path, fake_secret_resolver: FakeSecretResolver):
    from ingress_auth.annotations.auth import AuthParser

    return AuthParser(auth_directory, fake_secret_resolver)


__all__ = ["auth_directory", "auth_parser", "fake_secret_resolver"]
