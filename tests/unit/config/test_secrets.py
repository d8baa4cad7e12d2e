"""Unit tests for config secrets — SecretReference and MountedSecretResolver."""

from __future__ import annotations

import pathlib

import pytest

from ingress_auth.config.secrets import (
    MountedSecretResolver,
    SecretReference,
    SecretResolver,
)
from ingress_auth.kernel.errors import SecretNotFoundError, ValidationError
from ingress_auth.kernel.security import SecurityPolicy


# ---------------------------------------------------------------------------
# SecretReference
# ---------------------------------------------------------------------------


class TestSecretReference:
    def test_str_representation(self) -> None:
        assert str(SecretReference(namespace="default", name="demo")) == "default/demo"

    def test_parse_qualified(self) -> None:
        ref = SecretReference.parse("otherns/demo-secret", default_namespace="default")
        assert ref == SecretReference(namespace="otherns", name="demo-secret")

    def test_parse_defaults_namespace(self) -> None:
        ref = SecretReference.parse("demo-secret", default_namespace="default")
        assert ref.namespace == "default"

    def test_parse_without_namespace_or_default(self) -> None:
        with pytest.raises(ValidationError):
            SecretReference.parse("demo-secret")

    @pytest.mark.parametrize(
        "value",
        ["demo-secret;xpto", "a/b/c", "/demo", "ns/", "", "UPPER", "has space", "-leading", "ns/trailing-"],
    )
    def test_parse_rejects(self, value: str) -> None:
        with pytest.raises(ValidationError):
            SecretReference.parse(value, default_namespace="default")

    def test_dotted_names_are_valid(self) -> None:
        ref = SecretReference.parse("team.a/basic.auth", default_namespace="default")
        assert str(ref) == "team.a/basic.auth"

    def test_overlong_name(self) -> None:
        with pytest.raises(ValidationError):
            SecretReference.parse("a" * 254, default_namespace="default")

    def test_is_frozen(self) -> None:
        ref = SecretReference(namespace="n", name="s")
        with pytest.raises((TypeError, Exception)):
            ref.name = "other"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# MountedSecretResolver
# ---------------------------------------------------------------------------


class TestMountedSecretResolver:
    def _write_secret(self, base: pathlib.Path, identifier: str, data: dict[str, bytes]) -> None:
        secret_dir = base / identifier
        secret_dir.mkdir(parents=True, exist_ok=True)
        for key, value in data.items():
            (secret_dir / key).write_bytes(value)

    def test_reads_bytes_verbatim(self, tmp_path: pathlib.Path) -> None:
        self._write_secret(tmp_path, "default/demo-secret", {"auth": b"foo:$apr1$x\n"})
        data = MountedSecretResolver(str(tmp_path)).get_secret("default/demo-secret")
        assert data == {"auth": b"foo:$apr1$x\n"}

    def test_reads_all_keys(self, tmp_path: pathlib.Path) -> None:
        self._write_secret(tmp_path, "default/users", {"alice": b"h1", "bob": b"h2"})
        data = MountedSecretResolver(str(tmp_path)).get_secret("default/users")
        assert dict(data) == {"alice": b"h1", "bob": b"h2"}

    def test_ignores_volume_bookkeeping(self, tmp_path: pathlib.Path) -> None:
        self._write_secret(tmp_path, "default/s", {"auth": b"x", "..data": b"link"})
        (tmp_path / "default" / "s" / "..2024_01_01").mkdir()
        data = MountedSecretResolver(str(tmp_path)).get_secret("default/s")
        assert set(data) == {"auth"}

    def test_empty_secret(self, tmp_path: pathlib.Path) -> None:
        (tmp_path / "default" / "empty").mkdir(parents=True)
        assert dict(MountedSecretResolver(str(tmp_path)).get_secret("default/empty")) == {}

    def test_missing_secret(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(SecretNotFoundError) as exc_info:
            MountedSecretResolver(str(tmp_path)).get_secret("default/missing")
        assert exc_info.value.identifier == "default/missing"

    def test_path_traversal_is_not_found(self, tmp_path: pathlib.Path) -> None:
        with pytest.raises(SecretNotFoundError):
            MountedSecretResolver(str(tmp_path / "root")).get_secret("../etc")

    def test_returned_data_is_read_only(self, tmp_path: pathlib.Path) -> None:
        self._write_secret(tmp_path, "default/s", {"auth": b"x"})
        data = MountedSecretResolver(str(tmp_path)).get_secret("default/s")
        with pytest.raises(TypeError):
            data["auth"] = b"y"  # type: ignore[index]

    def test_default_policy(self) -> None:
        assert MountedSecretResolver().get_security_policy() == SecurityPolicy()

    def test_custom_policy(self) -> None:
        policy = SecurityPolicy(allow_cross_namespace=True)
        assert MountedSecretResolver(policy=policy).get_security_policy() is policy

    def test_is_secret_resolver(self) -> None:
        assert isinstance(MountedSecretResolver(), SecretResolver)
