"""Auth annotations – CredentialMaterializer.

Turns resolved secret data into the htpasswd-style file read by the proxy.
Files are replaced atomically so a reader sees either the old or the new
content, never a partial write.
"""
from __future__ import annotations

import contextlib
import dataclasses
import hashlib
import os
import pathlib
import tempfile
from typing import Mapping

from ingress_auth.config.secrets import SecretReference
from ingress_auth.kernel.errors import MaterializationError
from ingress_auth.kernel.types import Route
from ingress_auth.annotations.auth.config import SecretType

AUTH_FILE_KEY = "auth"
FILE_MODE = 0o640
_USERNAME_FORBIDDEN = (":", "\n", "\r")


@dataclasses.dataclass(frozen=True)
class MaterializedFile:
    path: str
    sha: str
    entries: int


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


class CredentialMaterializer:
    """Writes credential files under *auth_directory*."""

    def __init__(self, auth_directory: str | os.PathLike[str]) -> None:
        self._directory = pathlib.Path(auth_directory)

    def credential_path(self, route: Route, ref: SecretReference) -> pathlib.Path:
        """Deterministic file path for a (route, secret) pair."""
        identity = f"{route.key}/{route.uid or ''}|{ref}"
        digest = hashlib.sha1(identity.encode("utf-8")).hexdigest()[:16]
        return self._directory / f"{route.namespace}-{route.name}-{digest}.passwd"

    def render(
        self,
        secret_type: SecretType,
        ref: SecretReference,
        data: Mapping[str, bytes],
    ) -> tuple[bytes, int]:
        """Return ``(content, entries)`` for *data* under *secret_type*.

        An auth-map username must be non-empty and free of ``:`` and line
        breaks, and its hash free of line breaks; anything else would add or
        corrupt entries in the rendered file.
        """
        if secret_type is SecretType.AUTH_FILE:
            if AUTH_FILE_KEY not in data:
                raise MaterializationError(
                    f"secret {ref} does not contain the expected key '{AUTH_FILE_KEY}'"
                )
            content = _as_bytes(data[AUTH_FILE_KEY])
            return content, len(content.splitlines())
        # auth-map: one "user:hash" line per key, sorted for stable output
        lines: list[bytes] = []
        for user in sorted(data):
            if not user or any(ch in user for ch in _USERNAME_FORBIDDEN):
                raise MaterializationError(f"secret {ref} contains an invalid username {user!r}")
            value = _as_bytes(data[user])
            if b"\n" in value or b"\r" in value:
                raise MaterializationError(
                    f"secret {ref} contains a line break in the entry for {user!r}"
                )
            lines.append(user.encode("utf-8") + b":" + value + b"\n")
        return b"".join(lines), len(lines)

    def write(self, path: pathlib.Path, content: bytes) -> None:
        """Atomically replace *path* with *content*.

        On failure the temporary file and any stale file at *path* are
        removed, and :class:`MaterializationError` wraps the cause.
        """
        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            with os.fdopen(fd, "wb") as fh:
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_name)
            with contextlib.suppress(OSError):
                path.unlink()
            raise MaterializationError(
                f"unable to write credential file {path}: {exc}",
                path=str(path),
                cause=exc,
            ) from exc

    def materialize(
        self,
        route: Route,
        ref: SecretReference,
        secret_type: SecretType,
        data: Mapping[str, bytes],
    ) -> MaterializedFile:
        content, entries = self.render(secret_type, ref, data)
        path = self.credential_path(route, ref)
        self.write(path, content)
        return MaterializedFile(
            path=str(path),
            sha=hashlib.sha1(content).hexdigest(),
            entries=entries,
        )


__all__ = ["AUTH_FILE_KEY", "CredentialMaterializer", "MaterializedFile"]
