"""Route — immutable snapshot of a routing resource."""

from __future__ import annotations

import dataclasses
import re
from types import MappingProxyType
from typing import Mapping

# DNS-1123 subdomain, the naming rule for namespaces, routes and secrets.
_NAME_RE = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?(\.[a-z0-9]([-a-z0-9]*[a-z0-9])?)*$")
_MAX_NAME_LENGTH = 253


def is_dns1123_subdomain(value: str) -> bool:
    """Return ``True`` if *value* is a valid DNS-1123 subdomain."""
    return len(value) <= _MAX_NAME_LENGTH and _NAME_RE.match(value) is not None


@dataclasses.dataclass(frozen=True)
class PathRule:
    """A single ``host + path -> backend`` mapping."""

    host: str
    path: str = "/"
    backend: str = ""


@dataclasses.dataclass(frozen=True)
class Route:
    """Routing resource identified by ``(namespace, name)``.

    ``annotations`` is copied into a read-only mapping on construction, so
    a route passed to a parser cannot change underneath it.  Namespace and
    name must be DNS-1123 subdomains; they end up in credential file names.
    """

    namespace: str
    name: str
    annotations: Mapping[str, str] = dataclasses.field(default_factory=dict)
    rules: tuple[PathRule, ...] = ()
    uid: str | None = None

    def __post_init__(self) -> None:
        if not self.namespace or not self.name:
            raise ValueError("Route namespace and name must be non-empty")
        for label, value in (("namespace", self.namespace), ("name", self.name)):
            if not is_dns1123_subdomain(value):
                raise ValueError(f"Route {label} {value!r} is not a valid DNS-1123 subdomain")
        object.__setattr__(self, "annotations", MappingProxyType(dict(self.annotations)))
        object.__setattr__(self, "rules", tuple(self.rules))

    @property
    def key(self) -> str:
        return f"{self.namespace}/{self.name}"

    def with_annotations(self, annotations: Mapping[str, str]) -> "Route":
        """Return a copy of this route carrying *annotations* instead."""
        return dataclasses.replace(self, annotations=annotations)

    def __hash__(self) -> int:
        return hash((self.namespace, self.name, self.uid))


__all__ = ["PathRule", "Route", "is_dns1123_subdomain"]
