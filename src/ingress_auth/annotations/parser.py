"""Annotations – prefixed annotation lookup, validators and risk checks."""
from __future__ import annotations

import dataclasses
import re
from typing import Callable, Iterable

from ingress_auth.kernel.errors import (
    AnnotationValidationError,
    NotRequestedError,
    RiskyAnnotationError,
)
from ingress_auth.kernel.security import AnnotationRisk, SecurityPolicy
from ingress_auth.kernel.types import Route

DEFAULT_ANNOTATIONS_PREFIX = "nginx.ingress.kubernetes.io"

Validator = Callable[[str], bool]


def one_of(*allowed: str) -> Validator:
    """Exact, case-sensitive membership."""
    choices = frozenset(allowed)
    return lambda value: value in choices


def matches(pattern: str) -> Validator:
    compiled = re.compile(pattern)
    return lambda value: compiled.fullmatch(value) is not None


def excludes(chars: str) -> Validator:
    """Reject any value containing one of *chars*."""
    forbidden = frozenset(chars)
    return lambda value: forbidden.isdisjoint(value)


@dataclasses.dataclass(frozen=True)
class AnnotationSpec:
    """Declaration of one recognised annotation (without group prefix)."""

    name: str
    validator: Validator
    risk: AnnotationRisk
    documentation: str


class AnnotationReader:
    """Reads ``<prefix>/<name>`` annotations from a :class:`Route`."""

    def __init__(self, prefix: str = DEFAULT_ANNOTATIONS_PREFIX) -> None:
        self._prefix = prefix

    def key(self, name: str) -> str:
        return f"{self._prefix}/{name}"

    def present(self, route: Route, specs: Iterable[AnnotationSpec]) -> list[AnnotationSpec]:
        return [spec for spec in specs if self.key(spec.name) in route.annotations]

    def get_string(self, route: Route, spec: AnnotationSpec) -> str:
        """Return the validated value of *spec* on *route*.

        Raises :class:`NotRequestedError` when absent and
        :class:`AnnotationValidationError` when the validator rejects it.
        """
        key = self.key(spec.name)
        if key not in route.annotations:
            raise NotRequestedError()
        value = route.annotations[key]
        if not spec.validator(value):
            raise AnnotationValidationError(key)
        return value

    def check_risk(
        self,
        route: Route,
        specs: Iterable[AnnotationSpec],
        policy: SecurityPolicy,
    ) -> None:
        for spec in self.present(route, specs):
            if not policy.allows_risk(spec.risk):
                raise RiskyAnnotationError(self.key(spec.name))


__all__ = [
    "DEFAULT_ANNOTATIONS_PREFIX",
    "AnnotationReader",
    "AnnotationSpec",
    "Validator",
    "excludes",
    "matches",
    "one_of",
]
