"""Kernel security – AnnotationRisk and SecurityPolicy."""
from __future__ import annotations

import dataclasses
from enum import IntEnum


class AnnotationRisk(IntEnum):
    """Ordered severity of an annotation; higher values are riskier."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @classmethod
    def parse(cls, value: "str | AnnotationRisk") -> "AnnotationRisk":
        """Accept ``"Critical"``, ``"critical"`` or an existing member."""
        if isinstance(value, AnnotationRisk):
            return value
        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown annotation risk level {value!r}") from None

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclasses.dataclass(frozen=True)
class SecurityPolicy:
    """Process-wide security configuration consumed by annotation parsers."""

    allow_cross_namespace: bool = False
    annotations_risk_level: AnnotationRisk = AnnotationRisk.CRITICAL

    def allows_risk(self, risk: AnnotationRisk) -> bool:
        return risk <= self.annotations_risk_level


__all__ = ["AnnotationRisk", "SecurityPolicy"]
