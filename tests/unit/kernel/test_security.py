"""Unit tests for kernel security — AnnotationRisk and SecurityPolicy."""

from __future__ import annotations

import pytest

from ingress_auth.kernel.security import AnnotationRisk, SecurityPolicy


class TestAnnotationRisk:
    def test_ordering(self) -> None:
        assert AnnotationRisk.LOW < AnnotationRisk.MEDIUM < AnnotationRisk.HIGH < AnnotationRisk.CRITICAL

    @pytest.mark.parametrize("raw", ["Critical", "critical", " CRITICAL "])
    def test_parse(self, raw: str) -> None:
        assert AnnotationRisk.parse(raw) is AnnotationRisk.CRITICAL

    def test_parse_member(self) -> None:
        assert AnnotationRisk.parse(AnnotationRisk.LOW) is AnnotationRisk.LOW

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError):
            AnnotationRisk.parse("severe")

    def test_str(self) -> None:
        assert str(AnnotationRisk.MEDIUM) == "Medium"


class TestSecurityPolicy:
    def test_defaults(self) -> None:
        policy = SecurityPolicy()
        assert policy.allow_cross_namespace is False
        assert policy.annotations_risk_level is AnnotationRisk.CRITICAL

    def test_allows_risk(self) -> None:
        policy = SecurityPolicy(annotations_risk_level=AnnotationRisk.MEDIUM)
        assert policy.allows_risk(AnnotationRisk.LOW)
        assert policy.allows_risk(AnnotationRisk.MEDIUM)
        assert not policy.allows_risk(AnnotationRisk.HIGH)
