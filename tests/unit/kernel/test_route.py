"""Unit tests for kernel types — Route and PathRule."""

from __future__ import annotations

import dataclasses

import pytest

from ingress_auth.kernel.types import PathRule, Route, is_dns1123_subdomain


class TestRoute:
    def test_key(self) -> None:
        assert Route(namespace="default", name="foo").key == "default/foo"

    def test_annotations_are_a_snapshot(self) -> None:
        source = {"a": "1"}
        route = Route(namespace="default", name="foo", annotations=source)
        source["a"] = "2"
        assert route.annotations["a"] == "1"

    def test_annotations_are_read_only(self) -> None:
        route = Route(namespace="default", name="foo", annotations={"a": "1"})
        with pytest.raises(TypeError):
            route.annotations["a"] = "2"  # type: ignore[index]

    def test_is_frozen(self) -> None:
        route = Route(namespace="default", name="foo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            route.name = "bar"  # type: ignore[misc]

    def test_rules_become_tuple(self) -> None:
        route = Route(namespace="default", name="foo", rules=[PathRule(host="h")])  # type: ignore[arg-type]
        assert route.rules == (PathRule(host="h", path="/", backend=""),)

    @pytest.mark.parametrize("namespace,name", [("", "foo"), ("default", "")])
    def test_identity_required(self, namespace: str, name: str) -> None:
        with pytest.raises(ValueError):
            Route(namespace=namespace, name=name)

    def test_with_annotations(self) -> None:
        route = Route(namespace="default", name="foo", annotations={"a": "1"}, uid="u-1")
        other = route.with_annotations({"b": "2"})
        assert dict(other.annotations) == {"b": "2"}
        assert other.uid == "u-1"
        assert dict(route.annotations) == {"a": "1"}

    def test_equality_and_hash(self) -> None:
        a = Route(namespace="default", name="foo", annotations={"a": "1"})
        b = Route(namespace="default", name="foo", annotations={"a": "1"})
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1


# ---------------------------------------------------------------------------
# Identity naming rules
# ---------------------------------------------------------------------------


class TestRouteNaming:
    @pytest.mark.parametrize(
        "namespace,name",
        [
            ("default", "../etc"),
            ("default", "a/b"),
            ("..", "foo"),
            ("default", "UPPER"),
            ("default", "foo bar"),
            ("default", "-foo"),
            ("default", "x" * 254),
        ],
    )
    def test_rejects_invalid_names(self, namespace: str, name: str) -> None:
        with pytest.raises(ValueError, match="DNS-1123"):
            Route(namespace=namespace, name=name)

    @pytest.mark.parametrize("name", ["foo", "a-b", "web.example", "x" * 253])
    def test_accepts_dns1123_names(self, name: str) -> None:
        assert Route(namespace="default", name=name).name == name

    def test_is_dns1123_subdomain(self) -> None:
        assert is_dns1123_subdomain("demo-secret")
        assert not is_dns1123_subdomain("demo;secret")
        assert not is_dns1123_subdomain("")
