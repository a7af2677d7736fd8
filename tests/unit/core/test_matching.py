"""Tests for extension match policies."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from strategyprobe.core.matching import (
    ContainsMatch,
    ExactMatch,
    MarkerMatch,
    MatchPolicy,
    find,
    find_all,
)
from strategyprobe.core.registry.models import ExtensionDescriptor


def _d(name: str, *markers: str) -> ExtensionDescriptor:
    return ExtensionDescriptor(simple_name=name, qualified_name=f"pkg.{name}", markers=markers)


class TestExactMatch:
    """Tests for ExactMatch."""

    def test_matches_equal_name(self) -> None:
        assert ExactMatch(name="NoDelayProvisionerStrategy").matches(
            _d("NoDelayProvisionerStrategy")
        )

    def test_rejects_substring(self) -> None:
        assert not ExactMatch(name="NoDelay").matches(_d("NoDelayProvisionerStrategy"))

    def test_case_sensitive(self) -> None:
        assert not ExactMatch(name="nodelayprovisionerstrategy").matches(
            _d("NoDelayProvisionerStrategy")
        )

    def test_ignores_qualified_name(self) -> None:
        descriptor = ExtensionDescriptor(simple_name="Impl", qualified_name="Standard.Impl")
        assert not ExactMatch(name="Standard.Impl").matches(descriptor)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ExactMatch(name="")


class TestContainsMatch:
    """Tests for ContainsMatch."""

    def test_matches_substring(self) -> None:
        assert ContainsMatch(substring="Standard").matches(_d("StandardStrategyImpl"))

    def test_case_sensitive(self) -> None:
        assert not ContainsMatch(substring="standard").matches(_d("StandardStrategyImpl"))

    def test_no_match(self) -> None:
        assert not ContainsMatch(substring="Standard").matches(_d("NoDelayProvisionerStrategy"))


class TestMarkerMatch:
    """Tests for MarkerMatch."""

    def test_matches_marker(self) -> None:
        assert MarkerMatch(marker="no-delay").matches(_d("Renamed", "no-delay"))

    def test_name_is_irrelevant(self) -> None:
        assert not MarkerMatch(marker="no-delay").matches(_d("no-delay"))


class TestPolicyValidation:
    """Tests for the discriminated MatchPolicy union."""

    def test_validates_by_kind(self) -> None:
        adapter = TypeAdapter(MatchPolicy)
        assert adapter.validate_python({"kind": "exact", "name": "X"}) == ExactMatch(name="X")
        assert adapter.validate_python({"kind": "contains", "substring": "S"}) == ContainsMatch(
            substring="S"
        )
        assert adapter.validate_python({"kind": "marker", "marker": "m"}) == MarkerMatch(
            marker="m"
        )

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(MatchPolicy).validate_python({"kind": "regex", "pattern": ".*"})


class TestFind:
    """Tests for find and find_all."""

    def test_find_returns_first_in_registry_order(self) -> None:
        descriptors = [_d("NoDelay"), _d("StandardA"), _d("StandardB")]
        match = find(descriptors, ContainsMatch(substring="Standard"))
        assert match is not None
        assert match.simple_name == "StandardA"

    def test_find_none(self) -> None:
        assert find([_d("StandardStrategyImpl")], ExactMatch(name="Missing")) is None

    def test_find_empty(self) -> None:
        assert find([], ContainsMatch(substring="Standard")) is None

    def test_find_all_preserves_order(self) -> None:
        descriptors = [_d("StandardB"), _d("Other"), _d("StandardA")]
        names = [d.simple_name for d in find_all(descriptors, ContainsMatch(substring="Standard"))]
        assert names == ["StandardB", "StandardA"]

    @pytest.mark.parametrize(
        "policy",
        [ExactMatch(name="StandardStrategyImpl"), ContainsMatch(substring="Standard")],
    )
    def test_adding_descriptors_keeps_match(self, policy: MatchPolicy) -> None:
        base = [_d("StandardStrategyImpl")]
        assert find(base, policy) is not None
        grown = [_d("Another"), *base, _d("StandardStrategyImpl2")]
        assert find(grown, policy) is not None
