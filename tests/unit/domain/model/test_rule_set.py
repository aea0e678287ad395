"""Tests for domain/model/rule_set.py."""

import pytest

from structcheck.domain.model.rule_set import RuleSet


def _rule_set(**allowed: tuple[str, ...]) -> RuleSet:
    return RuleSet(checked_packages=tuple(allowed), allowed=allowed)


class TestRuleSetCreation:
    """Tests for RuleSet validation."""

    def test_valid(self) -> None:
        rule_set = _rule_set(data=("data",), ui=("ui", "data"))

        assert rule_set.checked_packages == ("data", "ui")
        assert rule_set.allowed_for("ui") == ("ui", "data")

    def test_empty_checked_packages_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            RuleSet(checked_packages=(), allowed={})

    def test_duplicate_checked_packages_raises(self) -> None:
        with pytest.raises(ValueError, match="duplicates"):
            RuleSet(checked_packages=("ui", "ui"), allowed={"ui": ("ui",)})

    def test_dotted_checked_package_raises(self) -> None:
        with pytest.raises(ValueError, match="single non-empty segment"):
            RuleSet(checked_packages=("a.b",), allowed={"a.b": ("a.b",)})

    def test_missing_self_edge_raises(self) -> None:
        with pytest.raises(ValueError, match="import itself"):
            RuleSet(checked_packages=("ui",), allowed={"ui": ("data",)})

    def test_duplicate_allowed_raises(self) -> None:
        with pytest.raises(ValueError, match="contain duplicates"):
            _rule_set(ui=("ui", "data", "data"))

    def test_allowed_is_read_only(self) -> None:
        source = {"ui": ("ui",)}
        rule_set = RuleSet(checked_packages=("ui",), allowed=source)
        source["ui"] = ("ui", "data")

        assert rule_set.allowed_for("ui") == ("ui",)
        with pytest.raises(TypeError):
            rule_set.allowed["ui"] = ()  # type: ignore[index]

    def test_is_frozen(self) -> None:
        rule_set = _rule_set(ui=("ui",))
        with pytest.raises(AttributeError):
            rule_set.checked_packages = ()  # type: ignore[misc]


class TestRuleSetQueries:
    """Tests for RuleSet lookups."""

    def test_is_checked(self) -> None:
        rule_set = _rule_set(ui=("ui",))

        assert rule_set.is_checked("ui")
        assert not rule_set.is_checked("data")

    def test_allowed_for_unknown_is_empty(self) -> None:
        assert _rule_set(ui=("ui",)).allowed_for("other") == ()

    def test_may_import(self) -> None:
        rule_set = _rule_set(ui=("ui", "domain"), domain=("domain",))

        assert rule_set.may_import("ui", "domain")
        assert not rule_set.may_import("domain", "ui")

    def test_edges_exclude_self(self) -> None:
        rule_set = _rule_set(ui=("ui", "domain"), domain=("domain",))

        assert rule_set.edges == (("ui", "domain"),)
