"""Tests for services/rule_parser.py."""

import logging

import pytest

from structcheck.application.services.rule_parser import (
    parse_chain,
    parse_document,
    parse_rules,
)
from structcheck.domain.exceptions import ConfigParseError


class TestParseChain:
    """Tests for parse_chain."""

    def test_right_arrow_adds_left_to_right(self) -> None:
        assert parse_chain("test -> data") == (("data", "test"),)

    def test_left_arrow_adds_right_to_left(self) -> None:
        assert parse_chain("local <- data") == (("local", "data"),)

    def test_mixed_arrows(self) -> None:
        assert parse_chain("data <- domain -> ui") == (("data", "domain"), ("ui", "domain"))

    def test_long_chain(self) -> None:
        assert parse_chain("a -> b -> c") == (("b", "a"), ("c", "b"))

    def test_terms_trimmed(self) -> None:
        assert parse_chain("  a<-b  ") == (("a", "b"),)

    def test_no_arrow_raises(self) -> None:
        with pytest.raises(ConfigParseError, match="no '<-' or '->' arrow"):
            parse_chain("data domain")

    def test_empty_term_raises(self) -> None:
        with pytest.raises(ConfigParseError, match="empty package name"):
            parse_chain("data <- ")


class TestParseRulesChainForm:
    """Tests for parse_rules with list of chains."""

    def test_self_seeding(self) -> None:
        rule_set = parse_rules(["data", "ui"], [])

        assert rule_set.allowed_for("data") == ("data",)
        assert rule_set.allowed_for("ui") == ("ui",)

    def test_layered_example(self) -> None:
        rule_set = parse_rules(["data", "domain", "ui"], ["data <- domain -> ui"])

        assert rule_set.allowed_for("data") == ("data", "domain")
        assert rule_set.allowed_for("ui") == ("ui", "domain")
        assert rule_set.allowed_for("domain") == ("domain",)

    def test_duplicate_edges_collapse(self) -> None:
        rule_set = parse_rules(["ui", "domain"], ["domain -> ui", "ui <- domain"])

        assert rule_set.allowed_for("ui") == ("ui", "domain")

    def test_no_transitivity(self) -> None:
        rule_set = parse_rules(["a", "b", "c"], ["a <- b", "b <- c"])

        assert rule_set.may_import("a", "b")
        assert rule_set.may_import("b", "c")
        assert not rule_set.may_import("a", "c")

    def test_non_string_entry_raises(self) -> None:
        with pytest.raises(ConfigParseError, match="chain rule must be a string"):
            parse_rules(["a"], [42])


class TestParseRulesMapForm:
    """Tests for parse_rules with mapping."""

    def test_single_key(self) -> None:
        rule_set = parse_rules(["domain", "ui", "data"], {"domain": ["ui", "data"]})

        assert rule_set.allowed_for("domain") == ("domain", "ui", "data")

    def test_tuple_key_expands(self) -> None:
        rule_set = parse_rules(["local", "remote", "data"], {("local", "remote"): ["data"]})

        assert rule_set.may_import("local", "data")
        assert rule_set.may_import("remote", "data")

    def test_equivalent_to_chain_form(self) -> None:
        chain = parse_rules(["data", "domain", "ui"], ["data <- domain -> ui"])
        mapping = parse_rules(["data", "domain", "ui"], {"data": ["domain"], "ui": ["domain"]})

        assert chain == mapping

    def test_non_list_value_raises(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a list"):
            parse_rules(["ui"], {"ui": "domain"})

    def test_non_string_name_raises(self) -> None:
        with pytest.raises(ConfigParseError, match="must be non-empty string"):
            parse_rules(["ui"], {"ui": [True]})


class TestParseRulesErrors:
    """Tests for parse_rules configuration errors."""

    def test_rules_absent(self) -> None:
        with pytest.raises(ConfigParseError, match="No rules specified in config file"):
            parse_rules(["ui"], None)

    def test_rules_wrong_shape(self) -> None:
        with pytest.raises(ConfigParseError, match="Invalid rules format"):
            parse_rules(["ui"], 42)

    def test_rules_string(self) -> None:
        with pytest.raises(ConfigParseError, match="Invalid rules format"):
            parse_rules(["ui"], "ui <- domain")

    def test_empty_packages(self) -> None:
        with pytest.raises(
            ConfigParseError, match="No packages specified to check in config file"
        ):
            parse_rules([], ["a <- b"])

    def test_duplicate_packages(self) -> None:
        with pytest.raises(ConfigParseError, match="duplicate package names"):
            parse_rules(["ui", "ui"], [])

    def test_dotted_package(self) -> None:
        with pytest.raises(ConfigParseError, match="single segment"):
            parse_rules(["com.ui"], [])

    def test_unchecked_reference_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="structcheck"):
            parse_rules(["ui"], ["ui <- domain"])

        assert "'domain' which is not in 'packages'" in caplog.text


class TestParseDocument:
    """Tests for parse_document."""

    def test_valid(self) -> None:
        rule_set = parse_document({"packages": ["ui", "domain"], "rules": ["ui <- domain"]})
        assert rule_set.may_import("ui", "domain")

    def test_not_mapping(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a mapping"):
            parse_document(["ui"])

    def test_missing_packages(self) -> None:
        with pytest.raises(ConfigParseError, match="No packages specified"):
            parse_document({"rules": []})

    def test_missing_rules(self) -> None:
        with pytest.raises(ConfigParseError, match="No rules specified"):
            parse_document({"packages": ["ui"]})

    def test_packages_string(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a list"):
            parse_document({"packages": "ui", "rules": []})
