"""YAML rule repository adapter.

Implements RuleRepositoryPort with PyYAML::

    packages:
      - data
      - domain
      - ui
    rules:
      - data <- domain -> ui
"""

from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path

import yaml
from yaml.constructor import ConstructorError

from structcheck.application.services.rule_parser import parse_document
from structcheck.domain.exceptions.config import ConfigNotFoundError, ConfigParseError
from structcheck.domain.model.rule_set import RuleSet
from structcheck.domain.ports.rule_repository import RuleRepositoryPort


class _RulesLoader(yaml.SafeLoader):
    """SafeLoader that accepts sequence keys (`? [local, remote]`) as tuples."""

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict:
        self.flatten_mapping(node)
        mapping: dict[object, object] = {}
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.SequenceNode):
                key = tuple(self.construct_sequence(key_node, deep=True))
            else:
                key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found unhashable key",
                    key_node.start_mark,
                )
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


def load_rules_text(text: str, path: Path | None = None) -> RuleSet:
    """Parse YAML rule document text.

    Raises:
        ConfigParseError: YAML syntax error or malformed document
    """
    try:
        data = yaml.load(text, Loader=_RulesLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"invalid YAML: {e}", path) from e
    return parse_document(data, path)


class YamlRuleRepository(RuleRepositoryPort):
    """Loads rules from a YAML file. Stateless."""

    def load(self, path: Path) -> RuleSet:
        """Load and normalize rules.

        Raises:
            ConfigNotFoundError: If file does not exist
            ConfigParseError: If file cannot be read or rules are malformed
        """
        if not path.is_file():
            raise ConfigNotFoundError(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(f"cannot read: {e}", path) from e
        return load_rules_text(text, path)
