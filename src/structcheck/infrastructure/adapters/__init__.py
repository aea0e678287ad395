"""Infrastructure adapters (port implementations)."""

from structcheck.infrastructure.adapters.xml_baseline import XmlBaselineRepository
from structcheck.infrastructure.adapters.yaml_rules import YamlRuleRepository

__all__ = ["YamlRuleRepository", "XmlBaselineRepository"]
