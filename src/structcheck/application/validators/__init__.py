"""Import rule validators.

Validators judge one SourceFact against the RuleSet:
- ImportRuleValidator: forbidden imports and classes beside packages
"""

from structcheck.application.validators._base import BaseValidator
from structcheck.application.validators.import_rule_validator import (
    ImportRuleValidator,
    resolve_anchor,
)

__all__ = [
    # Base
    "BaseValidator",
    # Validators
    "ImportRuleValidator",
    "resolve_anchor",
]
