"""Import rule validator.

Judges each import of a file against the RuleSet.

The file's enforcement anchor is the deepest segment of its package
that is a checked name. Segments before the anchor form the parent
path shared by all checked packages of that module::

    package com.example.ui.home      checked: ui, data, domain
                         ^^ anchor   parent path: com.example

An import is judged only when it reaches into that parent path:

    com.example.data.Repo      → `data` not allowed for `ui` → ForbiddenImport
    com.example.Helper         → class beside the packages → FileOnSameLevelAsPackages
    org.other.Thing            → outside the parent path → ignored
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Self

from structcheck.application.validators._base import BaseValidator
from structcheck.domain.exceptions.extraction import ExtractionError
from structcheck.domain.model.enums import MissingPackagePolicy
from structcheck.domain.model.violation import (
    FileOnSameLevelAsPackages,
    ForbiddenImport,
    Violation,
)

if TYPE_CHECKING:
    from structcheck.domain.model.configuration import StructuralConfig
    from structcheck.domain.model.rule_set import RuleSet
    from structcheck.domain.model.source_fact import ImportFact, SourceFact

logger = logging.getLogger(__name__)


def resolve_anchor(
    package_parts: tuple[str, ...],
    rule_set: RuleSet,
) -> tuple[str, tuple[str, ...]] | None:
    """Find the checked package enclosing a package path.

    Args:
        package_parts: Dot-split declared package
        rule_set: Rules with the checked package names

    Returns:
        (local_package, parent_path_parts), or None if no segment is checked
    """
    for index in range(len(package_parts) - 1, -1, -1):
        if rule_set.is_checked(package_parts[index]):
            return package_parts[index], package_parts[:index]
    return None


class ImportRuleValidator(BaseValidator):
    """Detects forbidden imports and classes beside checked packages.

    Stateless after construction: RuleSet is immutable and shared.

    Example:
        validator = ImportRuleValidator(rule_set)
        violations = validator.validate(fact)
    """

    def __init__(
        self,
        rule_set: RuleSet,
        *,
        missing_package: MissingPackagePolicy = MissingPackagePolicy.SKIP,
    ) -> None:
        """Initialize validator.

        Args:
            rule_set: Canonical rules
            missing_package: What to do with files that declare no package
        """
        self._rule_set = rule_set
        self._missing_package = missing_package

    @classmethod
    def from_config(cls, rule_set: RuleSet, config: StructuralConfig) -> Self:
        """Create validator honoring the configured missing-package policy."""
        return cls(rule_set, missing_package=config.missing_package)

    @property
    def rule_set(self) -> RuleSet:
        """Rules this validator enforces."""
        return self._rule_set

    def validate(self, fact: SourceFact) -> tuple[Violation, ...]:
        """Validate imports of one file.

        Args:
            fact: Package and imports of the file

        Returns:
            Violations in source line order

        Raises:
            ExtractionError: File has no package and policy is FAIL
        """
        if not fact.has_package:
            if self._missing_package is MissingPackagePolicy.FAIL:
                raise ExtractionError(fact.file_path, "no package declaration")
            logger.debug("skipping %s: no package declaration", fact.file_path)
            return ()

        anchor = resolve_anchor(fact.package_parts, self._rule_set)
        if anchor is None:
            return ()
        local_package, parent_parts = anchor

        violations: list[Violation] = []
        for imp in sorted(fact.imports, key=lambda i: i.line_number):
            violation = self._check_import(fact, imp, local_package, parent_parts)
            if violation is not None:
                violations.append(violation)
        return tuple(violations)

    def _check_import(
        self,
        fact: SourceFact,
        imp: ImportFact,
        local_package: str,
        parent_parts: tuple[str, ...],
    ) -> Violation | None:
        imported_package = imp.imported_package
        if not imported_package:
            return None
        imported_parts = tuple(imported_package.split("."))
        depth = len(parent_parts)

        if imported_parts[:depth] != parent_parts:
            return None

        if len(imported_parts) == depth:
            # Wildcard of the parent path names no class
            if imp.simple_name is None:
                return None
            return FileOnSameLevelAsPackages(
                file_path=fact.file_path,
                line_number=imp.line_number,
                class_name=imp.simple_name,
                imported_package=imported_package,
            )

        if self._rule_set.may_import(local_package, imported_parts[depth]):
            return None

        return ForbiddenImport(
            file_path=fact.file_path,
            line_number=imp.line_number,
            importing_package=fact.package_name or "",
            imported_package=imported_package,
        )
