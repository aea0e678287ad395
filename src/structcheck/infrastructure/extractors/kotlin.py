"""Kotlin front end: package header and import directives."""

from __future__ import annotations

import re
from pathlib import Path

from structcheck.domain.model.source_fact import WILDCARD, ImportFact, SourceFact
from structcheck.domain.ports.source_extractor import SourceExtractorPort
from structcheck.infrastructure.extractors._source import (
    DOTTED,
    SEGMENT,
    line_of,
    mask_comments,
    normalize_dotted,
    read_source,
)

_PACKAGE = re.compile(rf"^[ \t]*package[ \t]+({DOTTED})", re.MULTILINE)
_IMPORT = re.compile(
    rf"^[ \t]*import[ \t]+({DOTTED}(?:[ \t]*\.[ \t]*\*)?)(?:[ \t]+as[ \t]+{SEGMENT})?",
    re.MULTILINE,
)


class KotlinExtractor(SourceExtractorPort):
    """Extracts package and imports from Kotlin sources.

    Handles:
        package com.example.ui
        @file:JvmName("Screens") before the package header
        import com.example.data.Repo
        import com.example.data.Repo as DataRepo   (simple name stays Repo)
        import com.example.data.*
        import com.example.`in`.Thing              (backticks dropped)

    Comments and string literals are masked first, so commented-out
    imports are ignored. Stateless: safe to share across threads.
    """

    @property
    def suffixes(self) -> frozenset[str]:
        return frozenset({".kt", ".kts"})

    def extract(self, path: Path) -> SourceFact:
        """Extract package and imports of a Kotlin file.

        Raises:
            ExtractionError: If file cannot be read
        """
        text = mask_comments(read_source(path), nested_comments=True, string_templates=True)
        return SourceFact(
            file_path=path,
            package_name=_find_package(text),
            imports=_find_imports(text),
        )


def _find_package(text: str) -> str | None:
    match = _PACKAGE.search(text)
    if match is None:
        return None
    return normalize_dotted(match.group(1))


def _find_imports(text: str) -> tuple[ImportFact, ...]:
    imports: list[ImportFact] = []
    for match in _IMPORT.finditer(text):
        import_path = normalize_dotted(match.group(1))
        simple_name = import_path.rsplit(".", 1)[-1]
        imports.append(
            ImportFact(
                import_path=import_path,
                line_number=line_of(text, match.start(1)),
                simple_name=None if simple_name == WILDCARD else simple_name,
            )
        )
    return tuple(imports)
