"""Extractor registry: picks a front end by file suffix."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from structcheck.domain.exceptions.extraction import ExtractionError
from structcheck.domain.model.source_fact import SourceFact
from structcheck.domain.ports.source_extractor import SourceExtractorPort
from structcheck.infrastructure.extractors.java import JavaExtractor
from structcheck.infrastructure.extractors.kotlin import KotlinExtractor
from structcheck.infrastructure.extractors.python import PythonExtractor


class ExtractorRegistry(SourceExtractorPort):
    """Dispatches each file to the front end registered for its suffix.

    Itself a SourceExtractorPort, so the checker never knows which
    languages are involved.

    Raises:
        ValueError: If two front ends claim the same suffix
    """

    def __init__(self, extractors: Sequence[SourceExtractorPort]) -> None:
        by_suffix: dict[str, SourceExtractorPort] = {}
        for extractor in extractors:
            for suffix in extractor.suffixes:
                if suffix in by_suffix:
                    raise ValueError(f"suffix {suffix!r} registered twice")
                by_suffix[suffix] = extractor
        self._by_suffix = by_suffix

    @property
    def suffixes(self) -> frozenset[str]:
        return frozenset(self._by_suffix)

    def extract(self, path: Path) -> SourceFact:
        """Extract with the front end for path's suffix.

        Raises:
            ExtractionError: No front end for suffix, or front end failed
        """
        extractor = self._by_suffix.get(path.suffix)
        if extractor is None:
            raise ExtractionError(path, f"no extractor registered for suffix {path.suffix!r}")
        return extractor.extract(path)


def default_registry(*, skip_type_checking: bool = False) -> ExtractorRegistry:
    """Registry with Kotlin, Java and Python front ends."""
    return ExtractorRegistry(
        (
            KotlinExtractor(),
            JavaExtractor(),
            PythonExtractor(skip_type_checking=skip_type_checking),
        )
    )
