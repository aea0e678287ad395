"""Source fact extractors (one front end per language)."""

from structcheck.infrastructure.extractors.java import JavaExtractor
from structcheck.infrastructure.extractors.kotlin import KotlinExtractor
from structcheck.infrastructure.extractors.python import PythonExtractor
from structcheck.infrastructure.extractors.registry import ExtractorRegistry, default_registry

__all__ = [
    "KotlinExtractor",
    "JavaExtractor",
    "PythonExtractor",
    "ExtractorRegistry",
    "default_registry",
]
