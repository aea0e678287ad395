"""Tests for domain/model/configuration.py."""

from pathlib import Path

import pytest

from structcheck.domain.model.configuration import StructuralConfig
from structcheck.domain.model.enums import ExtractionFailurePolicy, MissingPackagePolicy


class TestStructuralConfig:
    """Tests for StructuralConfig."""

    def test_defaults(self) -> None:
        config = StructuralConfig()

        assert config.rules_path == Path("structural.yml")
        assert config.baseline_path == Path("baseline.xml")
        assert config.source_roots == (Path("."),)
        assert config.workers == 1
        assert config.missing_package is MissingPackagePolicy.SKIP
        assert config.fail_fast

    def test_collect_is_not_fail_fast(self) -> None:
        config = StructuralConfig(on_extraction_error=ExtractionFailurePolicy.COLLECT)
        assert not config.fail_fast

    def test_empty_roots_raise(self) -> None:
        with pytest.raises(ValueError, match="source_roots"):
            StructuralConfig(source_roots=())

    def test_zero_workers_raise(self) -> None:
        with pytest.raises(ValueError, match="workers must be >= 1"):
            StructuralConfig(workers=0)

    def test_policy_type_checked(self) -> None:
        with pytest.raises(TypeError, match="MissingPackagePolicy"):
            StructuralConfig(missing_package="skip")  # type: ignore[arg-type]
