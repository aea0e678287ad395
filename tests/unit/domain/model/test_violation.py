"""Tests for domain/model/violation.py."""

from pathlib import Path

import pytest

from structcheck.domain.model.enums import ViolationKind
from structcheck.domain.model.violation import (
    FileOnSameLevelAsPackages,
    ForbiddenImport,
    sort_key,
)
from tests.factories import make_forbidden, make_same_level


class TestForbiddenImport:
    """Tests for ForbiddenImport."""

    def test_kind(self) -> None:
        assert make_forbidden().kind is ViolationKind.FORBIDDEN_IMPORT

    def test_message(self) -> None:
        violation = make_forbidden("com.example.ui", "com.example.data")
        assert violation.message == "`com.example.ui` cannot import from `com.example.data`"

    def test_describe(self) -> None:
        violation = make_forbidden(line=7, file=Path("src/Test.kt"))
        assert violation.describe() == (
            "src/Test.kt:7 : `com.example.ui` cannot import from `com.example.data`"
        )

    def test_empty_importing_package_raises(self) -> None:
        with pytest.raises(ValueError, match="importing_package"):
            ForbiddenImport(Path("A.kt"), 1, "", "com.example.data")

    def test_zero_line_raises(self) -> None:
        with pytest.raises(ValueError, match="line_number"):
            ForbiddenImport(Path("A.kt"), 0, "a.ui", "a.data")


class TestFileOnSameLevelAsPackages:
    """Tests for FileOnSameLevelAsPackages."""

    def test_kind(self) -> None:
        assert make_same_level().kind is ViolationKind.FILE_ON_SAME_LEVEL

    def test_message(self) -> None:
        violation = make_same_level("Helper", "com.example")
        assert violation.message == (
            'class "Helper" is on the same level as "com.example" package. Move into a package'
        )

    def test_empty_class_name_raises(self) -> None:
        with pytest.raises(ValueError, match="class_name"):
            FileOnSameLevelAsPackages(Path("A.kt"), 1, "", "com.example")


class TestSortKey:
    """Tests for sort_key."""

    def test_orders_by_path_then_line(self) -> None:
        b = make_forbidden(line=1, file=Path("b/B.kt"))
        a2 = make_forbidden(line=9, file=Path("a/A.kt"))
        a1 = make_same_level(line=2, file=Path("a/A.kt"))

        assert sorted([b, a2, a1], key=sort_key) == [a1, a2, b]
