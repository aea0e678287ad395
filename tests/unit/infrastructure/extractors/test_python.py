"""Tests for extractors/python.py."""

from pathlib import Path

import pytest

from structcheck.domain.exceptions import ExtractionError
from structcheck.domain.model.source_fact import ImportFact
from structcheck.infrastructure.extractors.python import (
    PythonExtractor,
    is_module_file,
    module_exists,
    package_of,
)
from tests.factories import write_file


@pytest.fixture
def app(tmp_path: Path) -> Path:
    """src/app with ui, data and domain packages."""
    for package in ("app", "app/ui", "app/data", "app/domain"):
        write_file(tmp_path, f"src/{package}/__init__.py", "")
    write_file(tmp_path, "src/app/data/repo.py", "class Repo: ...\n")
    write_file(tmp_path, "src/app/helpers.py", "")
    return tmp_path / "src"


class TestPackageOf:
    """Tests for package_of."""

    def test_module_in_package(self, app: Path) -> None:
        path = write_file(app, "app/ui/screen.py", "")

        assert package_of(path) == ("app.ui", app.absolute())

    def test_init_belongs_to_own_package(self, app: Path) -> None:
        assert package_of(app / "app" / "ui" / "__init__.py")[0] == "app.ui"

    def test_script_outside_package(self, tmp_path: Path) -> None:
        path = write_file(tmp_path, "scripts/run.py", "")

        assert package_of(path) == (None, (tmp_path / "scripts").absolute())


class TestModuleExists:
    """Tests for module_exists."""

    def test_module_file(self, app: Path) -> None:
        assert module_exists(app, "app.data.repo")

    def test_package_dir(self, app: Path) -> None:
        assert module_exists(app, "app.data")

    def test_attribute(self, app: Path) -> None:
        assert not module_exists(app, "app.data.repo.Repo")


class TestIsModuleFile:
    """Tests for is_module_file."""

    def test_module_file(self, app: Path) -> None:
        assert is_module_file(app, "app.data.repo")

    def test_package_is_not_module_file(self, app: Path) -> None:
        assert not is_module_file(app, "app.data")

    def test_missing(self, app: Path) -> None:
        assert not is_module_file(app, "app.data.cache")


class TestPythonExtractor:
    """Tests for PythonExtractor."""

    def _extract(self, app: Path, source: str, relative: str = "app/ui/screen.py") -> tuple:
        fact = PythonExtractor().extract(write_file(app, relative, source))
        return fact.package_name, fact.imports

    def test_suffixes(self) -> None:
        assert PythonExtractor().suffixes == frozenset({".py"})

    def test_from_module_import_names_module(self, app: Path) -> None:
        package, imports = self._extract(app, "from app.data.repo import Repo, load\n")

        assert package == "app.ui"
        assert imports == (ImportFact("app.data.repo", 1, "repo"),)

    def test_from_package_import_module(self, app: Path) -> None:
        _, imports = self._extract(app, "from app.data import repo\n")

        assert imports == (ImportFact("app.data.repo", 1, "repo"),)

    def test_from_package_import_subpackage(self, app: Path) -> None:
        _, imports = self._extract(app, "from app import data\n")

        assert imports == (ImportFact("app.data.*", 1),)

    def test_from_package_import_class(self, app: Path) -> None:
        _, imports = self._extract(app, "from app import Config\n")

        assert imports == (ImportFact("app.Config", 1, "Config"),)

    def test_plain_import_is_wildcard(self, app: Path) -> None:
        _, imports = self._extract(app, "import os\nimport app.data.repo as r\n")

        assert imports == (
            ImportFact("os.*", 1),
            ImportFact("app.data.repo", 2, "repo"),
        )

    def test_star_import(self, app: Path) -> None:
        _, imports = self._extract(app, "from app.domain import *\n")

        assert imports == (ImportFact("app.domain.*", 1),)

    def test_relative_imports(self, app: Path) -> None:
        source = "from . import widgets\nfrom ..data.repo import Repo\nfrom .. import helpers\n"

        _, imports = self._extract(app, source)

        assert imports == (
            ImportFact("app.ui.widgets", 1, "widgets"),
            ImportFact("app.data.repo", 2, "repo"),
            ImportFact("app.helpers", 3, "helpers"),
        )

    def test_relative_import_in_init(self, app: Path) -> None:
        _, imports = self._extract(app, "from .screen import Screen\n", "app/ui/__init__.py")

        assert imports == (ImportFact("app.ui.screen.Screen", 1, "Screen"),)

    def test_relative_beyond_top_raises(self, app: Path) -> None:
        with pytest.raises(ExtractionError, match="beyond top-level package"):
            self._extract(app, "from ... import x\n")

    def test_nested_imports_in_line_order(self, app: Path) -> None:
        source = (
            "def load():\n"
            "    from app.data.repo import Repo\n"
            "    return Repo\n"
            "import json\n"
        )

        _, imports = self._extract(app, source)

        assert [i.line_number for i in imports] == [2, 4]

    def test_type_checking_kept_by_default(self, app: Path) -> None:
        source = "from typing import TYPE_CHECKING\nif TYPE_CHECKING:\n    from app.data.repo import Repo\n"

        _, imports = self._extract(app, source)

        assert ImportFact("app.data.repo", 3, "repo") in imports

    def test_type_checking_skipped(self, app: Path) -> None:
        source = (
            "import typing\n"
            "if typing.TYPE_CHECKING:\n"
            "    from app.data.repo import Repo\n"
            "else:\n"
            "    Repo = None\n"
        )
        path = write_file(app, "app/ui/screen.py", source)

        fact = PythonExtractor(skip_type_checking=True).extract(path)

        assert fact.imports == (ImportFact("typing.*", 1),)

    def test_syntax_error_raises(self, app: Path) -> None:
        with pytest.raises(ExtractionError, match="syntax error"):
            self._extract(app, "def broken(:\n")

    def test_module_without_package(self, tmp_path: Path) -> None:
        path = write_file(tmp_path, "run.py", "import app\n")

        fact = PythonExtractor().extract(path)

        assert fact.package_name is None
        assert fact.imports == (ImportFact("app.*", 1),)
