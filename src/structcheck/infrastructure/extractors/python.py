"""Python front end: package from the filesystem, imports from the AST."""

from __future__ import annotations

import ast
from pathlib import Path

from structcheck.domain.exceptions.extraction import ExtractionError
from structcheck.domain.model.source_fact import ImportFact, SourceFact
from structcheck.domain.ports.source_extractor import SourceExtractorPort
from structcheck.infrastructure.extractors._source import read_source


def package_of(path: Path) -> tuple[str | None, Path]:
    """Dotted package a module belongs to, and the directory holding its top package.

    Walks up while the directory has an `__init__.py`. A module and its
    package's `__init__.py` belong to the same package.

    Examples:
        src/app/ui/screen.py (app/, ui/ have __init__.py) → ("app.ui", src)
        src/app/ui/__init__.py → ("app.ui", src)
        scripts/run.py (no __init__.py) → (None, scripts)
    """
    directory = path.absolute().parent
    parts: list[str] = []
    while (directory / "__init__.py").is_file() and directory.name.isidentifier():
        parts.append(directory.name)
        directory = directory.parent
    if not parts:
        return None, directory
    return ".".join(reversed(parts)), directory


def module_exists(root: Path, dotted: str) -> bool:
    """True if `dotted` names a module or package under root."""
    target = root.joinpath(*dotted.split("."))
    return (
        target.with_name(f"{target.name}.py").is_file()
        or (target / "__init__.py").is_file()
        or target.is_dir()
    )


def is_module_file(root: Path, dotted: str) -> bool:
    """True if `dotted` names a plain module (a `.py` file, not a package) under root."""
    target = root.joinpath(*dotted.split("."))
    is_file = target.with_name(f"{target.name}.py").is_file()
    return is_file and not (target / "__init__.py").is_file()


class PythonExtractor(SourceExtractorPort):
    """Extracts package and imports from Python modules.

    Mapping to import facts:
        import a.b             → wildcard of a.b (a package or a foreign module)
        from a.b import *      → wildcard of a.b
        from a.b import C      → a.b.C, simple name C
        from a.b import sub    → wildcard of a.b.sub, if a/b/sub is a package
        from .c import D       → resolved against the file's package

    A module file under the root is a member of its package, like a
    class: `import a.b.mod`, `from a.b import mod` and `from a.b.mod
    import f` all give a.b.mod, simple name mod.

    Stateless: safe to share across threads.
    """

    def __init__(self, *, skip_type_checking: bool = False) -> None:
        """Initialize extractor.

        Args:
            skip_type_checking: Ignore imports under `if TYPE_CHECKING:`
        """
        self._skip_type_checking = skip_type_checking

    @property
    def suffixes(self) -> frozenset[str]:
        return frozenset({".py"})

    def extract(self, path: Path) -> SourceFact:
        """Extract package and imports of a Python module.

        Raises:
            ExtractionError: If file cannot be read, has a syntax error,
                or a relative import escapes the top-level package
        """
        source = read_source(path)
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ExtractionError(path, f"syntax error: {e}") from e

        package_name, root = package_of(path)
        visitor = _ImportVisitor(path, package_name, root, self._skip_type_checking)
        visitor.visit(tree)

        imports = sorted(visitor.imports, key=lambda i: i.line_number)
        return SourceFact(file_path=path, package_name=package_name, imports=tuple(imports))


class _ImportVisitor(ast.NodeVisitor):
    """Collects import facts, optionally skipping TYPE_CHECKING blocks."""

    def __init__(
        self,
        path: Path,
        package_name: str | None,
        root: Path,
        skip_type_checking: bool,
    ) -> None:
        self.path = path
        self.package_parts = tuple(package_name.split(".")) if package_name else ()
        self.root = root
        self.skip_type_checking = skip_type_checking
        self.imports: list[ImportFact] = []

    def visit_Import(self, node: ast.Import) -> None:
        """Handle: import X, import X as Y."""
        for alias in node.names:
            self.imports.append(self._module_fact(alias.name, node.lineno))

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        """Handle: from X import Y, from . import Y."""
        module = self._resolve(node)
        if not module:
            return

        if "." in module and is_module_file(self.root, module):
            self.imports.append(self._module_fact(module, node.lineno))
            return

        for alias in node.names:
            if alias.name == "*":
                self.imports.append(ImportFact.wildcard(module, node.lineno))
                continue

            dotted = f"{module}.{alias.name}"
            if module_exists(self.root, dotted):
                self.imports.append(self._module_fact(dotted, node.lineno))
            else:
                self.imports.append(
                    ImportFact(import_path=dotted, line_number=node.lineno, simple_name=alias.name)
                )

    def visit_If(self, node: ast.If) -> None:
        """Skip TYPE_CHECKING body when configured."""
        if self.skip_type_checking and _is_type_checking_block(node):
            for child in node.orelse:
                self.visit(child)
            return
        self.generic_visit(node)

    def _module_fact(self, dotted: str, line_number: int) -> ImportFact:
        """Import of a whole module or package."""
        if "." in dotted and is_module_file(self.root, dotted):
            name = dotted.rsplit(".", 1)[1]
            return ImportFact(import_path=dotted, line_number=line_number, simple_name=name)
        return ImportFact.wildcard(dotted, line_number)

    def _resolve(self, node: ast.ImportFrom) -> str:
        """Absolute module of a from-import.

        Level 1 is the file's own package, each extra level one parent up.
        """
        if node.level == 0:
            return node.module or ""

        keep = len(self.package_parts) - (node.level - 1)
        if not self.package_parts or keep <= 0:
            raise ExtractionError(
                self.path,
                f"line {node.lineno}: relative import beyond top-level package",
            )

        base = self.package_parts[:keep]
        if node.module:
            return ".".join((*base, node.module))
        return ".".join(base)


def _is_type_checking_block(node: ast.If) -> bool:
    """Check if if-statement is TYPE_CHECKING guard."""
    test = node.test

    # if TYPE_CHECKING:
    if isinstance(test, ast.Name) and test.id == "TYPE_CHECKING":
        return True

    # if typing.TYPE_CHECKING:
    return (
        isinstance(test, ast.Attribute)
        and test.attr == "TYPE_CHECKING"
        and isinstance(test.value, ast.Name)
        and test.value.id == "typing"
    )
