"""Java front end: package declaration and import directives."""

from __future__ import annotations

import re
from pathlib import Path

from structcheck.domain.model.source_fact import WILDCARD, ImportFact, SourceFact
from structcheck.domain.ports.source_extractor import SourceExtractorPort
from structcheck.infrastructure.extractors._source import (
    DOTTED,
    line_of,
    mask_comments,
    normalize_dotted,
    read_source,
)

# package-info.java may annotate the package on the same line
_PACKAGE = re.compile(
    rf"^[ \t]*(?:@[\w.]+(?:\([^)\n]*\))?[ \t]*)*package[ \t]+({DOTTED})[ \t]*;",
    re.MULTILINE,
)
_IMPORT = re.compile(
    rf"^[ \t]*import[ \t]+(?:static[ \t]+)?({DOTTED}(?:[ \t]*\.[ \t]*\*)?)[ \t]*;",
    re.MULTILINE,
)


class JavaExtractor(SourceExtractorPort):
    """Extracts package and imports from Java sources.

    Static imports are ordinary imports named by their member:
    `import static a.b.C.m;` → path "a.b.C.m", simple name "m",
    so the imported package is "a.b.C".

    Stateless: safe to share across threads.
    """

    @property
    def suffixes(self) -> frozenset[str]:
        return frozenset({".java"})

    def extract(self, path: Path) -> SourceFact:
        """Extract package and imports of a Java file.

        Raises:
            ExtractionError: If file cannot be read
        """
        text = mask_comments(read_source(path))

        package_match = _PACKAGE.search(text)
        package_name = normalize_dotted(package_match.group(1)) if package_match else None

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

        return SourceFact(file_path=path, package_name=package_name, imports=tuple(imports))
